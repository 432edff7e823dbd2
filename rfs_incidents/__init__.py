"""NSW RFS Major Incidents feed cleaner.

Fetches the NSW Rural Fire Service "Major Incidents" GeoJSON feed and
normalizes it into canonical GeoJSON: flattened geometries, unpacked
description fields, ISO 8601 dates, limited coordinate precision and
RFC 7946 winding order.
"""

__version__ = "0.1.0"
