"""Feed cleaning stages as composable pipeline functions.

Each stage is a pure function over decoded GeoJSON:

- **_geometry**: flatten nested GeometryCollections, collapse to multipart
- **_properties**: unpack the description, rename and drop fields
- **_dates**: feed date formats → ISO 8601 with the Sydney offset
- **_tokens**: display strings → lowercase dash tokens
- **_postprocess**: coordinate precision and RFC 7946 winding order

The orchestrator in ``rfs_incidents.orchestrators.feed_pipeline`` chains
them over a whole feature collection.
"""

from __future__ import annotations

from rfs_incidents.cleaning._constants import PUB_DATE_FORMAT, UPDATED_DATE_FORMAT
from rfs_incidents.cleaning._dates import clean_pub_date, clean_updated_date, normalize_date
from rfs_incidents.cleaning._geometry import (
    MISSING,
    clean_geometry,
    flatten_geometries,
    is_uniform_type,
)
from rfs_incidents.cleaning._postprocess import limit_precision, rewind
from rfs_incidents.cleaning._properties import clean_properties, unpack_description
from rfs_incidents.cleaning._tokens import to_token
from rfs_incidents.core.exceptions import MalformedDateError, MissingFieldError

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "MISSING",
    "PUB_DATE_FORMAT",
    "UPDATED_DATE_FORMAT",
    "MalformedDateError",
    "MissingFieldError",
    "clean_geometry",
    "clean_properties",
    "clean_pub_date",
    "clean_updated_date",
    "flatten_geometries",
    "is_uniform_type",
    "limit_precision",
    "normalize_date",
    "rewind",
    "to_token",
    "unpack_description",
]
