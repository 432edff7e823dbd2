"""Shared feed constants.

Centralises the upstream URLs, the feed's implied time zone and the
output precision used by the cleaning pipeline and the CLI.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Upstream feed
# ---------------------------------------------------------------------------

DEFAULT_FEED_URL: str = "https://www.rfs.nsw.gov.au/feeds/majorIncidents.json"
"""NSW RFS Major Incidents GeoJSON feed."""

GENERIC_INCIDENT_LINK: str = "http://www.rfs.nsw.gov.au/fire-information/fires-near-me"
"""Landing page the feed uses as ``link`` for every incident."""

DEFAULT_REQUEST_TIMEOUT_S: float = 30.0

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

FEED_TIMEZONE: str = "Australia/Sydney"
"""Feed dates carry no offset; they are wall-clock times in this zone."""

DEFAULT_COORDINATE_PRECISION: int = 4
"""Decimal places kept on every output coordinate (~11 m at the equator)."""

MAX_COORDINATE_PRECISION: int = 15
