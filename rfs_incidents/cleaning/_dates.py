"""Date normalization for the two date encodings used by the feed.

The feed publishes wall-clock times without an offset:

- ``pubDate``: ``"3/01/2018 5:20:00 AM"`` (day/month/year, 12-hour clock)
- ``UPDATED`` inside the description: ``"3 Jan 2018 16:20"`` (24-hour clock)

Both are local times in Sydney.  They are re-emitted as ISO 8601 with the
offset in force at that instant, so daylight saving is accounted for.
"""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from rfs_incidents.cleaning._constants import PUB_DATE_FORMAT, UPDATED_DATE_FORMAT
from rfs_incidents.core.constants import FEED_TIMEZONE
from rfs_incidents.core.exceptions import MalformedDateError


def normalize_date(text: str, date_format: str, *, timezone: str = FEED_TIMEZONE) -> str:
    """Parse a local feed date and return it as an ISO 8601 string.

    Args:
        text: Date string as found in the feed.
        date_format: ``strptime`` pattern (``PUB_DATE_FORMAT`` or
            ``UPDATED_DATE_FORMAT``).
        timezone: IANA zone the wall-clock time is expressed in.

    Returns:
        e.g. ``"2018-01-03T05:20:00+11:00"``.

    Raises:
        MalformedDateError: If *text* does not match *date_format*.
    """
    try:
        naive = datetime.strptime(text.strip(), date_format)
    except (AttributeError, ValueError) as exc:
        raise MalformedDateError(str(text), date_format) from exc

    zone = ZoneInfo(timezone)
    # Round-trip through UTC so a wall time inside a DST gap lands on the
    # real local time (02:30 on change-over day becomes 03:30+11:00).
    localized = naive.replace(tzinfo=zone).astimezone(UTC).astimezone(zone)
    return localized.isoformat()


def clean_pub_date(text: str, *, timezone: str = FEED_TIMEZONE) -> str:
    """Normalize a ``pubDate`` value like ``"3/01/2018 5:20:00 AM"``."""
    return normalize_date(text, PUB_DATE_FORMAT, timezone=timezone)


def clean_updated_date(text: str, *, timezone: str = FEED_TIMEZONE) -> str:
    """Normalize a description ``UPDATED`` value like ``"3 Jan 2018 16:20"``."""
    return normalize_date(text, UPDATED_DATE_FORMAT, timezone=timezone)
