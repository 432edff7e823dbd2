"""Property unpacking and renaming for feed features.

The feed packs most incident attributes into a single ``description``
string such as::

    "ALERT LEVEL: Advice <br />LOCATION: Wattle Flat <br />FIRE: Yes <br />
     STATUS: Under control <br />UPDATED: 3 Jan 2018 16:20"

``clean_properties`` unpacks it into individual properties and applies a
simplified schema: ISO 8601 dates, token values for enum-like fields, a
boolean ``fire`` flag, and no duplicated or generic fields.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rfs_incidents.cleaning._constants import (
    ALERT_LEVEL_KEY,
    CATEGORY_KEY,
    CLEAN_PUB_DATE_KEY,
    DESCRIPTION_KEY,
    DESCRIPTION_LINE,
    DESCRIPTION_LINE_BREAK,
    FIRE_KEY,
    FIRE_TRUE_PATTERN,
    LINK_KEY,
    PERMALINK_KEY,
    PUB_DATE_KEY,
    TOKEN_KEYS,
    UPDATED_KEY,
)
from rfs_incidents.cleaning._dates import clean_pub_date, clean_updated_date
from rfs_incidents.cleaning._tokens import to_token
from rfs_incidents.core.constants import FEED_TIMEZONE, GENERIC_INCIDENT_LINK
from rfs_incidents.core.exceptions import MissingFieldError
from rfs_incidents.models.report import InconsistentFieldWarning

if TYPE_CHECKING:
    from rfs_incidents.models.geojson import Properties

logger = logging.getLogger("rfs_incidents.cleaning")


def unpack_description(description: str | None, *, timezone: str = FEED_TIMEZONE) -> dict[str, str]:
    """Unpack an overloaded description string into a dict.

    ``"KEY1: Value1 <br />KEY 2: Value2"`` becomes
    ``{"key1": "Value1", "key-2": "Value2"}``.  Keys go through
    ``to_token``; lines without a ``:`` are skipped and later duplicates
    win.  An ``UPDATED`` value is converted to ISO 8601.

    Raises:
        MalformedDateError: If the ``UPDATED`` value is not a feed date.
    """
    if not description:
        return {}

    result: dict[str, str] = {}
    for line in DESCRIPTION_LINE_BREAK.split(description):
        match = DESCRIPTION_LINE.match(line)
        if match is None:
            continue
        key, value = match.group(1), match.group(2)

        if key == UPDATED_KEY:
            value = clean_updated_date(value, timezone=timezone)

        result[to_token(key)] = value

    return result


def clean_properties(
    properties: Properties,
    *,
    feature_index: int = 0,
    timezone: str = FEED_TIMEZONE,
    generic_link: str = GENERIC_INCIDENT_LINK,
    warnings: list[InconsistentFieldWarning] | None = None,
    log: logging.Logger | None = None,
) -> Properties:
    """Return a cleaned copy of a feature's properties.

    The input mapping is left untouched.

    Args:
        properties: Raw feed properties.
        feature_index: Position of the feature, for diagnostics.
        timezone: Zone the feed's dates are expressed in.
        generic_link: ``link`` value that carries no per-incident information.
        warnings: If given, non-fatal diagnostics are appended to it.
        log: Logger for diagnostics (defaults to ``rfs_incidents.cleaning``).

    Raises:
        MissingFieldError: If ``category``, ``status``, ``type`` or
            ``fire`` is absent once the description has been unpacked.
        MalformedDateError: If ``pubDate`` or ``UPDATED`` is malformed.
    """
    log = log or logger
    cleaned: Properties = dict(properties)
    guid = str(cleaned.get("guid", ""))

    if PUB_DATE_KEY in cleaned:
        pub_date = cleaned[PUB_DATE_KEY]
        cleaned[CLEAN_PUB_DATE_KEY] = (
            clean_pub_date(pub_date, timezone=timezone) if pub_date else pub_date
        )
    cleaned.pop(PUB_DATE_KEY, None)

    if DESCRIPTION_KEY in cleaned:
        cleaned.update(unpack_description(cleaned.pop(DESCRIPTION_KEY), timezone=timezone))

    # ALERT LEVEL duplicates category; category is the value we keep.
    category = _require(cleaned, CATEGORY_KEY, guid)
    alert_level = cleaned.pop(ALERT_LEVEL_KEY, None)
    if alert_level is not None and alert_level != category:
        warning = InconsistentFieldWarning(
            feature_index=feature_index,
            guid=guid,
            field=ALERT_LEVEL_KEY,
            value=str(alert_level),
            authoritative_field=CATEGORY_KEY,
            authoritative_value=str(category),
        )
        log.warning(
            "Inconsistent alert level | feature=%d | guid=%s | %s",
            feature_index,
            guid,
            warning.message,
        )
        if warnings is not None:
            warnings.append(warning)
    cleaned[ALERT_LEVEL_KEY] = to_token(category)
    del cleaned[CATEGORY_KEY]

    cleaned.pop(PERMALINK_KEY, None)

    for key in TOKEN_KEYS:
        cleaned[key] = to_token(_require(cleaned, key, guid))

    cleaned[FIRE_KEY] = FIRE_TRUE_PATTERN.search(_require(cleaned, FIRE_KEY, guid)) is not None

    # Generic landing page shared by every incident.
    if cleaned.get(LINK_KEY) == generic_link:
        del cleaned[LINK_KEY]

    return cleaned


def _require(properties: Properties, key: str, guid: str) -> Any:
    try:
        return properties[key]
    except KeyError as exc:
        raise MissingFieldError(key, correlation_id=guid) from exc
