"""Shared constants for feed cleaning."""

from __future__ import annotations

import re

# Property names the feed overloads or renames
PUB_DATE_KEY = "pubDate"
CLEAN_PUB_DATE_KEY = "pub-date"
DESCRIPTION_KEY = "description"
ALERT_LEVEL_KEY = "alert-level"
CATEGORY_KEY = "category"
PERMALINK_KEY = "guid_isPermaLink"
LINK_KEY = "link"
FIRE_KEY = "fire"
TOKEN_KEYS = ("status", "type")

# Description key whose value is a date (matched before token normalization)
UPDATED_KEY = "UPDATED"

# "<br />", "<br/>", "<br>" and "<br >" with any surrounding spaces
DESCRIPTION_LINE_BREAK = re.compile(r" *<br ?/?> *")
DESCRIPTION_LINE = re.compile(r"^([^:]*):\s?(.*)")

FIRE_TRUE_PATTERN = re.compile(r"yes", re.IGNORECASE)

# strptime equivalents of the feed formats "D/MM/YYYY h:mm:ss A" and "D MMM YYYY HH:mm"
PUB_DATE_FORMAT = "%d/%m/%Y %I:%M:%S %p"
UPDATED_DATE_FORMAT = "%d %b %Y %H:%M"
