"""Shared pytest fixtures for the feed cleaner test suite."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample feed fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def feed_path(data_dir: Path) -> Path:
    """Path to a three-incident sample of the upstream feed."""
    return data_dir / "major_incidents.json"


@pytest.fixture()
def feed(feed_path: Path) -> dict[str, Any]:
    """Decoded sample feed (fresh copy per test)."""
    return json.loads(feed_path.read_text(encoding="utf-8"))


@pytest.fixture()
def raw_properties() -> dict[str, Any]:
    """Properties of a single upstream incident."""
    return copy.deepcopy(
        {
            "title": "Wattle Flat",
            "link": "http://www.rfs.nsw.gov.au/fire-information/fires-near-me",
            "category": "Advice",
            "guid": "https://incidents.rfs.nsw.gov.au/api/v1/incidents/274175",
            "guid_isPermaLink": "true",
            "pubDate": "3/01/2018 5:20:00 AM",
            "description": (
                "ALERT LEVEL: Advice <br />LOCATION: Wattle Flat <br />"
                "STATUS: Under control <br />TYPE: Grass Fire <br />FIRE: Yes <br />"
                "UPDATED: 3 Jan 2018 16:20"
            ),
        }
    )
