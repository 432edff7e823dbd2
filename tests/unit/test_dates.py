"""Tests for feed date normalization.

Covers:
- pubDate format ("3/01/2018 5:20:00 AM")
- description UPDATED format ("3 Jan 2018 16:20")
- Daylight saving offsets for Australia/Sydney
- Malformed input raises MalformedDateError
"""

from __future__ import annotations

from datetime import datetime

import pytest

from rfs_incidents.cleaning import (
    PUB_DATE_FORMAT,
    UPDATED_DATE_FORMAT,
    MalformedDateError,
    clean_pub_date,
    clean_updated_date,
    normalize_date,
)
from rfs_incidents.core.exceptions import ValidationError


class TestPubDate:
    """Format A: D/MM/YYYY h:mm:ss A."""

    def test_summer_morning(self) -> None:
        assert clean_pub_date("3/01/2018 5:20:00 AM") == "2018-01-03T05:20:00+11:00"

    def test_pm_converted_to_24_hour(self) -> None:
        assert clean_pub_date("3/01/2018 5:20:00 PM") == "2018-01-03T17:20:00+11:00"

    def test_noon_and_midnight(self) -> None:
        assert clean_pub_date("1/04/2018 12:00:00 PM") == "2018-04-01T12:00:00+10:00"
        assert clean_pub_date("15/07/2018 12:00:00 AM") == "2018-07-15T00:00:00+10:00"

    def test_winter_uses_standard_offset(self) -> None:
        assert clean_pub_date("15/07/2018 9:05:00 AM") == "2018-07-15T09:05:00+10:00"

    def test_same_instant_as_local_time(self) -> None:
        parsed = datetime.fromisoformat(clean_pub_date("3/01/2018 5:20:00 AM"))
        assert parsed.utcoffset() is not None
        assert parsed.replace(tzinfo=None) == datetime(2018, 1, 3, 5, 20)


class TestUpdatedDate:
    """Format B: D MMM YYYY HH:mm."""

    def test_summer_afternoon(self) -> None:
        assert clean_updated_date("3 Jan 2018 16:20") == "2018-01-03T16:20:00+11:00"

    def test_winter(self) -> None:
        assert clean_updated_date("15 Jul 2018 09:05") == "2018-07-15T09:05:00+10:00"

    def test_dst_gap_moves_forward(self) -> None:
        # Clocks jump from 02:00 to 03:00 on 7 Oct 2018 in Sydney.
        assert clean_updated_date("7 Oct 2018 02:30") == "2018-10-07T03:30:00+11:00"


class TestNormalizeDate:
    """Generic entry point and error handling."""

    def test_explicit_format(self) -> None:
        assert normalize_date("3 Jan 2018 16:20", UPDATED_DATE_FORMAT) == (
            "2018-01-03T16:20:00+11:00"
        )

    def test_other_timezone(self) -> None:
        result = normalize_date("3 Jan 2018 16:20", UPDATED_DATE_FORMAT, timezone="Australia/Perth")
        assert result == "2018-01-03T16:20:00+08:00"

    @pytest.mark.parametrize(
        ("text", "date_format"),
        [
            ("3 Jan 2018 16:20", PUB_DATE_FORMAT),
            ("3/01/2018 5:20:00 AM", UPDATED_DATE_FORMAT),
            ("not a date", UPDATED_DATE_FORMAT),
            ("", PUB_DATE_FORMAT),
            ("31/02/2018 5:20:00 AM", PUB_DATE_FORMAT),
        ],
    )
    def test_malformed_raises(self, text: str, date_format: str) -> None:
        with pytest.raises(MalformedDateError) as exc_info:
            normalize_date(text, date_format)
        assert exc_info.value.value == text
        assert exc_info.value.expected_format == date_format

    def test_malformed_is_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            clean_pub_date("yesterday")
        assert exc_info.value.code == "DATE_PARSE_FAILED"
        assert exc_info.value.stage == "clean_properties"
        assert exc_info.value.retryable is False
