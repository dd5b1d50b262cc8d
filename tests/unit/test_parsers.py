"""
test_parsers.py
---------------
Unit tests for blog_backup.utils.parsers module.

Tests date parsing of frontmatter values.
"""
import time
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from blog_backup.utils.parsers import _as_aware, parse_date


class TestParseDate:
    """Test parse_date function."""

    def test_date_only_is_utc_midnight(self):
        assert parse_date("2023-01-01") == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_surrounding_whitespace_ignored(self):
        assert parse_date("  2023-01-01 ") == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_datetime_with_offset(self):
        result = parse_date("2023-01-01T10:00:00+02:00")
        assert result == datetime(2023, 1, 1, 8, 0, tzinfo=timezone.utc)

    def test_datetime_with_z_suffix(self):
        result = parse_date("2023-01-01T10:00:00Z")
        assert result == datetime(2023, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_naive_datetime_is_local(self):
        result = parse_date("2023-01-01T10:00:00")
        expected = datetime(2023, 1, 1, 10, 0).astimezone()
        assert result == expected
        assert result.tzinfo is not None

    @pytest.mark.parametrize(
        "value",
        ["2023/06/15", "June 15, 2023", "Jun 15, 2023", "15 June 2023"],
    )
    def test_fallback_formats(self, value):
        result = parse_date(value)
        assert result is not None
        assert (result.year, result.month, result.day) == (2023, 6, 15)

    def test_rfc2822(self):
        result = parse_date("Thu, 15 Jun 2023 12:00:00 +0000")
        assert result == datetime(2023, 6, 15, 12, 0, tzinfo=timezone.utc)

    def test_results_are_comparable(self):
        """Test date-only and local date-times can be compared directly."""
        early = parse_date("2023-01-01")
        later = parse_date("2023-01-03T00:00:00")
        assert later - early > timedelta(0)

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2023-13-45", "yesterday"])
    def test_invalid_returns_none(self, value):
        assert parse_date(value) is None


class TestDateRangeEdges:
    """Test naive values that can't be placed in the local zone."""

    @pytest.fixture
    def zone_west_of_utc(self, monkeypatch):
        if not hasattr(time, "tzset"):
            pytest.skip("time.tzset not available")
        monkeypatch.setenv("TZ", "EST+05")
        time.tzset()
        yield
        monkeypatch.undo()
        time.tzset()

    def test_first_representable_moment_is_invalid(self, zone_west_of_utc):
        assert parse_date("0001-01-01T00:00") is None

    def test_ordinary_dates_unaffected(self, zone_west_of_utc):
        result = parse_date("2023-01-01T10:00:00")
        assert result == datetime(2023, 1, 1, 15, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("error", [OverflowError, ValueError, OSError])
    def test_conversion_failure_is_none(self, error):
        moment = MagicMock(tzinfo=None)
        moment.astimezone.side_effect = error("out of range")
        assert _as_aware(moment) is None

    def test_aware_value_returned_unchanged(self):
        moment = datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert _as_aware(moment) is moment
