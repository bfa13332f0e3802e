"""
Unit tests for webcam_capture.utils.datetime_utils
"""
from datetime import date, datetime, timedelta, timezone

from webcam_capture.utils.datetime_utils import (
    ensure_utc,
    local_day_bounds_utc,
    to_iso,
    to_storage_timestamp,
    utc_now,
)


class TestUtcNow:
    def test_is_timezone_aware_utc(self):
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestEnsureUtc:
    """Tests for ensure_utc"""

    def test_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        result = ensure_utc(datetime(2025, 1, 15, 12, 0))
        assert result == datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

    def test_aware_converted(self):
        pst = timezone(timedelta(hours=-8))
        result = ensure_utc(datetime(2025, 1, 15, 7, 30, tzinfo=pst))
        assert result.hour == 15
        assert result.utcoffset() == timedelta(0)


class TestTimestamps:
    """Tests for to_iso and to_storage_timestamp"""

    def test_to_iso_milliseconds(self, fixed_now):
        assert to_iso(fixed_now) == "2025-01-15T15:30:00.123Z"

    def test_to_iso_none(self):
        assert to_iso(None) is None

    def test_storage_timestamp_has_no_colons_or_dots(self, fixed_now):
        result = to_storage_timestamp(fixed_now)
        assert result == "2025-01-15T15-30-00-123Z"
        assert ":" not in result
        assert "." not in result


class TestLocalDayBounds:
    def test_pst_day_window(self):
        start, end = local_day_bounds_utc(date(2025, 1, 15), -480)
        assert start == datetime(2025, 1, 15, 8, 0, tzinfo=timezone.utc)
        assert end == datetime(2025, 1, 16, 8, 0, tzinfo=timezone.utc)

    def test_utc_day_window(self):
        start, end = local_day_bounds_utc(date(2025, 1, 15), 0)
        assert start == datetime(2025, 1, 15, tzinfo=timezone.utc)
        assert end - start == timedelta(days=1)
