"""
Unit tests for webcam_capture.utils.time_slots
"""
from datetime import datetime, timezone

import pytest
from webcam_capture.utils.time_slots import (
    DEFAULT_TIME_SLOT_BOUNDARIES,
    TimeSlotBoundary,
    classify_time_slot,
    parse_time_slot_boundaries,
    time_slot_labels,
    validate_time_slot_boundaries,
)

PST = -480


def _utc(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 1, 15, hour, minute, tzinfo=timezone.utc)


class TestClassifyTimeSlot:
    """Tests for classify_time_slot with the default table"""

    def test_morning(self):
        # 15:30 UTC = 07:30 PST
        assert classify_time_slot(_utc(15, 30), PST) == "7:30 AM"

    def test_noon(self):
        # 20:00 UTC = 12:00 PST
        assert classify_time_slot(_utc(20, 0), PST) == "12:00 PM"

    def test_afternoon(self):
        # 23:30 UTC = 15:30 PST
        assert classify_time_slot(_utc(23, 30), PST) == "3:30 PM"

    def test_before_noon_boundary(self):
        # 19:59 UTC = 11:59 PST
        assert classify_time_slot(_utc(19, 59), PST) == "7:30 AM"

    def test_local_midnight(self):
        # 08:00 UTC = 00:00 PST
        assert classify_time_slot(_utc(8, 0), PST) == "7:30 AM"

    def test_naive_datetime_treated_as_utc(self):
        assert classify_time_slot(datetime(2025, 1, 15, 23, 30), PST) == "3:30 PM"

    def test_every_hour_has_a_label(self):
        labels = set(time_slot_labels(DEFAULT_TIME_SLOT_BOUNDARIES))
        for hour in range(24):
            assert classify_time_slot(_utc(hour), PST) in labels

    def test_wraps_to_last_label_below_first_boundary(self):
        table = (
            TimeSlotBoundary(hour=6, label="Morning"),
            TimeSlotBoundary(hour=18, label="Evening"),
        )
        assert classify_time_slot(_utc(3), 0, table) == "Evening"
        assert classify_time_slot(_utc(7), 0, table) == "Morning"
        assert classify_time_slot(_utc(20), 0, table) == "Evening"

    def test_empty_table_raises(self):
        with pytest.raises(ValueError):
            classify_time_slot(_utc(12), 0, ())


class TestParseTimeSlotBoundaries:
    """Tests for parse_time_slot_boundaries and validate_time_slot_boundaries"""

    def test_parses_default_table(self):
        assert parse_time_slot_boundaries("0=7:30 AM;12=12:00 PM;15=3:30 PM") == DEFAULT_TIME_SLOT_BOUNDARIES

    def test_ignores_blank_entries_and_whitespace(self):
        table = parse_time_slot_boundaries(" 0 = Dawn ; ; 13 = Afternoon ;")
        assert time_slot_labels(table) == ["Dawn", "Afternoon"]

    @pytest.mark.parametrize(
        "raw",
        ["", "7:30 AM", "x=Label", "24=Late", "12=Noon;6=Morning", "0=Dawn;0=Again", "5= "],
    )
    def test_invalid_tables(self, raw):
        with pytest.raises(ValueError):
            parse_time_slot_boundaries(raw)

    def test_validate_rejects_empty(self):
        with pytest.raises(ValueError):
            validate_time_slot_boundaries([])
