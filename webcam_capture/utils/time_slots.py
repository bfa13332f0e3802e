"""
Time Slot Classification
========================

Every capture run is filed under one named time slot (e.g. "7:30 AM") so the
browsing front end can show all cameras for the same moment of the day.

The slot table is an ordered list of (hour, label) boundaries forming
half-open intervals over the local day:

    0=7:30 AM;12=12:00 PM;15=3:30 PM

    00:00-11:59 -> "7:30 AM"
    12:00-14:59 -> "12:00 PM"
    15:00-23:59 -> "3:30 PM"

Local time is derived from a fixed UTC offset (no DST), matching how the
capture schedule is configured. A local hour below the first boundary wraps
around to the last label, so every instant maps to exactly one label.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class TimeSlotBoundary:
    """Lower bound (local hour, inclusive) of a named time slot."""
    hour: int
    label: str


DEFAULT_TIME_SLOT_BOUNDARIES: Tuple[TimeSlotBoundary, ...] = (
    TimeSlotBoundary(hour=0, label="7:30 AM"),
    TimeSlotBoundary(hour=12, label="12:00 PM"),
    TimeSlotBoundary(hour=15, label="3:30 PM"),
)


def validate_time_slot_boundaries(
    boundaries: Sequence[TimeSlotBoundary],
) -> Tuple[TimeSlotBoundary, ...]:
    """
    Validate a boundary table and return it as a tuple.

    Raises:
        ValueError: If the table is empty, an hour is outside 0..23, hours are
            not strictly increasing, or a label is blank.
    """
    if not boundaries:
        raise ValueError("At least one time slot boundary is required")

    previous_hour = -1
    for boundary in boundaries:
        if not 0 <= boundary.hour <= 23:
            raise ValueError(f"Time slot hour out of range: {boundary.hour}")
        if boundary.hour <= previous_hour:
            raise ValueError("Time slot hours must be strictly increasing")
        if not boundary.label or not boundary.label.strip():
            raise ValueError(f"Time slot at hour {boundary.hour} has an empty label")
        previous_hour = boundary.hour

    return tuple(boundaries)


def parse_time_slot_boundaries(raw: str) -> Tuple[TimeSlotBoundary, ...]:
    """
    Parse a boundary table from its configuration string.

    Args:
        raw: Entries of the form ``HOUR=LABEL`` separated by ``;``

    Returns:
        Validated tuple of TimeSlotBoundary

    Raises:
        ValueError: If an entry is malformed or the table is invalid
    """
    boundaries: List[TimeSlotBoundary] = []
    for entry in raw.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        hour_part, separator, label = entry.partition("=")
        if not separator:
            raise ValueError(f"Invalid time slot entry (expected HOUR=LABEL): {entry!r}")
        try:
            hour = int(hour_part.strip())
        except ValueError:
            raise ValueError(f"Invalid time slot hour: {hour_part!r}")
        boundaries.append(TimeSlotBoundary(hour=hour, label=label.strip()))

    return validate_time_slot_boundaries(boundaries)


def fixed_offset_timezone(offset_minutes: int) -> timezone:
    return timezone(timedelta(minutes=offset_minutes))


def classify_time_slot(
    now: datetime,
    local_offset_minutes: int,
    boundaries: Sequence[TimeSlotBoundary] = DEFAULT_TIME_SLOT_BOUNDARIES,
) -> str:
    """
    Map an instant to its time slot label.

    Args:
        now: Capture instant. Naive datetimes are treated as UTC.
        local_offset_minutes: Local time offset from UTC in minutes (e.g. -480)
        boundaries: Ordered slot table

    Returns:
        Label of the slot whose lower-bound hour is the greatest one that does
        not exceed the local hour; the last label when the local hour is below
        the first boundary.
    """
    if not boundaries:
        raise ValueError("At least one time slot boundary is required")

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local_hour = now.astimezone(fixed_offset_timezone(local_offset_minutes)).hour

    label = boundaries[-1].label
    for boundary in boundaries:
        if boundary.hour > local_hour:
            break
        label = boundary.label
    return label


def time_slot_labels(boundaries: Iterable[TimeSlotBoundary]) -> List[str]:
    return [boundary.label for boundary in boundaries]
