"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling for capture runs and snapshot queries.
Everything persisted is timezone-aware UTC; local-day math uses the fixed
offset that also drives time slot classification.

Functions:
- utc_now(): Current UTC time (the single "now" of a capture run)
- ensure_utc(): Normalize naive/aware datetimes to aware UTC
- to_iso(): ISO 8601 string with millisecond precision and 'Z' suffix
- to_storage_timestamp(): Filesystem-safe variant of to_iso() for storage keys
- local_day_bounds_utc(): UTC window covering one local calendar day
"""
from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from typing import Optional, Tuple

from .time_slots import fixed_offset_timezone


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to an ISO 8601 UTC string with milliseconds.

    Args:
        dt: datetime object (naive values are treated as UTC)

    Returns:
        String such as "2025-01-15T15:30:00.123Z", or None if dt is None
    """
    dt = ensure_utc(dt)
    if dt is None:
        return None
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def to_storage_timestamp(dt: datetime) -> str:
    """
    ISO timestamp with ':' and '.' replaced so it is safe in object keys and paths.

    Example:
        2025-01-15T15:30:00.123Z -> 2025-01-15T15-30-00-123Z
    """
    return to_iso(dt).replace(":", "-").replace(".", "-")


def local_day_bounds_utc(day: date, offset_minutes: int) -> Tuple[datetime, datetime]:
    """
    Get the [start, end) UTC window of a calendar day in the fixed local offset.

    Args:
        day: Local calendar date
        offset_minutes: Local offset from UTC in minutes

    Returns:
        Tuple of (start_utc, end_utc)
    """
    start_local = datetime.combine(day, time.min, tzinfo=fixed_offset_timezone(offset_minutes))
    end_local = start_local + timedelta(days=1)
    return start_local.astimezone(dt_timezone.utc), end_local.astimezone(dt_timezone.utc)
