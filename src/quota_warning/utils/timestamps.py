"""Timestamp helpers for persisted last-warning values.

Values are stored as ATOM strings (``2026-01-15T10:30:00+00:00``). Parsing
also accepts a trailing ``Z`` and fractional seconds.
"""

from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_atom(moment: datetime) -> str:
    """
    Format an aware datetime as an ATOM string in UTC.

    Raises:
        ValueError: If *moment* is naive
    """
    if moment.tzinfo is None:
        raise ValueError("Naive datetime cannot be persisted; attach a timezone")
    return moment.astimezone(timezone.utc).replace(microsecond=0).isoformat()


def parse_atom(value: str) -> datetime:
    """
    Parse an ATOM/RFC 3339 string to an aware datetime.

    Naive values are assumed to be UTC.

    Raises:
        ValueError: If the string is not a valid timestamp
    """
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def add_days(moment: datetime, days: int) -> datetime:
    """Add calendar days, keeping the wall-clock time in the value's own offset."""
    return moment + timedelta(days=days)
