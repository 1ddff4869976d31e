"""
UTC datetime utilities for consistent timezone handling.

All datetime values written to Firestore should be timezone-aware UTC.
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository boundaries to normalize datetimes read from Firestore.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_iso_date(value: str | date | None) -> date | None:
    """Parse 'YYYY-MM-DD' (as stored by the frontend) into a date; None passes through."""
    if value is None or isinstance(value, date):
        return value
    if not value:
        return None
    return date.fromisoformat(value[:10])
