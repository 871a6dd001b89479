"""UTC datetime helpers.

All datetimes handed to the API are timezone-aware UTC; SQLite returns
naive values, which ensure_utc normalizes at the schema boundary.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def current_year() -> int:
    """Return the current calendar year in UTC (case numbering)."""
    return utc_now().year


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
