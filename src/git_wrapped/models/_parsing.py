"""Timestamp helpers shared by the model constructors."""

from datetime import datetime, timezone


def parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return ensure_utc(datetime.fromisoformat(value))
    except (ValueError, TypeError):
        return None


def ensure_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so comparisons never mix naive and aware."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
