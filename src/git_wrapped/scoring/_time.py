from datetime import datetime, timezone


def year_start(year: int) -> datetime:
    """Jan 1 00:00 UTC of ``year``; the boundary for "recent" and "created this year"."""
    return datetime(year, 1, 1, tzinfo=timezone.utc)
