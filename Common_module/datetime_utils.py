"""
DateTime utility functions.
The parish runs on South African Standard Time (UTC+2); stored timestamps
and API responses use it.
"""
from datetime import datetime, timezone, timedelta
from typing import Optional

# SAST (UTC+2), no daylight saving
SAST = timezone(timedelta(hours=2))


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime is in local (SAST) time.
    Naive datetimes are assumed to already be local.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=SAST)
    return dt.astimezone(SAST)


def to_local_isoformat(dt: Optional[datetime]) -> Optional[str]:
    """Convert datetime to SAST and return as ISO format string (e.g. "2025-03-02T09:30:00+02:00")."""
    local_dt = to_local(dt)
    if local_dt is None:
        return None
    return local_dt.isoformat()


def now_local() -> datetime:
    """Current timezone-aware datetime in SAST."""
    return datetime.now(SAST)
