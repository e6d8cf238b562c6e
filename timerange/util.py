"""Utility constants and helpers for timerange.

Time unit constants represent durations in milliseconds, the resolution of
every instant handled by the library.
"""

from datetime import datetime, timedelta, timezone

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000

# All calendar computations happen on this zone
REFERENCE_ZONE = timezone.utc
EPOCH = datetime(1970, 1, 1, tzinfo=REFERENCE_ZONE)

_ONE_MS = timedelta(milliseconds=1)

# Bounds of what datetime can represent, in epoch milliseconds
MIN_INSTANT = (datetime.min.replace(tzinfo=REFERENCE_ZONE) - EPOCH) // _ONE_MS
MAX_INSTANT = (datetime.max.replace(tzinfo=REFERENCE_ZONE) - EPOCH) // _ONE_MS

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def to_millis(dt: datetime) -> int:
    """Convert a timezone-aware datetime to epoch milliseconds (floored)."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise TypeError(f"Expected a timezone-aware datetime, got {dt!r}")
    return (dt - EPOCH) // _ONE_MS


def from_millis(ms: int) -> datetime:
    """Convert epoch milliseconds to a datetime on the reference zone."""
    return EPOCH + timedelta(milliseconds=ms)
