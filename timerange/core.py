from dataclasses import replace
from datetime import datetime
from typing import Any

from loguru import logger

from timerange.interval import Interval
from timerange.util import MONTH_ABBREVIATIONS, from_millis
from timerange.validation import (
    require_instant,
    require_interval,
    require_interval_sequence,
    require_positive_integer,
)


def is_overlap(interval_a: Any, interval_b: Any) -> bool:
    """Return True if the intervals share at least one instant.

    Boundaries are inclusive, so intervals that merely touch (one ends exactly
    where the other starts) count as overlapping.
    """
    a = require_interval(interval_a, "interval_a")
    b = require_interval(interval_b, "interval_b")
    return _overlaps(a, b)


def _overlaps(a: Interval, b: Interval) -> bool:
    return a.start <= b.end and b.start <= a.end


def merge_overlap(intervals: Any) -> list[Interval]:
    """Collapse overlapping intervals into a sorted list of disjoint spans.

    Algorithm: Sort by start, then scan once. An interval is folded into the
    current span only when it starts strictly before the span ends; intervals
    that touch at a shared boundary stay separate (unlike `is_overlap`).

    Every span in the result is a new plain `Interval`; neither the caller's
    collection nor its items are modified.

    Example:
        >>> merge_overlap([Interval(start=0, end=10), Interval(start=5, end=20)])
        [Interval(start=0, end=20)]
    """
    items = require_interval_sequence(intervals, "intervals")
    ordered = sorted(items, key=lambda ivl: ivl.start)

    merged: list[Interval] = []
    for ivl in ordered:
        if merged and ivl.start < merged[-1].end:
            last = merged[-1]
            merged[-1] = Interval(start=last.start, end=max(last.end, ivl.end))
        else:
            merged.append(Interval(start=ivl.start, end=ivl.end))

    logger.debug("Merged {} intervals into {}", len(items), len(merged))
    return merged


def subtract_ranges(interval_a: Any, interval_b: Any) -> list[Interval]:
    """Remove the part of ``interval_a`` covered by ``interval_b``.

    Returns zero, one or two fragments of ``interval_a``, left before right.
    Fragments keep the type and extra fields of ``interval_a``.
    """
    a = require_interval(interval_a, "interval_a")
    b = require_interval(interval_b, "interval_b")

    if not _overlaps(a, b):
        return [replace(a)]

    overlap_start = max(a.start, b.start)
    overlap_end = min(a.end, b.end)

    fragments: list[Interval] = []
    if a.start < overlap_start:
        fragments.append(replace(a, end=overlap_start))
    if a.end > overlap_end:
        fragments.append(replace(a, start=overlap_end))
    return fragments


def split_range(interval: Any, chunks: Any) -> list[Interval]:
    """Split an interval into ``chunks`` contiguous pieces of near-equal length.

    Boundaries are rounded to the nearest millisecond (halves round up) and the
    last piece always ends exactly at the interval's end, so the pieces
    reconstruct the input whether or not its duration divides evenly. A
    zero-duration interval yields ``chunks`` copies of itself.
    """
    ivl = require_interval(interval, "interval")
    count = require_positive_integer(chunks, "chunks")

    if count == 1:
        return [replace(ivl)]

    total = ivl.duration
    # round(i * total / count) with halves rounded up, in exact integer math
    bounds = [
        ivl.start + (2 * i * total + count) // (2 * count) for i in range(count + 1)
    ]
    bounds[-1] = ivl.end

    pieces = [replace(ivl, start=lo, end=hi) for lo, hi in zip(bounds, bounds[1:])]
    logger.debug("Split {} into {} pieces", ivl, count)
    return pieces


def is_inside(point: Any, interval: Any) -> bool:
    """Return True if ``point`` lies within the interval, boundaries included."""
    instant = require_instant(point, "point")
    ivl = require_interval(interval, "interval")
    return ivl.start <= instant <= ivl.end


def format_range(interval: Any) -> str:
    """Render an interval for humans, on the UTC calendar.

    - Instant: ``1/1/2025, 12:00:00 PM (instant)``
    - Same day: ``1/1/2025, 09:00 - 11:30``
    - Otherwise: ``Jan 1, 2025, 23:00 to Jan 2, 2025, 02:00``
    """
    ivl = require_interval(interval, "interval")
    start = from_millis(ivl.start)
    end = from_millis(ivl.end)

    if ivl.start == ivl.end:
        return f"{_short_date(start)}, {_clock_12h(start)} (instant)"

    if start.date() == end.date():
        return f"{_short_date(start)}, {_clock(start)} - {_clock(end)}"

    return f"{_long_date_time(start)} to {_long_date_time(end)}"


def _short_date(dt: datetime) -> str:
    return f"{dt.month}/{dt.day}/{dt.year}"


def _clock(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


def _clock_12h(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def _long_date_time(dt: datetime) -> str:
    month = MONTH_ABBREVIATIONS[dt.month - 1]
    return f"{month} {dt.day}, {dt.year}, {_clock(dt)}"
