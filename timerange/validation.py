"""Guards that reject malformed input before any interval operation runs.

Each guard takes the value and the name of the parameter it came from, raises
`InvalidArgument` or `InvalidInterval` on violation, and otherwise returns the
validated value normalized to the library's types: instants become epoch
milliseconds and interval-like values become `Interval` objects.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from numbers import Integral, Real
from typing import Any

from dateutil.parser import isoparse
from loguru import logger

from timerange.errors import Field, InvalidArgument, InvalidInterval
from timerange.interval import Instant, Interval
from timerange.util import MAX_INSTANT, MIN_INSTANT, to_millis

_MISSING = object()


def _argument_error(name: str, value: Any, message: str) -> InvalidArgument:
    logger.debug("Rejected parameter {}: {}", name, message)
    return InvalidArgument(name, value, message)


def _interval_error(
    message: str, value: Any, field: Field, name: str, index: int | None
) -> InvalidInterval:
    logger.debug("Rejected interval {} ({}): {}", name, field, message)
    return InvalidInterval(message, value, field, parameter=name, index=index)


def require_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise _argument_error(name, value, f"Parameter {name!r} cannot be None")
    return value


def require_instant(value: Any, name: str = "point") -> Instant:
    """Validate an instant and return it as epoch milliseconds.

    Accepts:
    - datetime: Must be timezone-aware; microseconds are floored to milliseconds
    - int: Epoch milliseconds, passed through
    - str: ISO-8601 with an explicit offset (or ``Z``)

    Raises:
        InvalidArgument: If the value is None, of another kind, naive,
            unparsable, or outside the range datetime can represent
    """
    require_not_none(value, name)

    if isinstance(value, datetime):
        ms = _aware_millis(value, value, name)
    elif isinstance(value, int) and not isinstance(value, bool):
        ms = value
    elif isinstance(value, str):
        try:
            parsed = isoparse(value)
        except (ValueError, OverflowError) as exc:
            raise _argument_error(
                name, value, f"Parameter {name!r} is not a valid ISO-8601 date/time"
            ) from exc
        ms = _aware_millis(parsed, value, name)
    else:
        raise _argument_error(
            name,
            value,
            f"Parameter {name!r} must be a datetime, epoch milliseconds (int) or "
            f"an ISO-8601 string.\n"
            f"Got {type(value).__name__!r}: {value!r}",
        )

    if not MIN_INSTANT <= ms <= MAX_INSTANT:
        raise _argument_error(
            name,
            value,
            f"Parameter {name!r} is outside the representable range "
            f"[{MIN_INSTANT}, {MAX_INSTANT}] ms",
        )
    return ms


def _aware_millis(dt: datetime, original: Any, name: str) -> int:
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise _argument_error(
            name,
            original,
            f"Parameter {name!r} must be timezone-aware.\n"
            f"Got naive value: {original!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)\n"
            f"  # Or give strings an offset: '2025-01-01T10:00:00Z'",
        )
    return to_millis(dt)


def _endpoint(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key, _MISSING)
    return getattr(value, key, _MISSING)


def _is_interval_like(value: Any) -> bool:
    if isinstance(value, (Interval, Mapping)):
        return True
    return hasattr(value, "start") or hasattr(value, "end")


def require_interval(
    value: Any, name: str = "interval", *, index: int | None = None
) -> Interval:
    """Validate an interval-like value and return it as an `Interval`.

    Interval-like means an `Interval`, a mapping with ``"start"``/``"end"``
    keys, or an object with ``start``/``end`` attributes. An `Interval` whose
    endpoints are already epoch milliseconds is returned unchanged.
    """
    require_not_none(value, name)
    if not _is_interval_like(value):
        raise _argument_error(
            name,
            value,
            f"Parameter {name!r} must be an interval with start and end.\n"
            f"Got {type(value).__name__!r}: {value!r}",
        )

    bounds: dict[str, int] = {}
    fields: tuple[Field, Field] = ("start", "end")
    for field in fields:
        raw = _endpoint(value, field)
        if raw is _MISSING:
            raise _interval_error(
                f"Missing {field!r} in {name}", value, field, name, index
            )
        try:
            bounds[field] = require_instant(raw, f"{name}.{field}")
        except InvalidArgument as exc:
            raise _interval_error(
                f"Invalid {field} in {name}: {exc}", value, field, name, index
            ) from exc

    start, end = bounds["start"], bounds["end"]
    if start > end:
        raise _interval_error(
            f"Start must be before or equal to end in {name} "
            f"(start={start}, end={end})",
            value,
            "both",
            name,
            index,
        )

    if isinstance(value, Interval):
        if (value.start, value.end) == (start, end):
            return value
        return replace(value, start=start, end=end)
    return Interval(start=start, end=end)


def require_sequence(value: Any, name: str, allow_empty: bool = True) -> list[Any]:
    """Validate a collection and return its items as a new list."""
    require_not_none(value, name)
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise _argument_error(
            name,
            value,
            f"Parameter {name!r} must be a sequence, got {type(value).__name__!r}",
        )

    items = list(value)
    if not allow_empty and not items:
        raise _argument_error(name, value, f"Parameter {name!r} cannot be empty")
    return items


def require_interval_sequence(
    value: Any, name: str = "intervals", allow_empty: bool = True
) -> list[Interval]:
    """Validate a collection of intervals; failures name the offending index."""
    items = require_sequence(value, name, allow_empty)
    return [
        require_interval(item, f"{name}[{i}]", index=i) for i, item in enumerate(items)
    ]


def require_positive_number(value: Any, name: str) -> Real:
    require_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise _argument_error(
            name,
            value,
            f"Parameter {name!r} must be a number, got {type(value).__name__!r}",
        )
    if math.isnan(value):
        raise _argument_error(name, value, f"Parameter {name!r} cannot be NaN")
    if value <= 0:
        raise _argument_error(
            name, value, f"Parameter {name!r} must be a positive number"
        )
    return value


def require_positive_integer(value: Any, name: str = "chunks") -> int:
    """Validate a positive integral number; integral floats such as 3.0 pass."""
    number = require_positive_number(value, name)
    if isinstance(number, Integral):
        return int(number)
    if not float(number).is_integer():
        raise _argument_error(name, value, f"Parameter {name!r} must be an integer")
    return int(number)
