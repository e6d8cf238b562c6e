"""Errors raised by timerange.

Two kinds reach callers: `InvalidArgument` for parameters of the wrong kind or
value, and `InvalidInterval` for interval values that break the
``start <= end`` invariant or carry unusable endpoints. Both derive from
`TimeRangeError` so callers can catch everything the library raises at once.
"""

from typing import Any, Literal, TypeAlias

Field: TypeAlias = Literal["start", "end", "both"]


class TimeRangeError(ValueError):
    """Base class for every error raised by timerange."""


class InvalidArgument(TimeRangeError):
    """A parameter is missing, of the wrong kind or out of range."""

    def __init__(self, parameter: str, value: Any, message: str | None = None):
        super().__init__(message or f"Invalid parameter {parameter!r}: {value!r}")
        self.parameter: str = parameter
        self.value: Any = value


class InvalidInterval(TimeRangeError):
    """An interval has a missing or invalid endpoint, or start > end."""

    def __init__(
        self,
        message: str,
        interval: Any,
        field: Field,
        parameter: str = "interval",
        index: int | None = None,
    ):
        super().__init__(message)
        self.interval: Any = interval
        self.field: Field = field
        self.parameter: str = parameter
        self.index: int | None = index
