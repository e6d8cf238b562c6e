from dataclasses import dataclass
from typing import TypeAlias

from timerange.errors import InvalidInterval

Instant: TypeAlias = int
"""Milliseconds since the Unix epoch (UTC)."""


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: Instant
    end: Instant

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidInterval(
                f"Interval start ({self.start}) must be <= end ({self.end})",
                self,
                "both",
            )

    @property
    def duration(self) -> int:
        """Length in milliseconds; zero for an instant."""
        return self.end - self.start

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return f"Interval({self.start}→{self.end}, {self.duration}ms)"