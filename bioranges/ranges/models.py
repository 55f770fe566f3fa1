from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """Band a value falls in relative to a RangeSet."""

    OPTIMAL = "optimal"
    IN_RANGE = "in-range"
    OUT_OF_RANGE = "out-of-range"


@dataclass(frozen=True)
class Interval:
    """Closed numeric band (min, max)."""

    min: float
    max: float

    def __iter__(self) -> Iterator[float]:
        yield self.min
        yield self.max

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_list(self) -> list[float]:
        return [self.min, self.max]


@dataclass(frozen=True)
class RangeSet:
    """Reference bands for one biomarker and demographic."""

    optimal: Interval | None = None
    in_range: Interval | None = None
    out_of_range: Interval | None = None

    def intervals(self) -> list[Interval]:
        """Present intervals in declaration order."""
        return [
            interval
            for interval in (self.optimal, self.in_range, self.out_of_range)
            if interval is not None
        ]

    @property
    def is_empty(self) -> bool:
        return not self.intervals()

    def to_dict(self) -> dict[str, list[float] | None]:
        return {
            "optimal": self.optimal.to_list() if self.optimal else None,
            "in_range": self.in_range.to_list() if self.in_range else None,
            "out_of_range": self.out_of_range.to_list() if self.out_of_range else None,
        }


@dataclass(frozen=True)
class HistoricalPoint:
    """A past reading; the date is kept exactly as it appeared in the row."""

    value: float
    date: str
    status: Status
