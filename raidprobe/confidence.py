"""A ratio of good observations to total observations."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Confidence"]


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Confidence:
    """How many of ``total`` observations were good."""

    good: int
    total: int

    def __post_init__(self) -> None:
        if self.good < 0 or self.total < 0:
            raise ValueError("counts must not be negative")
        if self.good > self.total:
            raise ValueError("good count exceeds total count")

    def bad(self) -> int:
        """Number of observations that were not good."""
        return self.total - self.good

    def as_ratio(self) -> float:
        """Fraction of good observations; NaN when nothing was observed."""
        if self.total == 0:
            return math.nan
        return self.good / self.total

    def as_percentage(self) -> float:
        """Percentage of good observations."""
        return self.as_ratio() * 100.0

    def __str__(self) -> str:
        return f"{_format_float(self.as_percentage())}%"