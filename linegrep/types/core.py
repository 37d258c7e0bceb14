"""
Core result types for the matching engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open range [start, end) of input offsets covered by a match."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be non-negative")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @property
    def length(self) -> int:
        """Number of characters covered by this span."""
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start:self.end]
