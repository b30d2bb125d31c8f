"""Half-open index range."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range into one sequence."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def shift(self, offset: int) -> "Span":
        return Span(self.start + offset, self.end + offset)

    def join(self, other: "Span") -> "Span":
        """Merge with a span that starts where this one ends."""
        if other.start != self.end:
            raise ValueError(f"spans are not adjacent: {self} and {other}")
        return Span(self.start, other.end)
