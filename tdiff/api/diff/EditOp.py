"""Single edit operation."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .OpKind import OpKind
from .Span import Span


@dataclass(frozen=True)
class EditOp:
    """A maximal run of equal, deleted or inserted elements.

    Equal ops carry both spans, Delete ops only ``left_span`` and Insert ops
    only ``right_span``.
    """

    kind: OpKind
    left_span: Span | None = None
    right_span: Span | None = None

    def __post_init__(self):
        needs_left = self.kind in (OpKind.EQUAL, OpKind.DELETE)
        needs_right = self.kind in (OpKind.EQUAL, OpKind.INSERT)
        if needs_left != (self.left_span is not None):
            raise ValueError(f"{self.kind.value} op {'requires' if needs_left else 'forbids'} a left span")
        if needs_right != (self.right_span is not None):
            raise ValueError(f"{self.kind.value} op {'requires' if needs_right else 'forbids'} a right span")
        if self.kind is OpKind.EQUAL and len(self.left_span) != len(self.right_span):  # type: ignore[arg-type]
            raise ValueError("equal op spans must have the same length")

    @classmethod
    def equal(cls, left_span: Span, right_span: Span) -> "EditOp":
        return cls(OpKind.EQUAL, left_span, right_span)

    @classmethod
    def delete(cls, left_span: Span) -> "EditOp":
        return cls(OpKind.DELETE, left_span=left_span)

    @classmethod
    def insert(cls, right_span: Span) -> "EditOp":
        return cls(OpKind.INSERT, right_span=right_span)

    def __len__(self) -> int:
        span = self.left_span if self.left_span is not None else self.right_span
        return len(span)  # type: ignore[arg-type]

    def elements(self, left: Sequence[Any], right: Sequence[Any]) -> Sequence[Any]:
        """Slice of the originating sequence covered by this op."""
        if self.left_span is not None:
            return left[self.left_span.start : self.left_span.end]
        if self.right_span is not None:
            return right[self.right_span.start : self.right_span.end]
        raise ValueError(f"{self.kind.value} op has no span")

    def merge(self, other: "EditOp") -> "EditOp":
        """Coalesce with the op that directly follows it."""
        if other.kind is not self.kind:
            raise ValueError(f"cannot merge {self.kind.value} with {other.kind.value}")
        left_span = self.left_span.join(other.left_span) if self.left_span and other.left_span else None
        right_span = self.right_span.join(other.right_span) if self.right_span and other.right_span else None
        return EditOp(self.kind, left_span, right_span)
