"""Diff result dataclass."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .EditOp import EditOp
from .OpKind import OpKind


@dataclass(frozen=True)
class DiffResult:
    """Full alignment of ``left`` against ``right``.

    Equal and Delete spans, concatenated in order, rebuild ``left``; Equal and
    Insert spans rebuild ``right``.
    """

    left: Sequence[Any]
    right: Sequence[Any]
    ops: tuple[EditOp, ...] = ()

    @property
    def is_identical(self) -> bool:
        return all(op.kind is OpKind.EQUAL for op in self.ops)

    @property
    def edit_distance(self) -> int:
        """Number of inserted plus deleted elements."""
        return sum(len(op) for op in self.ops if op.kind is not OpKind.EQUAL)

    @property
    def lcs_length(self) -> int:
        return sum(len(op) for op in self.ops if op.kind is OpKind.EQUAL)

    def segments(self) -> list[tuple[OpKind, Any]]:
        """(kind, elements) pairs in rendering order."""
        return [(op.kind, op.elements(self.left, self.right)) for op in self.ops]

    def to_dict(self) -> dict[str, Any]:
        ops: list[dict[str, Any]] = []
        for op in self.ops:
            elements = op.elements(self.left, self.right)
            ops.append(
                {
                    "kind": op.kind.value,
                    "left": [op.left_span.start, op.left_span.end] if op.left_span else None,
                    "right": [op.right_span.start, op.right_span.end] if op.right_span else None,
                    "text": elements if isinstance(elements, str) else list(elements),
                }
            )
        return {
            "identical": self.is_identical,
            "edit_distance": self.edit_distance,
            "lcs_length": self.lcs_length,
            "ops": ops,
        }
