"""Diff module - character level comparison."""

from .compute_diff import compute_diff
from .DiffResult import DiffResult
from .EditOp import EditOp
from .OpKind import OpKind
from .Span import Span

__all__ = [
    "DiffResult",
    "EditOp",
    "OpKind",
    "Span",
    "compute_diff",
]
