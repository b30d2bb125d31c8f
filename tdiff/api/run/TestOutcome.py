"""Test outcome dataclass."""

from dataclasses import dataclass
from typing import Any

from ..diff.DiffResult import DiffResult
from .RunError import RunError


@dataclass(frozen=True)
class TestOutcome:
    """Verdict for one case.

    ``diff`` compares expected (left) against actual (right) output. It is None
    when no output could be obtained.
    """

    __test__ = False  # not a pytest class

    case_index: int
    passed: bool
    diff: DiffResult | None = None
    error: RunError | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "case_index": self.case_index,
            "note": self.note,
            "passed": self.passed,
            "error": self.error.to_dict() if self.error else None,
            "diff": self.diff.to_dict() if self.diff else None,
        }
