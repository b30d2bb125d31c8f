"""Run error dataclass."""

from dataclasses import dataclass
from typing import Any

from .RunErrorKind import RunErrorKind


@dataclass(frozen=True)
class RunError:
    """Why a single case could not be evaluated normally."""

    kind: RunErrorKind
    message: str
    exit_code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "exit_code": self.exit_code}
