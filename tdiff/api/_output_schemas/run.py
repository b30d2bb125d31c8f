"""Output schema for the get command in program mode."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class RunOutput(BaseOutputSchema):
    """Output schema for a test-case run.

    Each outcome holds case_index, note, passed, error ({kind, message,
    exit_code} or null) and diff (a serialized DiffResult or null).
    """

    program: str = Field(..., description="Program under test")
    cases_file: str = Field(..., description="Test-case file")
    total: int = Field(0, description="Number of cases loaded")
    passed: int = Field(0, description="Number of passing cases")
    failed: int = Field(0, description="Number of failing cases")
    outcomes: list[dict[str, Any]] = Field(default_factory=list, description="Per-case outcomes in input order")
