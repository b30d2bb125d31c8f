"""Output schema for the get command in interactive and batch modes."""

from typing import Any, Literal

from pydantic import Field

from ._base import BaseOutputSchema


class DiffOutput(BaseOutputSchema):
    """Output schema for a two-input diff.

    Output structure:
    - mode: "interactive" or "batch"
    - left/right: the literal strings or file paths that were compared
    - identical: True when there are no insert or delete ops
    - edit_distance: number of inserted plus deleted characters
    - lcs_length: number of matched characters
    - ops: list of {kind, left, right, text}; left/right are [start, end) or null
    """

    mode: Literal["interactive", "batch"] = Field(..., description="Comparison mode")
    left: str = Field(..., description="Left input (string or path)")
    right: str = Field(..., description="Right input (string or path)")
    identical: bool = Field(False, description="True when both inputs are equal")
    edit_distance: int = Field(0, description="Inserted plus deleted characters")
    lcs_length: int = Field(0, description="Matched characters")
    ops: list[dict[str, Any]] = Field(default_factory=list, description="Edit operations in order")
