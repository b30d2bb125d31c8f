"""On-disk test-case file."""

from pydantic import BaseModel, ConfigDict, Field

from .CaseRecord import CaseRecord


class CaseFile(BaseModel):
    """Top-level document: a ``tests`` list of records."""

    model_config = ConfigDict(extra="forbid")

    tests: list[CaseRecord] = Field(default_factory=list)
