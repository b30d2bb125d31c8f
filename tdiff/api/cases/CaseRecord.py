"""On-disk test-case record."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..run.TestCase import TestCase


class CaseRecord(BaseModel):
    """One ``[[tests]]`` entry of a case file.

    ``expected`` is also accepted under its older name ``out``. ``args`` may be
    a whitespace separated string or a list.
    """

    model_config = ConfigDict(extra="forbid")

    note: str | None = None
    args: str | list[str] | None = None
    input: str = ""
    expected: str = Field("", validation_alias=AliasChoices("expected", "out"))

    def to_case(self) -> TestCase:
        if self.args is None:
            args: tuple[str, ...] = ()
        elif isinstance(self.args, str):
            args = tuple(self.args.split())
        else:
            args = tuple(self.args)
        return TestCase(input=self.input, expected=self.expected, args=args, note=self.note)

    @classmethod
    def from_case(cls, case: TestCase) -> "CaseRecord":
        args: str | list[str] | None = None
        if case.args:
            if any(not arg or any(ch.isspace() for ch in arg) for arg in case.args):
                args = list(case.args)
            else:
                args = " ".join(case.args)
        return cls(note=case.note, args=args, input=case.input, expected=case.expected)

    def to_dict(self) -> dict[str, Any]:
        """Serializable mapping without unset optional fields."""
        data: dict[str, Any] = {}
        if self.note is not None:
            data["note"] = self.note
        if self.args is not None:
            data["args"] = self.args
        data["input"] = self.input
        data["expected"] = self.expected
        return data
