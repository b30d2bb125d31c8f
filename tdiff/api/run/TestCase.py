"""Test case dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TestCase:
    """One input/expected-output pair for program mode."""

    __test__ = False  # not a pytest class

    input: str = ""
    expected: str = ""
    args: tuple[str, ...] = ()
    note: str | None = None
