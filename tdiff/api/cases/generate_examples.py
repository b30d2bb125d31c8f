"""Example test cases."""

from ..run.TestCase import TestCase

EXAMPLE_CASE = TestCase(input="input", expected="output", args=("arguments",), note="test")


def generate_examples(count: int) -> list[TestCase]:
    """``count`` copies of a sample case, for use as a template."""
    if count < 0:
        raise ValueError(f"count must be non-negative (found: {count})")
    return [EXAMPLE_CASE] * count
