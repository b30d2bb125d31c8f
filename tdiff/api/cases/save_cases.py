"""Write test cases to a file."""

from collections.abc import Sequence
from pathlib import Path

from ..run.TestCase import TestCase
from .CaseFileError import CaseFileError
from .CaseFormat import CaseFormat, format_for_path
from .dump_cases import dump_cases


def save_cases(path: Path, cases: Sequence[TestCase], fmt: CaseFormat | None = None) -> str:
    """Serialize cases and write them to ``path``.

    Returns:
        The text that was written

    Raises:
        CaseFileError: If the file cannot be written
    """
    text = dump_cases(cases, fmt or format_for_path(path))
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CaseFileError(f"failed to write to file {path}: {exc}") from exc
    return text
