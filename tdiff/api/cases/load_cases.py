"""Load test cases from a file."""

from pathlib import Path

from ..run.TestCase import TestCase
from .CaseFileError import CaseFileError
from .CaseFormat import format_for_path
from .parse_cases import parse_cases


def load_cases(path: Path) -> list[TestCase]:
    """Read and parse a case file, choosing the format from its suffix.

    Raises:
        CaseFileError: If the file is missing, unreadable or malformed
    """
    if not path.is_file():
        raise CaseFileError(f"test file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CaseFileError(f"failed to read test file {path}: {exc}") from exc
    return parse_cases(text, format_for_path(path))
