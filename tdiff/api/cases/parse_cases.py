"""Parse test cases from TOML or YAML text."""

import tomllib

import yaml
from pydantic import ValidationError

from ..run.TestCase import TestCase
from .CaseFile import CaseFile
from .CaseFileError import CaseFileError
from .CaseFormat import CaseFormat


def parse_cases(text: str, fmt: CaseFormat) -> list[TestCase]:
    """Parse a ``tests`` document.

    Args:
        text: Document content
        fmt: "toml" or "yaml"

    Returns:
        Test cases in document order

    Raises:
        CaseFileError: If the text is not valid for the format or the schema
    """
    try:
        if fmt == "yaml":
            raw = yaml.safe_load(text)
        elif fmt == "toml":
            raw = tomllib.loads(text)
        else:
            raise CaseFileError(f"unsupported format: {fmt!r} (expected: toml or yaml)")
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise CaseFileError(f"invalid {fmt.upper()}: {exc}") from exc

    if raw is None:
        return []
    if not isinstance(raw, dict):
        raise CaseFileError(f"document must be a mapping with a 'tests' list (found: {type(raw).__name__})")

    try:
        document = CaseFile(**raw)
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            loc = ".".join(str(x) for x in error.get("loc", ()))
            errors.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
        raise CaseFileError(errors) from exc

    return [record.to_case() for record in document.tests]
