"""Serialize test cases to TOML or YAML text."""

from collections.abc import Sequence

import tomli_w
import yaml

from ..run.TestCase import TestCase
from .CaseFileError import CaseFileError
from .CaseFormat import CaseFormat
from .CaseRecord import CaseRecord


def dump_cases(cases: Sequence[TestCase], fmt: CaseFormat) -> str:
    """Serialize cases as a ``tests`` document."""
    document = {"tests": [CaseRecord.from_case(case).to_dict() for case in cases]}
    if fmt == "yaml":
        return yaml.safe_dump(document, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if fmt == "toml":
        return tomli_w.dumps(document, multiline_strings=True)
    raise CaseFileError(f"unsupported format: {fmt!r} (expected: toml or yaml)")
