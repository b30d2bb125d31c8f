"""Test-case store - TOML/YAML serialization of test cases."""

from .CaseFileError import CaseFileError
from .CaseFormat import CASE_FORMATS, CaseFormat, format_for_path
from .dump_cases import dump_cases
from .generate_examples import generate_examples
from .load_cases import load_cases
from .parse_cases import parse_cases
from .save_cases import save_cases

__all__ = [
    "CASE_FORMATS",
    "CaseFileError",
    "CaseFormat",
    "dump_cases",
    "format_for_path",
    "generate_examples",
    "load_cases",
    "parse_cases",
    "save_cases",
]
