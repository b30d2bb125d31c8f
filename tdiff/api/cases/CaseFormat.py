"""Case file serialization formats."""

from pathlib import Path
from typing import Literal

CaseFormat = Literal["toml", "yaml"]

CASE_FORMATS: tuple[CaseFormat, ...] = ("toml", "yaml")


def format_for_path(path: Path) -> CaseFormat:
    """YAML for ``.yaml``/``.yml`` files, TOML for everything else."""
    return "yaml" if path.suffix.lower() in (".yaml", ".yml") else "toml"
