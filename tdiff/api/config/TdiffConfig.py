"""Top-level tdiff configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .DisplayConfig import DisplayConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .RunConfig import RunConfig


class TdiffConfig(BaseModel):
    """Top-level configuration for tdiff."""

    model_config = ConfigDict(extra="forbid")

    run: RunConfig = Field(default_factory=RunConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on TDIFF_HOME or default to ~/.tdiff."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "TdiffConfig":
        """Load and validate config from file.

        A missing file yields the defaults; every section is optional.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert TdiffConfig instance to a dictionary for serialization."""
        return {
            "run": self.run.model_dump(),
            "display": self.display.model_dump(),
            "log": self.log.model_dump(),
        }
