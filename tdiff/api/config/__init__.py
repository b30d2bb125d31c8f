"""Configuration models."""

from .DisplayConfig import DisplayConfig
from .LogConfig import LogConfig
from .RunConfig import RunConfig
from .TdiffConfig import TdiffConfig

__all__ = [
    "DisplayConfig",
    "LogConfig",
    "RunConfig",
    "TdiffConfig",
]
