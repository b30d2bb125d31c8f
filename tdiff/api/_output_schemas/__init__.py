"""Output schemas for API commands."""

from ._base import BaseOutputSchema
from .cases import ExampleOutput
from .config import VersionOutput
from .diff import DiffOutput
from .run import RunOutput

__all__ = [
    "BaseOutputSchema",
    "DiffOutput",
    "ExampleOutput",
    "RunOutput",
    "VersionOutput",
]
