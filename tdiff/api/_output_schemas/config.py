"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class VersionOutput(BaseOutputSchema):
    """Output schema for the version command."""

    version: str = Field(..., description="Package version string")
