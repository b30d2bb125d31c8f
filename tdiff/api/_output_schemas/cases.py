"""Output schema for the example command."""

from pydantic import Field

from ._base import BaseOutputSchema


class ExampleOutput(BaseOutputSchema):
    count: int = Field(..., description="Number of cases generated")
    format: str = Field(..., description="Serialization format (toml or yaml)")
    path: str = Field("", description="File written, empty string when printed to stdout")
    content: str = Field("", description="Serialized cases")
