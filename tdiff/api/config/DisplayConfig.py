"""Display configuration."""

from pydantic import BaseModel, ConfigDict, Field


class DisplayConfig(BaseModel):
    """Rich styles used when rendering a diff."""

    model_config = ConfigDict(extra="forbid")

    delete_style: str = Field("on red", description="Style for deleted (expected only) text")
    insert_style: str = Field("on cyan", description="Style for inserted (actual only) text")
    equal_style: str = Field("", description="Style for unchanged text, empty for the terminal default")
