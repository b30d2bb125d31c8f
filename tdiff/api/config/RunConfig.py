"""Program-mode run configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_TIMEOUT_SECONDS


class RunConfig(BaseModel):
    """Limits applied when running a program against test cases."""

    model_config = ConfigDict(extra="forbid")

    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0, description="Per-case wall clock limit")
    max_workers: int = Field(1, ge=1, description="Maximum concurrently running child processes")
