"""Run configuration produced by argument parsing."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

from common.constants import MAX_PORT, MIN_PORT


class Mode(str, Enum):
    """Role a single invocation performs."""

    SENDER = "sender"
    RECEIVER = "receiver"


class RunConfig(BaseModel):
    """Validated parameters for one run. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    mode: Mode
    host: Optional[str] = None
    port: int = Field(ge=MIN_PORT, le=MAX_PORT)
    duration_seconds: Optional[PositiveInt] = None

    @model_validator(mode="after")
    def check_role_fields(self) -> "RunConfig":
        if self.mode is Mode.SENDER:
            if self.host is None or self.duration_seconds is None:
                raise ValueError("sender requires host and duration")
        elif self.host is not None or self.duration_seconds is not None:
            raise ValueError("receiver takes only a port")
        return self
