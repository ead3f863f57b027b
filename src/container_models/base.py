from pydantic import BaseModel, ConfigDict


class ConfigBaseModel(BaseModel):
    """Base class for models that are validated on every assignment."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )


class FrozenBaseModel(BaseModel):
    """Base class for frozen Pydantic models."""

    model_config = ConfigDict(frozen=True, extra="forbid")
