import logging

from pydantic import BaseModel, ConfigDict, field_validator

from kustcheck.components.validator.models import ErrorPolicy


class Settings(BaseModel):
    error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE
    log_level: str = "INFO"

    model_config = ConfigDict(extra="forbid")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
