import logging
import os
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    LOG_LEVEL: str = Field("INFO", description="Logging level for the optkit logger.")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string passed to logging.Formatter.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return value

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        level = os.getenv("OPTKIT_LOG_LEVEL") or os.getenv("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level

        format_string = os.getenv("OPTKIT_LOG_FORMAT")
        if format_string:
            values["LOG_FORMAT"] = format_string

        return cls(**values)


settings = Settings.load()
