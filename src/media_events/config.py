"""Configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()


class CodecConfig(BaseModel, frozen=True):
    """JSON codec configuration."""

    indent: int | None = Field(default=None, ge=0)


class AppConfig(BaseModel, frozen=True):
    """Root configuration."""

    logging: LoggingConfig = LoggingConfig()
    codec: CodecConfig = CodecConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    indent = os.getenv("MEDIA_EVENTS_JSON_INDENT", "").strip()
    return AppConfig(
        logging=LoggingConfig(
            level=os.getenv("MEDIA_EVENTS_LOG_LEVEL", "INFO"),
        ),
        codec=CodecConfig(
            indent=indent or None,
        ),
    )
