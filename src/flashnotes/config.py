"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SETTINGS_PATH = Path.home() / ".flashnotes" / "settings.json"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLASHNOTES_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    PROJECT_NAME: str = "flashnotes"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # User settings store (JSON file)
    SETTINGS_PATH: Path = DEFAULT_SETTINGS_PATH

    # Overrides the notes directory kept in the user settings store
    NOTES_DIRECTORY: Path | None = None

    MAX_RECENT_DIRECTORIES: int = 10

    # Keyword highlighting markup
    HIGHLIGHT_OPEN_TAG: str = "<mark>"
    HIGHLIGHT_CLOSE_TAG: str = "</mark>"

    @field_validator("MAX_RECENT_DIRECTORIES", mode="after")
    @classmethod
    def validate_max_recent_directories(cls, value: int) -> int:
        """Recent directory history must keep at least one entry."""
        if value < 1:
            msg = "MAX_RECENT_DIRECTORIES must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("SETTINGS_PATH", "NOTES_DIRECTORY", mode="after")
    @classmethod
    def expand_user(cls, value: Path | None) -> Path | None:
        """Expand ``~`` in configured paths."""
        return value.expanduser() if value is not None else None


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog.

    Logs go to stderr: the MCP server speaks its protocol over stdout.
    """
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
