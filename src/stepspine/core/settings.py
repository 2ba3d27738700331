"""Runtime settings for stepspine.

Settings are read from ``STEPSPINE_*`` environment variables (and a local
``.env`` file) through pydantic-settings, so a test suite can change the term
placeholder prefix or the log output without touching code.

Fields
──────
term_prefix  : Character that introduces a dictionary term in a signature
log_level    : Structlog log level
log_format   : ``console`` for development, ``json`` for log aggregation

Examples:
    >>> from stepspine.core.settings import get_settings
    >>> get_settings().term_prefix
    '$'

Tags:
    settings, configuration, pydantic, environment, stepspine

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StepSpineSettings(BaseSettings):
    """Settings shared by every library and interpreter in the process."""

    model_config = SettingsConfigDict(
        env_prefix="STEPSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Dictionary ───────────────────────────────────────────────
    term_prefix: str = Field(
        default="$",
        description="Character that introduces a term placeholder",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("term_prefix")
    @classmethod
    def _single_marker_character(cls, value: str) -> str:
        if len(value) != 1 or value.isalnum() or value in "_\\" or value.isspace():
            raise ValueError("term_prefix must be a single punctuation character other than a backslash")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, value: str) -> str:
        return value.lower() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> StepSpineSettings:
    """Return the cached process-wide settings."""
    return StepSpineSettings()


def reset_settings() -> None:
    """Drop the cached settings (for testing)."""
    get_settings.cache_clear()
