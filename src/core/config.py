"""Core configuration.

- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI layer.
- Replaces shell-style global/exported variables with one explicit settings
  object that callers pass around.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_WHILE_STOP = 10_000


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "shell-idioms"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "shell-idioms"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "shell-idioms"
    return Path.home() / ".config" / "shell-idioms"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Values come from `SHELL_IDIOMS_*` environment variables, then `.env` in the
    working directory, then the user-level `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHELL_IDIOMS_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    output_format: Literal["table", "json"] = Field(
        default="table",
        description="How `example-function` renders the parsed arguments.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the banner before the notes output.",
    )
    default_while_stop: int = Field(
        default=5,
        ge=0,
        le=MAX_WHILE_STOP,
        description="Upper bound used by the while-loop section when none is given.",
    )
    default_ifs_input: str = Field(
        default="apple,banana,cherry",
        description="Comma-separated input used by the ifs-comma section.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {value}")
        return level
