from __future__ import annotations

import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICECORE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Level passed to logging.basicConfig by the command-line and HTTP surfaces.
    log_level: LogLevel = "WARNING"

    # Hex-encoded 32-byte seed used when a caller does not pass one.
    # Leave empty for non-deterministic rolls.
    default_seed: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


settings = Settings()


def configure_logging(verbose: bool = False) -> None:
    """Install a stderr handler at the configured level (DEBUG when verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
