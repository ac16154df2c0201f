"""
Arrata - Settings

Loads configuration from environment variables (prefixed ``ARRATA_``) or a
``.env`` file using Pydantic Settings, and applies the logging level.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Dice
    max_dice_per_roll: int | None = Field(default=None, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="ARRATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the ``arrata`` logger at the configured level.

    Safe to call more than once; the handler is only added the first time.
    Debug mode forces the DEBUG level.
    """
    if settings is None:
        settings = get_settings()

    level = logging.DEBUG if settings.debug else settings.log_level
    logger = logging.getLogger("arrata")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)

    return logger
