"""
polycrack - Configuration
Settings for the front end, loaded from POLYCRACK_* environment variables
(or a .env file) using pydantic-settings.

Nothing is read at import time: front ends call get_settings().
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .languages import Language, get_language


class Settings(BaseSettings):
    """Cracking defaults: language profile, key-length budget, key rotation."""

    LANGUAGE: str = "english"
    MAX_KEY_LENGTH: int = 10
    ROT: int = Field(default=0, ge=0, le=1)  # Rot.ROT0 or Rot.ROT1
    STRICT_PERIOD: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="POLYCRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LANGUAGE")
    @classmethod
    def _known_language(cls, value: str) -> str:
        get_language(value)
        return value.strip().lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    def language(self) -> Language:
        return get_language(self.LANGUAGE)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings from the environment, built on first use."""
    return Settings()
