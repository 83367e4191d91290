"""Application configuration management.

Loads settings from environment with validation.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="PHONLEV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Homophones
    homophones_path: Optional[Path] = None
    homophones_delimiter: str = Field(default=",", min_length=1)
    symmetric_homophones: bool = True

    # Development
    debug: bool = False
    log_level: str = "INFO"

    @property
    def has_homophone_source(self) -> bool:
        """Whether a homophone word list is configured."""
        return self.homophones_path is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
