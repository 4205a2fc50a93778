from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Codec Workbench"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"

    # Database
    database_url: str = "sqlite+aiosqlite:///./codec.db"

    # Logging
    journal_path: str = "./journal.log"
    log_level: str = "INFO"

    # Transform settings
    max_text_length: int = 10_000
    shift_min: int = 1
    shift_max: int = 25
    default_shift: int = 3
    default_layout: Literal["auto", "cyrillic", "latin"] = "auto"

    # History
    history_preview_length: int = 30

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
