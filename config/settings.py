from typing import Literal

from pydantic import PositiveInt, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Page
    app_title: str = "Shopping List"
    page_icon: str = "🛒"

    # Shopping list behaviour
    clear_input_after_add: bool = False  # Keep the typed text after "Add" unless enabled
    list_height: PositiveInt = 400  # Height of the scrollable item list, in pixels

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
