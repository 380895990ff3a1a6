"""Configuration management for the cricket CLI."""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load environment from .env if present
load_dotenv(override=False)


class APISettings(BaseSettings):
    """CricketData API settings."""

    model_config = SettingsConfigDict(populate_by_name=True)

    base_url: str = Field(default="https://api.cricapi.com", validation_alias="CRICAPI_BASE_URL")
    timeout: float = Field(default=30.0, validation_alias="CRICAPI_TIMEOUT")
    # One attempt means no retry
    retry_attempts: int = Field(default=1, ge=1, validation_alias="CRICAPI_RETRY_ATTEMPTS")
    user_agent: str = Field(default="cricket-cli/0.1", validation_alias="CRICAPI_USER_AGENT")


class DisplaySettings(BaseSettings):
    """Terminal display settings."""

    model_config = SettingsConfigDict(populate_by_name=True)

    page_size: int = Field(default=3, ge=1, validation_alias="CRICKET_CLI_PAGE_SIZE")
    refresh_interval: float = Field(default=60.0, gt=0, validation_alias="CRICKET_CLI_REFRESH_SECONDS")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(populate_by_name=True)

    level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")
    file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")


class Settings(BaseSettings):
    """Main application settings."""

    # Prefix keeps nested sections clear of unrelated variables such as DISPLAY
    model_config = SettingsConfigDict(env_prefix="CRICKET_CLI_", populate_by_name=True)

    api: APISettings = Field(default_factory=APISettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    credentials_file: str = Field(default="cricket-cli-config.json", validation_alias="CRICKET_CLI_CONFIG_FILE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings loaded from environment."""
    return Settings()
