"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )

    # =========================================================================
    # Shoe API
    # =========================================================================
    shoe_api_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the remote shoe product service",
    )
    shoe_api_path: str = Field(
        default="/shoes",
        description="Collection path of the shoe resource",
    )
    shoe_api_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Shoe API request timeout in seconds",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: LogLevel = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log level names in any case."""
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
