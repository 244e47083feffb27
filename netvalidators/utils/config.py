"""
Configuration management using Pydantic Settings
Loads and validates NETVALIDATORS_* environment variables (and an optional .env file)
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.
    Every field has a default, so a missing .env file is not an error.
    """

    model_config = SettingsConfigDict(
        env_prefix="NETVALIDATORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_console: bool = Field(
        default=True,
        description="Emit colored log output on stdout"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file name, written inside log_dir"
    )
    log_dir: str = Field(
        default="logs",
        description="Directory for log files"
    )

    # URL Validation
    default_url_schemes: List[str] = Field(
        default=["http", "https", "ftp"],
        description="Schemes accepted by UrlRule when none are given"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("default_url_schemes")
    @classmethod
    def validate_default_url_schemes(cls, v: List[str]) -> List[str]:
        """Schemes are compared case-blind, so store them lower-case"""
        if not v:
            raise ValueError("default_url_schemes must not be empty")
        return [scheme.lower() for scheme in v]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the shared settings instance.
    Built from the environment on first call.

    Returns:
        Settings instance

    Raises:
        ValidationError: If environment variables are present but invalid
    """
    return Settings()


def reset_settings():
    """
    Drop the cached settings (useful for testing)
    """
    get_settings.cache_clear()
