"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for vito_results.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MessagePolicySettings(BaseSettings):
    """Default message policy for results built from settings."""

    model_config = SettingsConfigDict(env_prefix="VITO_RESULTS_", extra="ignore")

    clean_messages: bool = Field(
        default=True,
        description="Trim messages and collapse runs of spaces",
    )
    ignore_empty_messages: bool = Field(
        default=True,
        description="Drop messages that are empty or whitespace-only",
    )
    remove_duplicate_messages: bool = Field(
        default=True,
        description="Drop messages already present in the target collection",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for vito_results namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from vito_results.config import get_settings

        settings = get_settings()
        clean = settings.messages.clean_messages
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    messages: MessagePolicySettings = Field(default_factory=MessagePolicySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
