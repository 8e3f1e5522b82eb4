"""Configuration module for vito_results.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from vito_results.config import get_settings

    settings = get_settings()

    # Default message policy for Result.from_settings()
    clean = settings.messages.clean_messages

    # Logging settings used by setup_logging()
    level = settings.logging.log_level
"""

from vito_results.config.settings import (
    LoggingSettings,
    MessagePolicySettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "MessagePolicySettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
