"""Tests for centralized configuration settings."""

from vito_results import MessagePolicy, Result, ValueResult
from vito_results.config import (
    LoggingSettings,
    MessagePolicySettings,
    Settings,
    get_settings,
    reset_settings,
)


class TestMessagePolicySettings:
    """Tests for message policy configuration."""

    def test_default_values(self):
        settings = MessagePolicySettings()
        assert settings.clean_messages is True
        assert settings.ignore_empty_messages is True
        assert settings.remove_duplicate_messages is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("VITO_RESULTS_CLEAN_MESSAGES", "false")
        monkeypatch.setenv("VITO_RESULTS_IGNORE_EMPTY_MESSAGES", "0")
        monkeypatch.setenv("VITO_RESULTS_REMOVE_DUPLICATE_MESSAGES", "no")

        settings = MessagePolicySettings()
        assert settings.clean_messages is False
        assert settings.ignore_empty_messages is False
        assert settings.remove_duplicate_messages is False


class TestLoggingSettings:
    """Tests for logging configuration."""

    def test_default_values(self):
        settings = LoggingSettings()
        assert settings.debug_all is False
        assert settings.log_level == "INFO"

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = LoggingSettings()
        assert settings.log_level == "DEBUG"

    def test_debug_all(self, monkeypatch):
        monkeypatch.setenv("DEBUG_ALL", "true")

        settings = LoggingSettings()
        assert settings.debug_all is True


class TestSettingsSingleton:
    """Tests for get_settings() / reset_settings()."""

    def test_nested_defaults(self):
        settings = Settings()
        assert isinstance(settings.messages, MessagePolicySettings)
        assert isinstance(settings.logging, LoggingSettings)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings_picks_up_env(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("VITO_RESULTS_CLEAN_MESSAGES", "false")
        reset_settings()

        second = get_settings()
        assert second is not first
        assert second.messages.clean_messages is False


class TestPolicyFromSettings:
    """Results built from configuration."""

    def test_policy_from_explicit_settings(self):
        settings = MessagePolicySettings(clean_messages=False)

        assert MessagePolicy.from_settings(settings) == MessagePolicy(
            clean_messages=False,
            ignore_empty_messages=True,
            remove_duplicate_messages=True,
        )

    def test_result_from_env(self, monkeypatch):
        monkeypatch.setenv("VITO_RESULTS_CLEAN_MESSAGES", "false")

        result = Result.from_settings().add_message("  raw  ")
        assert result.messages == ("  raw  ",)

    def test_value_result_from_env(self, monkeypatch):
        monkeypatch.setenv("VITO_RESULTS_REMOVE_DUPLICATE_MESSAGES", "false")

        result = ValueResult.from_settings().add_message("a").add_message("a")
        assert result.messages == ("a", "a")

    def test_create_ignores_env(self, monkeypatch):
        monkeypatch.setenv("VITO_RESULTS_CLEAN_MESSAGES", "false")

        result = Result.create().add_message("  trimmed  ")
        assert result.messages == ("trimmed",)
        assert result.policy == MessagePolicy()
