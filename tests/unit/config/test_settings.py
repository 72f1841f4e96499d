"""Unit tests for Settings class and get_settings function."""

import pytest
from pydantic import ValidationError

from confchain.config import (
    configure_logging,
    get_settings,
    reload_settings,
)
from confchain.config.settings import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings has sensible defaults."""
        for name in ("CONFCHAIN_LOG_LEVEL", "CONFCHAIN_LOG_FORMAT", "CONFCHAIN_REDACT_SECRETS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.redact_secrets is True

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CONFCHAIN_* variables override defaults."""
        monkeypatch.setenv("CONFCHAIN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CONFCHAIN_LOG_FORMAT", "console")
        monkeypatch.setenv("CONFCHAIN_REDACT_SECRETS", "false")

        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"
        assert settings.redact_secrets is False

    def test_invalid_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log levels fail validation."""
        monkeypatch.setenv("CONFCHAIN_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Tests for get_settings function."""

    def test_settings_cached(self) -> None:
        """get_settings returns cached instance."""
        assert get_settings() is get_settings()

    def test_reload_settings_picks_up_changes(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """reload_settings re-reads the environment."""
        monkeypatch.setenv("CONFCHAIN_LOG_LEVEL", "INFO")
        first = get_settings()

        monkeypatch.setenv("CONFCHAIN_LOG_LEVEL", "ERROR")
        assert get_settings().log_level == "INFO"

        reloaded = reload_settings()
        assert reloaded is not first
        assert reloaded.log_level == "ERROR"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configure_from_explicit_settings(self) -> None:
        """Explicit settings are applied without error."""
        configure_logging(Settings(log_level="DEBUG", log_format="console"))

    def test_configure_from_cached_settings(self) -> None:
        """Defaults to get_settings()."""
        configure_logging()
