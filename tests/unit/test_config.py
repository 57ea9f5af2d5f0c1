"""Configuration tests."""

from __future__ import annotations

import pytest

from genai_catalog.config import CatalogSettings, get_catalog_settings


class TestCatalogSettings:
    """Catalog settings tests."""

    def test_defaults(self) -> None:
        """Defaults point at the built-in default model."""
        settings = CatalogSettings(_env_file=None)

        assert settings.default_model == "gpt-4o-mini"
        assert settings.verify_default_model is True
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_custom_values(self) -> None:
        """Custom values can be set."""
        settings = CatalogSettings(
            default_model="claude-3-haiku-20240307",
            verify_default_model=False,
            log_level="DEBUG",
            log_json=False,
            _env_file=None,
        )

        assert settings.default_model == "claude-3-haiku-20240307"
        assert settings.verify_default_model is False
        assert settings.log_level == "DEBUG"
        assert settings.log_json is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables use the CATALOG_ prefix."""
        monkeypatch.setenv("CATALOG_DEFAULT_MODEL", "o4-mini")
        monkeypatch.setenv("CATALOG_VERIFY_DEFAULT_MODEL", "false")

        settings = CatalogSettings(_env_file=None)

        assert settings.default_model == "o4-mini"
        assert settings.verify_default_model is False

    def test_mock_settings_fixture(self, mock_settings: None) -> None:
        """Fixture environment is picked up."""
        settings = CatalogSettings(_env_file=None)

        assert settings.log_level == "DEBUG"


class TestSettingsSingletons:
    """Settings singleton tests."""

    def test_get_catalog_settings_cached(self) -> None:
        """Catalog settings are cached."""
        get_catalog_settings.cache_clear()

        settings1 = get_catalog_settings()
        settings2 = get_catalog_settings()

        assert settings1 is settings2
