"""Unit tests for localization.configuration module.

Tests cover:
- LocalizationSettings defaults and environment overrides
- Settings aggregator and the cached get_settings() provider
"""

from pathlib import Path

import pytest

from localization.configuration import (
    DEFAULT_LANGUAGE,
    DEFAULT_RESOURCE_DIR,
    LocalizationSettings,
    Settings,
    get_settings,
)


@pytest.fixture
def clean_environment(monkeypatch):
    for name in ("TRANSLATION_DIR", "DEFAULT_LANG", "LOCALIZATION_USE_ISOLATING", "PREFIX"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
@pytest.mark.usefixtures("clean_environment")
class TestLocalizationSettings:
    """Test suite for LocalizationSettings configuration."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)

        settings = LocalizationSettings()

        assert settings.TRANSLATION_DIR is None
        assert settings.DEFAULT_LANG == DEFAULT_LANGUAGE == "en_US"
        assert settings.USE_ISOLATING is False
        assert settings.base_path == tmp_path / DEFAULT_RESOURCE_DIR

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRANSLATION_DIR", str(tmp_path))
        monkeypatch.setenv("DEFAULT_LANG", "fr")
        monkeypatch.setenv("LOCALIZATION_USE_ISOLATING", "true")

        settings = LocalizationSettings()

        assert settings.base_path == tmp_path
        assert settings.DEFAULT_LANG == "fr"
        assert settings.USE_ISOLATING is True

    def test_empty_translation_dir_is_unset(self, monkeypatch):
        monkeypatch.setenv("TRANSLATION_DIR", "  ")

        assert LocalizationSettings().TRANSLATION_DIR is None

    def test_keyword_overrides(self, tmp_path):
        settings = LocalizationSettings(TRANSLATION_DIR=str(tmp_path), DEFAULT_LANG="de")

        assert settings.TRANSLATION_DIR == Path(tmp_path)
        assert settings.DEFAULT_LANG == "de"


@pytest.mark.unit
@pytest.mark.usefixtures("clean_environment")
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_instantiates_localization_settings(self):
        settings = Settings()

        assert isinstance(settings.localization, LocalizationSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_accepts_section_override(self):
        localization = LocalizationSettings(DEFAULT_LANG="fr")

        assert Settings(localization=localization).localization.DEFAULT_LANG == "fr"

    def test_is_production(self, monkeypatch):
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_clear_reads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("DEFAULT_LANG", "pt_BR")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().localization.DEFAULT_LANG == "pt_BR"
