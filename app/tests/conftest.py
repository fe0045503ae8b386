import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing
# `localization` works during pytest collection regardless of invocation.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from localization.configuration import LocalizationSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    """Build LocalizationSettings without reading the environment."""

    def _make(translations_dir=None, default_language="en_US", use_isolating=False):
        return LocalizationSettings(
            TRANSLATION_DIR=translations_dir,
            DEFAULT_LANG=default_language,
            LOCALIZATION_USE_ISOLATING=use_isolating,
        )

    return _make
