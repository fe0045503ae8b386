"""Feature-level fixtures for i18n system tests.

Provides catalog trees on disk and settings pointing at them.
"""

import pytest

from localization.i18n import LocalizationHolder
from tests.factories.i18n import make_localization_tree


@pytest.fixture
def localization_root(tmp_path):
    """Catalog root with default, en_US, fr and de directories."""
    return make_localization_tree(tmp_path / "localizations")


@pytest.fixture
def localization_settings(localization_root, make_settings):
    """Settings pointing at the temporary catalog root."""
    return make_settings(translations_dir=localization_root)


@pytest.fixture
def holder(localization_root):
    """Holder loaded from the temporary catalog root."""
    return LocalizationHolder.load(
        translations_dir=localization_root,
        default_language="en_US",
        use_isolating=False,
    )
