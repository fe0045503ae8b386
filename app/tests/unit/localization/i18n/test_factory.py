"""Tests for localization.i18n.factory and the service providers."""

import pytest

from localization.i18n.bundles import LocalizationHolder
from localization.i18n.errors import IncompleteDefaultBundleError, LocalizationError
from localization.i18n.factory import bootstrap_localizations, create_localization_holder
from localization.i18n.localizer import LanguageLocalizer
from localization.services import get_localization_holder, get_localizer_class
from tests.factories.i18n import write_catalogs


@pytest.fixture
def clear_provider_caches():
    get_localization_holder.cache_clear()
    get_localizer_class.cache_clear()
    yield
    get_localization_holder.cache_clear()
    get_localizer_class.cache_clear()


@pytest.mark.unit
class TestCreateLocalizationHolder:
    """Tests for create_localization_holder()."""

    def test_from_settings(self, localization_settings):
        holder = create_localization_holder(settings=localization_settings)

        assert isinstance(holder, LocalizationHolder)
        assert holder.default_language == "en_US"

    def test_arguments_override_settings(self, localization_root, make_settings):
        settings = make_settings(translations_dir=localization_root / "missing")

        holder = create_localization_holder(
            translations_dir=localization_root,
            default_language="fr",
            settings=settings,
        )

        assert holder.default_language == "fr"


@pytest.mark.unit
class TestBootstrapLocalizations:
    """Tests for bootstrap_localizations()."""

    def test_success(self, localization_settings):
        holder = bootstrap_localizations(settings=localization_settings)
        assert holder.languages == ["de", "en_US", "fr"]

    def test_incomplete_default_language(self, localization_root, make_settings):
        settings = make_settings(translations_dir=localization_root, default_language="de")

        with pytest.raises(IncompleteDefaultBundleError) as exc_info:
            bootstrap_localizations(settings=settings)

        assert exc_info.value.missing_messages == ["greeting", "inbox", "welcome-user"]
        assert exc_info.value.missing_terms == ["brand"]

    def test_given_localizer_class(self, localization_settings):
        class Greeter(LanguageLocalizer):
            EXPECTED_MESSAGES = ("greeting",)

        holder = bootstrap_localizations(Greeter, settings=localization_settings)

        assert Greeter(holder, "fr").localize("greeting") == "Bonjour"

    def test_broken_schema(self, tmp_path, make_settings):
        write_catalogs(tmp_path, {"default": {"messages": "a = { -missing }\n"}})

        with pytest.raises(LocalizationError):
            bootstrap_localizations(settings=make_settings(translations_dir=tmp_path))


@pytest.mark.unit
class TestProviders:
    """Tests for the cached service providers."""

    @pytest.fixture(autouse=True)
    def environment(self, localization_root, monkeypatch, clear_provider_caches):
        monkeypatch.setenv("TRANSLATION_DIR", str(localization_root))
        monkeypatch.setenv("DEFAULT_LANG", "fr")

    def test_holder_from_environment(self):
        holder = get_localization_holder()

        assert holder.default_language == "fr"
        assert get_localization_holder() is holder

    def test_localizer_class_from_environment(self):
        localizer_class = get_localizer_class()

        assert get_localizer_class() is localizer_class
        holder = get_localization_holder()
        assert localizer_class(holder, "de").messages_about() == "Über Acme"
        assert localizer_class(holder, "ja").messages_greeting() == "Bonjour"
