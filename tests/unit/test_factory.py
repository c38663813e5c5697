"""Tests for hgts.factory and hgts.providers modules."""

import pytest

from hgts import DefaultPluralCategorizer, Translator
from hgts.configuration import Settings
from hgts.factory import create_translator
from hgts.providers import get_settings, get_translator


@pytest.mark.unit
class TestCreateTranslator:
    """Tests for create_translator()."""

    def test_uses_settings_locales(self, monkeypatch, sample_resources):
        """Locales come from settings."""
        monkeypatch.setenv("HGTS_DEFAULT_LOCALE", "es")
        monkeypatch.setenv("HGTS_FALLBACK_LOCALE", "en")

        translator = create_translator(sample_resources, settings=Settings())

        assert translator.get_language() == "es"
        assert translator.fallback_locale == "en"
        assert translator.t("only_in_english") == "English only"

    def test_fallback_defaults_to_settings_default(self, monkeypatch):
        """Without HGTS_FALLBACK_LOCALE the default locale is the fallback."""
        monkeypatch.setenv("HGTS_DEFAULT_LOCALE", "fr")
        monkeypatch.delenv("HGTS_FALLBACK_LOCALE", raising=False)

        translator = create_translator({"fr": {}}, settings=Settings())

        assert translator.fallback_locale == "fr"

    def test_passes_plural_options(self, sample_resources):
        """Plural rule and categorizer reach the translator."""
        categorizer = DefaultPluralCategorizer()
        translator = create_translator(
            sample_resources,
            plural_rule=lambda count, locale: "other",
            categorizer=categorizer,
        )
        assert translator.categorizer is categorizer
        assert translator.t("items", {"count": 1}) == "1 items"

    def test_without_resources(self):
        """A translator can be created before resources exist."""
        translator = create_translator()
        assert translator.get_available_languages() == []


@pytest.mark.unit
class TestProviders:
    """Tests for application-scoped providers."""

    def test_get_settings_is_cached(self):
        """get_settings() returns one instance."""
        assert get_settings() is get_settings()

    def test_get_translator_is_cached(self):
        """get_translator() returns one shared Translator."""
        translator = get_translator()
        assert isinstance(translator, Translator)
        assert get_translator() is translator

    def test_configure_once_use_everywhere(self, sample_resources):
        """Configuration on the shared translator is visible to all callers."""
        get_translator().configure(sample_resources)
        assert get_translator().t("greeting") == "Hello, World!"

    def test_get_translator_reads_settings(self, monkeypatch):
        """The shared translator starts in the configured default locale."""
        monkeypatch.setenv("HGTS_DEFAULT_LOCALE", "es")
        assert get_translator().get_language() == "es"

    def test_create_translator_defaults_to_provided_settings(self, monkeypatch):
        """Without explicit settings, locales are read when the factory runs."""
        monkeypatch.setenv("HGTS_DEFAULT_LOCALE", "fr")
        monkeypatch.setenv("HGTS_FALLBACK_LOCALE", "en")

        translator = create_translator({"fr": {}, "en": {}})

        assert translator.get_language() == "fr"
        assert translator.fallback_locale == "en"
