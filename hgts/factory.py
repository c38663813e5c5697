"""Factory functions for creating translators from settings."""

from typing import Any, Mapping, Optional

from hgts.configuration import Settings, get_settings
from hgts.logging import get_logger
from hgts.plural import PluralCategorizer, PluralRule
from hgts.translator import Translator

logger = get_logger(__name__)


def create_translator(
    resources: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
    plural_rule: Optional[PluralRule] = None,
    categorizer: Optional[PluralCategorizer] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Locales come from settings (HGTS_DEFAULT_LOCALE, HGTS_FALLBACK_LOCALE).
    Sourcing the resources (files, bundles, remote) is up to the caller.

    Args:
        resources: Locale code -> nested mapping of translations.
        settings: Settings to read locales from (default: get_settings()).
        plural_rule: Optional custom plural rule.
        categorizer: Optional plural categorizer (default: Babel CLDR rules).

    Returns:
        Translator: Configured translator instance

    Usage:
        translator = create_translator({"en": {"greeting": "Hello"}})

        # Explicit settings
        translator = create_translator(resources, settings=Settings())
    """
    settings = settings or get_settings()

    translator = Translator(
        resources=resources,
        default_locale=settings.DEFAULT_LOCALE,
        fallback_locale=settings.fallback_locale,
        plural_rule=plural_rule,
        categorizer=categorizer,
    )
    logger.info(
        "translator_created",
        default_locale=translator.default_locale,
        fallback_locale=translator.fallback_locale,
        locale_count=len(translator.store),
    )
    return translator
