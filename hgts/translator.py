"""Translator service: resolves keys to localized, interpolated strings.

The translator is an explicit service object. Configure it once at startup
and hand it to the code that needs translations, either directly or through
``hgts.providers.get_translator()``.
"""

from decimal import Decimal
from typing import Any, Mapping, Optional

from hgts.exceptions import LocaleNotFoundError
from hgts.interpolation import interpolate
from hgts.logging import get_logger
from hgts.models import Found, PluralGroup
from hgts.plural import PluralCategorizer, PluralRule, PluralSelector
from hgts.resolvers import KeyResolver
from hgts.store import ResourceStore

logger = get_logger(__name__)

DEFAULT_LOCALE = "en"


class Translator:
    """Service for translating keys with fallback, plurals and interpolation.

    Holds the resource store and locale state. ``configure`` replaces all of
    it at once; ``change_language`` is the only other mutator. There is no
    locking: configure once, then read from anywhere.

    Missing translations never raise. ``translate`` returns the key itself,
    which is the signal that a string is missing.

    Attributes:
        categorizer: Locale-aware plural categorizer used when no custom
            plural rule is configured.

    Usage:
        translator = Translator(
            resources={
                "en": {"greeting": "Hello, {{name}}!"},
                "es": {"greeting": "¡Hola, {{name}}!"},
            },
            default_locale="en",
        )
        translator.t("greeting", {"name": "John"})  # "Hello, John!"
        translator.change_language("es")
    """

    def __init__(
        self,
        resources: Optional[Mapping[str, Any]] = None,
        default_locale: Optional[str] = None,
        fallback_locale: Optional[str] = None,
        plural_rule: Optional[PluralRule] = None,
        categorizer: Optional[PluralCategorizer] = None,
    ):
        """Initialize Translator.

        Args:
            resources: Locale code -> nested mapping of translations.
            default_locale: Locale to start in (default: "en").
            fallback_locale: Locale consulted on a miss (default: default_locale).
            plural_rule: Optional custom ``rule(count, locale)`` returning a plural form.
            categorizer: Plural categorizer used without a custom rule
                (default: CLDR rules from Babel).
        """
        self.categorizer = categorizer
        self.configure(
            resources or {},
            default_locale=default_locale,
            fallback_locale=fallback_locale,
            plural_rule=plural_rule,
        )

    def configure(
        self,
        resources: Mapping[str, Any],
        default_locale: Optional[str] = None,
        fallback_locale: Optional[str] = None,
        plural_rule: Optional[PluralRule] = None,
    ) -> None:
        """Replace all resources and locale configuration.

        The default locale is not checked against the resources; lookups in
        a locale without resources simply miss. Calling again replaces
        everything, including the plural rule.

        Args:
            resources: Locale code -> nested mapping of translations.
            default_locale: Locale to start in (default: "en").
            fallback_locale: Locale consulted on a miss (default: default_locale).
            plural_rule: Optional custom plural rule; None removes a previous one.
        """
        store = ResourceStore.from_resources(resources)
        default_locale = default_locale or DEFAULT_LOCALE

        self._store = store
        self._resolver = KeyResolver(store)
        self._plurals = PluralSelector(rule=plural_rule, categorizer=self.categorizer)
        self._default_locale = default_locale
        self._fallback_locale = fallback_locale or default_locale
        self._current_locale = default_locale

        logger.info(
            "configured_translator",
            locales=list(store.locales),
            default_locale=self._default_locale,
            fallback_locale=self._fallback_locale,
            custom_plural_rule=plural_rule is not None,
        )

    def change_language(self, locale: str) -> None:
        """Switch the current locale.

        Args:
            locale: Locale code to switch to.

        Raises:
            LocaleNotFoundError: If locale has no resources. The current
                locale is left unchanged.
        """
        if locale not in self._store:
            logger.warning(
                "language_not_found",
                locale=locale,
                available=list(self._store.locales),
            )
            raise LocaleNotFoundError(locale, self._store.locales)

        previous = self._current_locale
        self._current_locale = locale
        logger.info("changed_language", locale=locale, previous_locale=previous)

    def get_language(self) -> str:
        """Get the current locale code."""
        return self._current_locale

    def get_available_languages(self) -> list:
        """Get the configured locale codes, in configuration order."""
        return list(self._store.locales)

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a key in the current locale.

        Passing a numeric ``count`` in params selects among plural forms.
        Plural categories always follow the current locale, even when the
        forms came from the fallback locale.

        Args:
            key: Dotted translation key (e.g. "nested.message").
            params: Optional values for {{name}} placeholders.

        Returns:
            The translated string, or the key itself if no translation exists.

        Examples:
            translator.t("greeting")                 # "Hello, World!"
            translator.t("welcome", {"name": "John"})  # "Welcome, John!"
            translator.t("items", {"count": 5})      # "5 items"
        """
        count = params.get("count") if params is not None else None
        is_plural = _is_number(count)

        result = self._resolver.resolve(key, self._current_locale, is_plural)
        if not result and self._current_locale != self._fallback_locale:
            result = self._resolver.resolve(key, self._fallback_locale, is_plural)
            if result:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=self._current_locale,
                    fallback_locale=self._fallback_locale,
                )

        if not isinstance(result, Found):
            logger.debug(
                "translation_not_found",
                key=key,
                locale=self._current_locale,
                fallback_locale=self._fallback_locale,
            )
            return key

        node = result.node
        if isinstance(node, PluralGroup):
            if not is_plural:
                return key
            message = self._plurals.select_form(count, self._current_locale, node)
            if message is None:
                return key
        else:
            message = node.value

        if params is not None:
            return interpolate(message, params)
        return message

    t = translate

    def exists(self, key: str, locale: Optional[str] = None) -> bool:
        """Check if a key has a translation in locale, without fallback.

        Args:
            key: Dotted translation key.
            locale: Locale to check (default: current locale).

        Returns:
            True if the key resolves to a string or a plural group.
        """
        locale = locale or self._current_locale
        return bool(self._resolver.resolve(key, locale, allow_plural_group=True))

    @property
    def current_locale(self) -> str:
        return self._current_locale

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def fallback_locale(self) -> str:
        return self._fallback_locale

    @property
    def store(self) -> ResourceStore:
        return self._store

    @property
    def plural_rule(self) -> Optional[PluralRule]:
        return self._plurals.rule

    @property
    def plurals(self) -> PluralSelector:
        return self._plurals


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
