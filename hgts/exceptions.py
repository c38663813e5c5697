"""Exceptions raised by hgts.

Only switching to an unconfigured locale raises. Missing keys, malformed
entries and unknown placeholders degrade to returning the key or leaving
the placeholder in place.
"""

from typing import Iterable


class TranslationError(Exception):
    """Base exception for all hgts errors.

    Example:
        try:
            translator.change_language(selected)
        except TranslationError as e:
            logger.warning("language_switch_failed", error=str(e))
    """

    pass


class LocaleNotFoundError(TranslationError, LookupError):
    """Raised when switching to a locale that has no resources.

    Example:
        >>> translator.change_language("de")
        Traceback (most recent call last):
        ...
        LocaleNotFoundError: Language "de" not found. Available languages: en, es

    Attributes:
        locale: The requested locale code.
        available: Locale codes that were configured.
    """

    def __init__(self, locale: str, available: Iterable[str]):
        self.locale = locale
        self.available = tuple(available)
        super().__init__(
            f'Language "{locale}" not found. '
            f"Available languages: {', '.join(self.available)}"
        )
