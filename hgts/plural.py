"""Plural form selection.

Plural categories come from one of three places, in order:

1. A custom rule passed to the translator, ``rule(count, locale)``.
2. A ``PluralCategorizer``; the default reads CLDR cardinal rules from
   Babel's locale data.
3. ``default_plural_form`` when no locale data is available: 0 -> zero,
   1 -> one, anything else -> other.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, Optional, Union

from babel import Locale, UnknownLocaleError

from hgts.logging import get_logger
from hgts.models import PluralForm, PluralGroup

logger = get_logger(__name__)

Number = Union[int, float, Decimal]

# Custom rule signature; may return a PluralForm or its plain string value
PluralRule = Callable[[Number, str], Union[PluralForm, str]]


def default_plural_form(count: Number) -> PluralForm:
    """Context-free plural rule used when no locale data applies."""
    if count == 0:
        return PluralForm.ZERO
    if count == 1:
        return PluralForm.ONE
    return PluralForm.OTHER


class PluralCategorizer(ABC):
    """Maps a count in a locale to a plural category."""

    @abstractmethod
    def categorize(self, count: Number, locale: str) -> str:
        """Return the plural category name for count in locale."""
        pass


class DefaultPluralCategorizer(PluralCategorizer):
    """Ignores the locale and applies ``default_plural_form``."""

    def categorize(self, count: Number, locale: str) -> str:
        return default_plural_form(count).value


class BabelPluralCategorizer(PluralCategorizer):
    """CLDR cardinal plural rules backed by Babel.

    Locale codes are accepted with "-" or "_" separators ("pt-BR", "pt_BR").
    Locales Babel cannot parse or has no data for, and counts its rules
    cannot evaluate, fall back to ``default_plural_form``.
    """

    def categorize(self, count: Number, locale: str) -> str:
        try:
            babel_locale = Locale.parse(str(locale).replace("_", "-"), sep="-")
            return babel_locale.plural_form(count)
        except (UnknownLocaleError, ValueError, TypeError, ArithmeticError) as e:
            logger.debug(
                "plural_rules_unavailable",
                locale=locale,
                count=str(count),
                error=str(e),
            )
            return default_plural_form(count).value


class PluralSelector:
    """Picks the string for a count out of a plural group.

    Attributes:
        rule: Optional custom rule; takes precedence over the categorizer.
        categorizer: Locale-aware categorizer (default: Babel CLDR rules).
    """

    def __init__(
        self,
        rule: Optional[PluralRule] = None,
        categorizer: Optional[PluralCategorizer] = None,
    ):
        self.rule = rule
        self.categorizer = categorizer or BabelPluralCategorizer()

    def category(self, count: Number, locale: str) -> str:
        """Determine the plural category for count in locale.

        Exceptions raised by a custom rule propagate to the caller.
        """
        if self.rule is not None:
            form = self.rule(count, locale)
        else:
            form = self.categorizer.categorize(count, locale)
        return form.value if isinstance(form, PluralForm) else form

    def select_form(
        self, count: Number, locale: str, group: PluralGroup
    ) -> Optional[str]:
        """Select the string for count from group.

        Tries the exact category, then "other", then the first stored form,
        and finally returns "" for an empty group. Empty strings are skipped
        at every step. Reaching a form configured with a non-string value
        ends the search.

        Args:
            count: The number being pluralized.
            locale: Locale whose plural rules apply.
            group: Plural forms to choose from.

        Returns:
            The selected string, or None if the selected form is not a string.
        """
        form = self.category(count, locale)
        for name in (form, PluralForm.OTHER.value, group.first_form()):
            if group.is_invalid(name):
                logger.debug("plural_form_not_string", form=name, count=str(count))
                return None
            value = group.get(name)
            if value:
                return value
        return ""
