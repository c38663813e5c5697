"""hgts - runtime translations with fallback, pluralization and interpolation.

Main components:
- models: PluralForm, Leaf, PluralGroup, SubTree
- store: ResourceStore
- resolvers: KeyResolver for dotted key paths
- plural: PluralSelector and plural categorizers
- interpolation: {{name}} placeholder substitution
- translator: Translator service
- binding: TranslationBinding for UI layers
"""

from hgts.binding import TranslationBinding
from hgts.exceptions import LocaleNotFoundError, TranslationError
from hgts.factory import create_translator
from hgts.interpolation import interpolate
from hgts.models import Leaf, PluralForm, PluralGroup, SubTree
from hgts.plural import (
    BabelPluralCategorizer,
    DefaultPluralCategorizer,
    PluralCategorizer,
    PluralSelector,
)
from hgts.providers import get_settings, get_translator
from hgts.resolvers import KeyResolver
from hgts.store import ResourceStore
from hgts.translator import Translator

__all__ = [
    "Translator",
    "TranslationBinding",
    "TranslationError",
    "LocaleNotFoundError",
    "PluralForm",
    "Leaf",
    "PluralGroup",
    "SubTree",
    "ResourceStore",
    "KeyResolver",
    "PluralSelector",
    "PluralCategorizer",
    "BabelPluralCategorizer",
    "DefaultPluralCategorizer",
    "interpolate",
    "create_translator",
    "get_settings",
    "get_translator",
]
