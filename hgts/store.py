"""Resource store: the locale -> translation tree mapping."""

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from hgts.logging import get_logger
from hgts.models import SubTree, build_tree

logger = get_logger(__name__)


class ResourceStore:
    """Immutable mapping of locale code to translation tree.

    A store is never modified after construction; reconfiguring a translator
    builds a new one and swaps it in.

    Attributes:
        trees: Locale code -> SubTree, in the order the locales were given.
    """

    def __init__(self, trees: Optional[Mapping[str, SubTree]] = None):
        self._trees = MappingProxyType(dict(trees or {}))

    @classmethod
    def from_resources(cls, resources: Optional[Mapping[str, Any]]) -> "ResourceStore":
        """Build a store from raw resources.

        Args:
            resources: Locale code -> nested mapping of translations, e.g.
                ``{"en": {"greeting": "Hello"}, "es": {"greeting": "Hola"}}``.

        Returns:
            ResourceStore with every tree classified into tagged nodes.
        """
        trees = {}
        for locale, tree in (resources or {}).items():
            if isinstance(tree, (Mapping, SubTree)):
                trees[locale] = build_tree(tree, path=locale)
            else:
                # The locale stays selectable but every lookup in it misses
                logger.warning(
                    "invalid_locale_tree",
                    locale=locale,
                    expected="mapping",
                    value_type=type(tree).__name__,
                )
                trees[locale] = SubTree()
        return cls(trees)

    @property
    def trees(self) -> Mapping[str, SubTree]:
        return self._trees

    @property
    def locales(self) -> tuple:
        return tuple(self._trees.keys())

    def get(self, locale: str) -> Optional[SubTree]:
        return self._trees.get(locale)

    def __contains__(self, locale: object) -> bool:
        return locale in self._trees

    def __iter__(self) -> Iterator[str]:
        return iter(self._trees)

    def __len__(self) -> int:
        return len(self._trees)

    def __repr__(self) -> str:
        return f"ResourceStore(locales={list(self._trees)!r})"
