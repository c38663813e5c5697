"""Key path resolution through translation trees."""

from hgts.models import MISSING, Found, Leaf, LookupResult, PluralGroup, SubTree
from hgts.store import ResourceStore


class KeyResolver:
    """Resolves dotted keys against the trees of a resource store.

    Keys are split on "." and walked segment by segment; there are no
    partial matches. A plural group is only returned to callers that ask
    for one, so plain lookups never mistake it for a string.

    Attributes:
        store: ResourceStore the resolver reads from.
    """

    def __init__(self, store: ResourceStore):
        self.store = store

    def resolve(
        self,
        key: str,
        locale: str,
        allow_plural_group: bool = False,
    ) -> LookupResult:
        """Resolve a dotted key in one locale.

        Args:
            key: Dotted key path (e.g. "nested.deep.value").
            locale: Locale whose tree is searched.
            allow_plural_group: Whether a plural group is an acceptable result.

        Returns:
            Found with the Leaf or PluralGroup, or MISSING.
        """
        node = self.store.get(locale)
        if node is None:
            return MISSING

        for segment in key.split("."):
            if isinstance(node, (SubTree, PluralGroup)):
                node = node.child(segment)
            else:
                node = None
            if node is None:
                return MISSING

        if isinstance(node, Leaf):
            return Found(node)
        if isinstance(node, PluralGroup) and allow_plural_group:
            return Found(node)
        return MISSING
