"""Translation models for hgts.

A translation tree is built once, when resources are configured, out of
three node kinds:

- ``Leaf``: a translated string.
- ``PluralGroup``: plural form name -> string.
- ``SubTree``: segment -> child node.

Raw nested dictionaries are classified by ``build_tree``; callers that want
to rule out ambiguity can pass ``PluralGroup``/``SubTree`` instances
directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from hgts.logging import get_logger

logger = get_logger(__name__)


class PluralForm(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PLURAL_FORMS = frozenset(form.value for form in PluralForm)


@dataclass(frozen=True)
class Leaf:
    """A translated string."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PluralGroup:
    """Strings keyed by plural form name.

    Insertion order is kept; ``first_form()`` relies on it. Form entries whose
    value is not a string are kept as names in ``invalid_forms`` so that
    selecting one is reported as a shape mismatch instead of being skipped.

    Attributes:
        forms: Plural form name (e.g. "one", "other") -> translated string.
        invalid_forms: Form names configured with a non-string value.
    """

    forms: Mapping[str, str] = field(default_factory=dict)
    invalid_forms: frozenset = field(init=False, default=frozenset())
    order: tuple = field(init=False, default=())

    def __post_init__(self):
        forms = {}
        invalid = set()
        order = []
        for name, value in self.forms.items():
            name = _form_name(name)
            if name not in PLURAL_FORMS or name in order:
                continue
            order.append(name)
            if isinstance(value, str):
                forms[name] = value
            else:
                invalid.add(name)
        object.__setattr__(self, "forms", MappingProxyType(forms))
        object.__setattr__(self, "invalid_forms", frozenset(invalid))
        object.__setattr__(self, "order", tuple(order))

    def get(self, form: Union[PluralForm, str, None]) -> Optional[str]:
        """Get the string for a plural form, or None if it is not a string."""
        if form is None:
            return None
        return self.forms.get(_form_name(form))

    def is_invalid(self, form: Union[PluralForm, str, None]) -> bool:
        """Check whether a form was configured with a non-string value."""
        return form is not None and _form_name(form) in self.invalid_forms

    def first_form(self) -> Optional[str]:
        """Get the name of the first form in stored order."""
        return self.order[0] if self.order else None

    def first(self) -> Optional[str]:
        """Get the first form's string, or None if it is not a string."""
        return self.get(self.first_form())

    def child(self, segment: str) -> Optional["Leaf"]:
        """Address a single form as a key path segment (e.g. "items.one")."""
        value = self.forms.get(segment)
        return Leaf(value) if value is not None else None

    def __len__(self) -> int:
        return len(self.order)


@dataclass(frozen=True)
class SubTree:
    """A nested level of a translation tree.

    Attributes:
        children: Key segment -> child node.
    """

    children: Mapping[str, "TranslationNode"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def child(self, segment: str) -> Optional["TranslationNode"]:
        return self.children.get(segment)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children

    def __len__(self) -> int:
        return len(self.children)


TranslationNode = Union[Leaf, PluralGroup, SubTree]


class Missing:
    """Lookup result for a key that resolved to nothing usable."""

    _instance: Optional["Missing"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()


@dataclass(frozen=True)
class Found:
    """Lookup result carrying the resolved string or plural group."""

    node: Union[Leaf, PluralGroup]


LookupResult = Union[Found, Missing]


def _form_name(name: Any) -> Any:
    return name.value if isinstance(name, PluralForm) else name


def is_plural_mapping(value: Mapping) -> bool:
    """Check whether a raw mapping looks like a plural group.

    Any overlap between the mapping's keys and the plural form names counts,
    so a nested level that happens to have an "other" key is read as a
    plural group.
    """
    return any(_form_name(key) in PLURAL_FORMS for key in value.keys())


def build_node(value: Any, path: str = "") -> Optional[TranslationNode]:
    """Convert a raw translation value into a tagged node.

    Args:
        value: A string, a nested mapping, or an already-built node.
        path: Dotted path of the value, used in log events.

    Returns:
        The node, or None if the value cannot be translated.
    """
    if isinstance(value, (Leaf, PluralGroup, SubTree)):
        return value
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, Mapping):
        if is_plural_mapping(value):
            group = PluralGroup(value)
            ignored = [
                str(key) for key in value.keys() if _form_name(key) not in PLURAL_FORMS
            ]
            if ignored:
                logger.warning("plural_group_keys_ignored", path=path, ignored=ignored)
            if group.invalid_forms:
                logger.warning(
                    "plural_forms_not_strings",
                    path=path,
                    forms=sorted(group.invalid_forms),
                )
            return group
        return build_tree(value, path)

    logger.warning(
        "unsupported_translation_value",
        path=path,
        value_type=type(value).__name__,
    )
    return None


def build_tree(mapping: Mapping[str, Any], path: str = "") -> SubTree:
    """Build a SubTree from a nested mapping of translations.

    Example:
        tree = build_tree({"greeting": "Hello", "items": {"one": "1 item"}})
        # SubTree(children={"greeting": Leaf(...), "items": PluralGroup(...)})
    """
    if isinstance(mapping, SubTree):
        return mapping

    children = {}
    for key, value in mapping.items():
        child_path = f"{path}.{key}" if path else str(key)
        node = build_node(value, child_path)
        if node is not None:
            children[key] = node
    return SubTree(children)
