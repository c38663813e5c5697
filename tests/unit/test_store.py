"""Tests for hgts.store module."""

import pytest

from hgts.models import Leaf, SubTree
from hgts.store import ResourceStore


@pytest.mark.unit
class TestResourceStore:
    """Tests for ResourceStore."""

    def test_from_resources_builds_trees(self, sample_resources):
        """from_resources() builds one tree per locale."""
        store = ResourceStore.from_resources(sample_resources)
        assert store.locales == ("en", "es", "fr")
        assert isinstance(store.get("en"), SubTree)
        assert store.get("en").child("greeting") == Leaf("Hello, World!")

    def test_empty_store(self):
        """An empty store has no locales."""
        store = ResourceStore.from_resources(None)
        assert len(store) == 0
        assert store.locales == ()
        assert store.get("en") is None

    def test_contains_and_iter(self, sample_resources):
        """Membership and iteration follow locale codes."""
        store = ResourceStore.from_resources(sample_resources)
        assert "es" in store
        assert "de" not in store
        assert list(store) == ["en", "es", "fr"]

    def test_trees_are_read_only(self, sample_resources):
        """The locale mapping cannot be modified."""
        store = ResourceStore.from_resources(sample_resources)
        with pytest.raises(TypeError):
            store.trees["de"] = SubTree()

    def test_source_mapping_changes_do_not_leak(self):
        """Mutating the raw resources afterwards does not change the store."""
        resources = {"en": {"greeting": "Hello"}}
        store = ResourceStore.from_resources(resources)
        resources["en"]["greeting"] = "Changed"
        resources["de"] = {}
        assert store.get("en").child("greeting") == Leaf("Hello")
        assert "de" not in store

    def test_non_mapping_tree_kept_empty(self):
        """A locale whose tree is not a mapping is selectable but empty."""
        store = ResourceStore.from_resources({"en": "not a tree"})
        assert "en" in store
        assert len(store.get("en")) == 0

    def test_repr_lists_locales(self):
        """repr() shows the configured locales."""
        store = ResourceStore.from_resources({"en": {}, "es": {}})
        assert repr(store) == "ResourceStore(locales=['en', 'es'])"
