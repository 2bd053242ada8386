"""Unit tests for the document registry."""

from text_boolean_search.registry import DocumentRegistry


class TestDocumentRegistry:
    """Ids are allocated lazily and stay stable."""

    def test_identify_is_idempotent(self):
        registry = DocumentRegistry()

        first = registry.identify("doc1.txt")
        second = registry.identify("doc1.txt")

        assert first == second == 1
        assert len(registry) == 1

    def test_new_names_get_fresh_increasing_ids(self):
        registry = DocumentRegistry()

        ids = [registry.identify(name) for name in ("a.txt", "b.txt", "c.txt")]

        assert ids == [1, 2, 3]
        assert registry.identify("b.txt") == 2
        assert registry.identify("d.txt") == 4

    def test_resolve_returns_name_or_none(self):
        registry = DocumentRegistry()
        doc_id = registry.identify("notes/today.txt")

        assert registry.resolve(doc_id) == "notes/today.txt"
        assert registry.resolve(doc_id + 1) is None
        assert registry.resolve(0) is None

    def test_names_iterate_in_id_order(self):
        registry = DocumentRegistry()
        for name in ("zeta.txt", "alpha.txt", "mid.txt"):
            registry.identify(name)

        assert list(registry.names()) == ["zeta.txt", "alpha.txt", "mid.txt"]
        assert "alpha.txt" in registry
        assert "missing.txt" not in registry

    def test_registries_are_independent(self):
        left = DocumentRegistry()
        right = DocumentRegistry()

        left.identify("one.txt")
        left.identify("two.txt")

        assert right.identify("two.txt") == 1
