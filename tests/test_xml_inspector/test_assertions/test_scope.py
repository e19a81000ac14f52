"""Tests for match scope bookkeeping."""

import pytest

from xml_inspector.assertions.namespaces import NamespaceContext
from xml_inspector.assertions.scope import MatchScope
from xml_inspector.document import load_document


@pytest.fixture
def root():
    return load_document("<root><a/><b/><c/></root>")


class TestMatchScope:
    """Test MatchScope pool and consumption tracking."""

    def test_for_element_defaults(self, root) -> None:
        """Test a scope over an element starts empty and ordered."""
        scope = MatchScope.for_element(root, NamespaceContext())

        assert scope.pool == root.children
        assert scope.element_name == "root"
        assert scope.path == "/root"
        assert scope.ordered is True
        assert scope.subset_allowed is False
        assert scope.matched_count == 0
        assert scope.consumed == set()
        assert scope.pending_errors == []

    def test_consume_updates_count_and_remaining(self, root) -> None:
        """Test consuming a child removes it from the remaining children."""
        scope = MatchScope.for_element(root, NamespaceContext())
        a, b, c = root.children

        scope.consume(b)

        assert scope.remaining() == [a, c]
        assert scope.matched_count == 1
        assert not scope.is_complete

        scope.consume(a)
        scope.consume(c)

        assert scope.remaining() == []
        assert scope.matched_count == len(scope.consumed) == 3
        assert scope.is_complete

    def test_consume_rejects_foreign_child(self, root) -> None:
        """Test a node outside the pool cannot be consumed."""
        scope = MatchScope.for_element(root, NamespaceContext())

        with pytest.raises(ValueError, match="is not a child of /root"):
            scope.consume(root)

    def test_consume_rejects_double_match(self, root) -> None:
        """Test a child can only be consumed once."""
        scope = MatchScope.for_element(root, NamespaceContext())
        scope.consume(root.children[0])

        with pytest.raises(ValueError, match="already matched"):
            scope.consume(root.children[0])

        assert scope.matched_count == 1

    def test_empty_pool_is_complete(self) -> None:
        """Test an element without children is trivially complete."""
        scope = MatchScope.for_element(load_document("<leaf/>"), NamespaceContext())

        assert scope.is_complete
        assert scope.remaining() == []
