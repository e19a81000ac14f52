"""Structural matching engine for XML documents.

``XMLMatchAssertion`` walks a document against expectation statements issued
through ``expect``. Each statement names an element and optionally its text
and a block of expectations for its children::

    def entry(m):
        m.expect("title", "Hello")
        m.expect("updated", re.compile(r"^\\d{4}-"))

    def feed(m):
        m.subset_match()
        m.expect("entry", block=entry)

    atom = "http://www.w3.org/2005/Atom"
    XMLMatchAssertion(xml).xmlns(atom).expect("feed", block=feed)

Children are matched in document order by default. ``unordered()`` switches
the current block to a backtracking search over all remaining children, and
``subset_match()`` lets a block leave children unmentioned.
"""

import re
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Pattern, Tuple, Union

from xml_inspector.assertions.namespaces import NamespaceContext
from xml_inspector.assertions.reporter import AssertionReporter, FailureReporter
from xml_inspector.assertions.scope import MatchScope
from xml_inspector.document import XMLNode, load_document, split_clark_name
from xml_inspector.errors import (
    ElementMismatchError,
    NoCandidateMatchedError,
    NoChildrenLeftError,
    TextMismatchError,
    TextPatternMismatchError,
    UnmatchedChildrenError,
)
from xml_inspector.shared import CandidateFailure, MatchConfig, get_logger

TextExpectation = Union[None, str, Pattern[str], Callable[[XMLNode], Any]]
Block = Callable[["XMLMatchAssertion"], Any]


class XMLMatchAssertion:
    """Fluent assertion that a document has an expected element structure.

    The first ``expect`` call matches the document root; nested blocks
    describe the children of the element they are attached to. Mismatches are
    reported through ``reporter`` (an ``AssertionReporter`` by default).
    """

    def __init__(
        self,
        document: Any,
        reporter: Optional[FailureReporter] = None,
        config: Optional[MatchConfig] = None,
    ) -> None:
        """Initialize the assertion over a document.

        Args:
            document: XML text or bytes, an lxml/ElementTree element or tree,
                or an ``XMLNode``
            reporter: Failure reporter; defaults to ``AssertionReporter``
            config: Matching defaults and parser settings

        Raises:
            DocumentLoadError: If the document cannot be loaded
        """
        self.config = config or MatchConfig()
        self.reporter = reporter or AssertionReporter()
        self._logger = get_logger(__name__, self.config.correlation_id, "XMLMatchAssertion")
        self.root = load_document(document, self.config.document, self.config.correlation_id)
        self._scope = MatchScope(
            pool=(self.root,),
            namespaces=NamespaceContext(),
            ordered=self.config.ordered,
            subset_allowed=self.config.subset_match,
        )

    @property
    def scope(self) -> MatchScope:
        """The scope that statements issued right now are matched in."""
        return self._scope

    # Expectation statements

    def expect(
        self,
        name: str,
        text: TextExpectation = None,
        block: Optional[Block] = None,
        *,
        prefix: Optional[str] = None,
    ) -> "XMLMatchAssertion":
        """Expect the next child (or any remaining child, when unordered).

        Args:
            name: Local name, ``prefix:local`` or ``{uri}local``
            text: Expected text: a literal string, a compiled pattern searched
                in the text, or a callable invoked with the ``XMLNode``
            block: Callable receiving this assertion, describing the
                element's children
            prefix: Namespace prefix, as an alternative to ``prefix:local``

        Raises:
            UndeclaredPrefixError: If the prefix is not declared in this scope
        """
        namespace, local_name = self._resolve_name(name, prefix)

        if self._scope.ordered:
            self._assert_current_element(namespace, local_name, text, block)
        else:
            self._assert_any_element(namespace, local_name, text, block)

        return self

    tag = expect

    def ordered(self) -> "XMLMatchAssertion":
        """Match the rest of this block's statements in document order."""
        self._scope.ordered = True
        return self

    def unordered(self) -> "XMLMatchAssertion":
        """Match the rest of this block's statements against any remaining child."""
        self._scope.ordered = False
        return self

    def subset_match(self) -> "XMLMatchAssertion":
        """Allow this block to leave children unmatched."""
        self._scope.subset_allowed = True
        return self

    def xmlns(self, namespaces: Union[str, dict]) -> "XMLMatchAssertion":
        """Declare the default namespace (string) or prefixes (mapping) for this block."""
        self._scope.namespaces.declare(namespaces)
        return self

    # Traversal

    def _resolve_name(self, name: str, prefix: Optional[str]) -> Tuple[str, str]:
        if prefix is not None:
            return self._scope.namespaces.resolve(prefix), name
        if name.startswith("{"):
            return split_clark_name(name)
        if ":" in name:
            declared_prefix, local_name = name.split(":", 1)
            return self._scope.namespaces.resolve(declared_prefix), local_name
        return self._scope.namespaces.resolve(), name

    def _assert_current_element(
        self,
        namespace: str,
        name: str,
        text: TextExpectation,
        block: Optional[Block],
    ) -> None:
        scope = self._scope
        left = scope.remaining()
        self.reporter.assert_true(
            left,
            f"expected more children, but no children left in {scope.path} "
            f"(looking for element {name})",
            NoChildrenLeftError,
            element_name=name,
            path=scope.path,
        )
        self._assert_element(left[0], namespace, name, text, block)
        scope.consume(left[0])

    def _assert_any_element(
        self,
        namespace: str,
        name: str,
        text: TextExpectation,
        block: Optional[Block],
    ) -> None:
        scope = self._scope
        for candidate in scope.remaining():
            try:
                self._assert_element(candidate, namespace, name, text, block)
            except self.reporter.failure_exception as e:
                failure = CandidateFailure(
                    element_name=name,
                    candidate_path=candidate.path,
                    message=str(e) or type(e).__name__,
                )
                scope.pending_errors.append(failure)
                self._logger.debug(
                    "Rejected candidate",
                    extra={"element_name": name, "candidate": candidate.path,
                           "reason": failure.message},
                )
                continue

            scope.pending_errors.clear()
            scope.consume(candidate)
            return

        failures = list(scope.pending_errors)
        scope.pending_errors.clear()

        lines = [failure.message for failure in failures]
        if not failures:
            lines.append(f"expected more children, but no children left in {scope.path}")
        lines.append(f"failed to match tree starting at element {name}")

        self._logger.debug(
            "No candidate matched",
            extra={"element_name": name, "path": scope.path,
                   "candidates": len(failures)},
        )
        self.reporter.fail(
            "\n".join(lines),
            NoCandidateMatchedError,
            element_name=name,
            path=scope.path,
            candidate_failures=failures,
        )

    def _assert_element(
        self,
        element: XMLNode,
        namespace: str,
        name: str,
        text: TextExpectation,
        block: Optional[Block],
    ) -> None:
        context = {"element_name": name, "path": element.path}
        self.reporter.assert_equal(
            namespace, element.namespace,
            f"namespace mismatch at {element.path}",
            ElementMismatchError, **context,
        )
        self.reporter.assert_equal(
            name, element.name,
            f"element mismatch at {element.path}",
            ElementMismatchError, **context,
        )
        self._assert_text(element, text, context)

        if block is None:
            return

        with self._nested_scope(element) as scope:
            block(self)
            if not scope.subset_allowed:
                unmatched = ", ".join(child.path for child in scope.remaining())
                self.reporter.assert_true(
                    scope.is_complete,
                    f"children mismatch for element {name}: matched "
                    f"{len(scope.consumed)} of {len(scope.pool)} children, "
                    f"unmatched: {unmatched}",
                    UnmatchedChildrenError,
                    **context,
                )

    def _assert_text(self, element: XMLNode, text: TextExpectation, context: dict) -> None:
        if text is None:
            return
        if isinstance(text, str):
            self.reporter.assert_equal(
                text, element.text,
                f"text node mismatch at {element.path}",
                TextMismatchError, **context,
            )
        elif isinstance(text, re.Pattern):
            self.reporter.assert_match(
                text, element.text,
                f"text node mismatch at {element.path}",
                TextPatternMismatchError, **context,
            )
        elif callable(text):
            text(element)
        else:
            raise TypeError(
                "text expectation must be a string, a compiled pattern or a "
                f"callable, got {type(text).__name__}"
            )

    @contextmanager
    def _nested_scope(self, element: XMLNode) -> Iterator[MatchScope]:
        parent = self._scope
        scope = MatchScope.for_element(
            element,
            parent.namespaces.copy(),
            ordered=self.config.ordered,
            subset_allowed=self.config.subset_match,
        )
        self._scope = scope
        self._logger.debug(
            "Entered scope",
            extra={"path": element.path, "children": len(scope.pool)},
        )
        try:
            yield scope
        finally:
            self._scope = parent
            self._logger.debug(
                "Left scope",
                extra={"path": element.path, "matched": scope.matched_count},
            )


def assert_xml_match(
    document: Any,
    block: Block,
    reporter: Optional[FailureReporter] = None,
    config: Optional[MatchConfig] = None,
) -> XMLMatchAssertion:
    """Run ``block`` against a new assertion over ``document``.

    The block issues expectations for the document root, typically a single
    ``m.expect("root", block=...)``.

    Returns:
        The assertion, for inspecting the root scope afterwards
    """
    assertion = XMLMatchAssertion(document, reporter=reporter, config=config)
    block(assertion)
    return assertion
