"""Exception hierarchy for XML structure assertions.

Two families are kept apart:

- ``XMLInspectorError`` subclasses signal misuse of the library (a malformed
  document, an undeclared namespace prefix, a bad ``xmlns`` argument). They
  are never caught by the unordered search.
- ``XMLMatchFailure`` subclasses are assertion failures: the document does
  not have the expected shape. They derive from ``AssertionError`` so any
  test runner reports them as failures rather than errors.
"""

from typing import Any, List, Optional

from xml_inspector.shared.result import CandidateFailure


class XMLInspectorError(Exception):
    """Base exception for library usage errors."""


class DocumentLoadError(XMLInspectorError):
    """Raised when a document cannot be parsed or converted."""


class UndeclaredPrefixError(XMLInspectorError, LookupError):
    """Raised when an expectation uses a namespace prefix that was never declared."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"namespace prefix '{prefix}' not defined")
        self.prefix = prefix


class InvalidNamespaceArgumentError(XMLInspectorError, TypeError):
    """Raised when ``xmlns`` receives something other than a URI or a mapping."""

    def __init__(self, argument: Any) -> None:
        super().__init__(
            "namespace declaration must be a URI string or a mapping of "
            f"prefix to URI, got {type(argument).__name__}"
        )
        self.argument = argument


class XMLMatchFailure(AssertionError):
    """Base class for every expected-versus-actual mismatch."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    @property
    def element_name(self) -> Optional[str]:
        return self.context.get("element_name")

    @property
    def path(self) -> Optional[str]:
        return self.context.get("path")


class NoChildrenLeftError(XMLMatchFailure):
    """An expectation was issued but every child is already matched."""


class ElementMismatchError(XMLMatchFailure):
    """The child's namespace or local name differs from the expectation."""


class TextMismatchError(XMLMatchFailure):
    """The child's text differs from the expected literal."""


class TextPatternMismatchError(XMLMatchFailure):
    """The child's text does not match the expected pattern."""


class UnmatchedChildrenError(XMLMatchFailure):
    """Children remain unmatched when a block ends and subset matching is off."""


class NoCandidateMatchedError(XMLMatchFailure):
    """No remaining child satisfied an expectation in unordered mode."""

    @property
    def candidate_failures(self) -> List[CandidateFailure]:
        return list(self.context.get("candidate_failures", []))
