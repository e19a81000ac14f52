"""XML Inspector.

Fluent structural assertions for XML documents in tests: declare the elements,
namespaces, text and children a document must have, and get a single readable
failure when it does not.

Progressive API Disclosure:
- Level 1: assert_xml_match() with an expectation block
- Level 2: XMLMatchAssertion with ordered/unordered/subset modes and namespaces
- Level 3: Custom FailureReporter and MatchConfig defaults
"""

__version__ = "0.1.0"
__author__ = "XML Inspector Team"

from .assertions import (
    AssertionReporter,
    FailureReporter,
    MatchScope,
    NamespaceContext,
    TestCaseReporter,
    XMLMatchAssertion,
    assert_xml_match,
)
from .document import XMLNode, load_document
from .errors import (
    DocumentLoadError,
    ElementMismatchError,
    InvalidNamespaceArgumentError,
    NoCandidateMatchedError,
    NoChildrenLeftError,
    TextMismatchError,
    TextPatternMismatchError,
    UndeclaredPrefixError,
    UnmatchedChildrenError,
    XMLInspectorError,
    XMLMatchFailure,
)
from .shared.config import DocumentConfig, MatchConfig

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: one-call entry point
    "assert_xml_match",

    # Level 2: fluent matcher and its state
    "XMLMatchAssertion",
    "MatchScope",
    "NamespaceContext",

    # Level 3: reporters and configuration
    "FailureReporter",
    "AssertionReporter",
    "TestCaseReporter",
    "MatchConfig",
    "DocumentConfig",

    # Documents
    "XMLNode",
    "load_document",

    # Errors
    "XMLInspectorError",
    "DocumentLoadError",
    "UndeclaredPrefixError",
    "InvalidNamespaceArgumentError",
    "XMLMatchFailure",
    "NoChildrenLeftError",
    "ElementMismatchError",
    "TextMismatchError",
    "TextPatternMismatchError",
    "UnmatchedChildrenError",
    "NoCandidateMatchedError",
]
