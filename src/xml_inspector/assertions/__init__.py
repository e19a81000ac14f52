"""Structural assertions over XML documents.

Key Components:
    XMLMatchAssertion: Fluent matcher driving ordered and unordered traversal
    assert_xml_match: One-call entry point running an expectation block
    MatchScope: Matching state for one element's children
    NamespaceContext: Prefix to namespace URI bindings for a scope
    FailureReporter: Interface to the test framework's failure primitives
"""

from .engine import XMLMatchAssertion, assert_xml_match
from .namespaces import NamespaceContext
from .reporter import AssertionReporter, FailureReporter, TestCaseReporter
from .scope import MatchScope

__all__ = [
    "AssertionReporter",
    "FailureReporter",
    "MatchScope",
    "NamespaceContext",
    "TestCaseReporter",
    "XMLMatchAssertion",
    "assert_xml_match",
]
