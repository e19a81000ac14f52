"""Tests for failure reporters."""

import re
import unittest

import pytest

from xml_inspector.assertions.reporter import (
    AssertionReporter,
    FailureReporter,
    TestCaseReporter,
)
from xml_inspector.errors import (
    ElementMismatchError,
    TextPatternMismatchError,
    XMLMatchFailure,
)


class TestAssertionReporter:
    """Test the default AssertionError based reporter."""

    def test_is_a_failure_reporter(self) -> None:
        """Test the default reporter implements the interface."""
        reporter = AssertionReporter()

        assert isinstance(reporter, FailureReporter)
        assert reporter.failure_exception is AssertionError

    def test_fail_raises_requested_type_with_context(self) -> None:
        """Test fail() raises the given error kind carrying its context."""
        reporter = AssertionReporter()

        with pytest.raises(ElementMismatchError, match="boom") as info:
            reporter.fail("boom", ElementMismatchError, element_name="a", path="/r/a")

        assert info.value.element_name == "a"
        assert info.value.path == "/r/a"
        assert isinstance(info.value, AssertionError)

    def test_assert_equal(self) -> None:
        """Test assert_equal passes on equality and reports both values otherwise."""
        reporter = AssertionReporter()
        reporter.assert_equal("a", "a", "same")

        with pytest.raises(XMLMatchFailure, match="element mismatch: expected 'a' but was 'b'") as info:
            reporter.assert_equal("a", "b", "element mismatch")

        assert info.value.context["expected"] == "a"
        assert info.value.context["actual"] == "b"

    def test_assert_match_uses_search(self) -> None:
        """Test assert_match finds the pattern anywhere in the text."""
        reporter = AssertionReporter()
        reporter.assert_match(re.compile("oo"), "foo")

        with pytest.raises(TextPatternMismatchError, match=r"expected text matching /\^x/"):
            reporter.assert_match(re.compile("^x"), "foo")

    def test_assert_match_with_no_text(self) -> None:
        """Test assert_match fails when there is no text at all."""
        with pytest.raises(TextPatternMismatchError, match="but was None"):
            AssertionReporter().assert_match(re.compile(".*"), None)

    def test_assert_true(self) -> None:
        """Test assert_true only fails on falsy conditions."""
        reporter = AssertionReporter()
        reporter.assert_true([1], "non-empty")

        with pytest.raises(XMLMatchFailure, match="empty"):
            reporter.assert_true([], "empty")


class TestTestCaseReporter(unittest.TestCase):
    """Test routing failures through a unittest.TestCase."""

    def test_failure_exception_follows_testcase(self) -> None:
        reporter = TestCaseReporter(self)

        self.assertIn(self.failureException, reporter.failure_exception)

    def test_fail_uses_testcase_fail(self) -> None:
        reporter = TestCaseReporter(self)

        with self.assertRaises(self.failureException) as ctx:
            reporter.fail("no children left", ElementMismatchError)

        self.assertEqual(str(ctx.exception), "no children left")

    def test_assert_equal_uses_testcase_assert_equal(self) -> None:
        reporter = TestCaseReporter(self)
        reporter.assert_equal("a", "a", "same")

        with self.assertRaises(self.failureException) as ctx:
            reporter.assert_equal("a", "b", "element mismatch")

        self.assertIn("element mismatch", str(ctx.exception))
        self.assertIn("'a' != 'b'", str(ctx.exception))

    def test_assert_match_reports_through_testcase(self) -> None:
        reporter = TestCaseReporter(self)

        with self.assertRaises(self.failureException):
            reporter.assert_match(re.compile("^x"), "foo")
