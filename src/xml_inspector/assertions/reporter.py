"""Failure reporters for XML structure assertions.

The matching engine never raises mismatch errors itself; every failure goes
through a reporter so it surfaces the way the surrounding test framework
expects. ``AssertionReporter`` raises typed ``AssertionError`` subclasses and
suits pytest; ``TestCaseReporter`` routes failures through a
``unittest.TestCase``.
"""

import re
import unittest
from abc import ABC, abstractmethod
from typing import Any, Optional, Pattern, Tuple, Type

from xml_inspector.errors import (
    TextPatternMismatchError,
    XMLMatchFailure,
)


class FailureReporter(ABC):
    """Interface between the matching engine and a test framework.

    ``failure_exception`` is the exception type (or tuple of types) that
    signals an assertion failure; the unordered search catches exactly these
    to reject a candidate and move on to the next one.
    """

    failure_exception: Any = AssertionError

    @abstractmethod
    def fail(
        self,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        """Report an unconditional failure. Must raise."""

    def assert_equal(
        self,
        expected: Any,
        actual: Any,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        if expected != actual:
            self.fail(
                f"{message}: expected {expected!r} but was {actual!r}",
                error_type,
                expected=expected,
                actual=actual,
                **context,
            )

    def assert_match(
        self,
        pattern: Pattern[str],
        text: Optional[str],
        message: Optional[str] = None,
        error_type: Type[XMLMatchFailure] = TextPatternMismatchError,
        **context: Any,
    ) -> None:
        if text is not None and re.search(pattern, text):
            return
        prefix = f"{message}: " if message else ""
        self.fail(
            f"{prefix}expected text matching /{pattern.pattern}/ but was {text!r}",
            error_type,
            expected=pattern,
            actual=text,
            **context,
        )

    def assert_true(
        self,
        condition: Any,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        if not condition:
            self.fail(message, error_type, **context)


class AssertionReporter(FailureReporter):
    """Raise typed ``XMLMatchFailure`` errors.

    ``failure_exception`` is plain ``AssertionError`` so that ``assert``
    statements inside text callbacks reject a candidate in unordered mode the
    same way a built-in mismatch does.
    """

    failure_exception = AssertionError

    def fail(
        self,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        raise error_type(message, **context)


class TestCaseReporter(FailureReporter):
    """Route failures through a ``unittest.TestCase``.

    Failures raise the test case's ``failureException``; the specific error
    kind is only visible in the message.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, testcase: unittest.TestCase) -> None:
        self.testcase = testcase

    @property
    def failure_exception(self) -> Tuple[Type[BaseException], ...]:  # type: ignore[override]
        return (self.testcase.failureException, AssertionError)

    def fail(
        self,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        self.testcase.fail(message)

    def assert_equal(
        self,
        expected: Any,
        actual: Any,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        self.testcase.assertEqual(expected, actual, message)

    def assert_true(
        self,
        condition: Any,
        message: str,
        error_type: Type[XMLMatchFailure] = XMLMatchFailure,
        **context: Any,
    ) -> None:
        self.testcase.assertTrue(condition, message)
