"""Tests for using the matcher from unittest test cases."""

import unittest

from xml_inspector import TestCaseReporter, XMLMatchAssertion

FEED = """
<feed xmlns="urn:atom">
  <entry><title>first</title></entry>
  <entry><title>second</title></entry>
</feed>
"""


class TestMatcherInsideTestCase(unittest.TestCase):
    """Test XMLMatchAssertion reporting through a TestCase."""

    def matcher(self) -> XMLMatchAssertion:
        return XMLMatchAssertion(FEED, reporter=TestCaseReporter(self)).xmlns("urn:atom")

    def test_passing_match(self) -> None:
        def entry(title):
            return lambda m: m.expect("title", title)

        def feed(m):
            m.unordered()
            m.expect("entry", block=entry("second"))
            m.expect("entry", block=entry("first"))

        self.matcher().expect("feed", block=feed)

    def test_mismatch_is_a_test_failure(self) -> None:
        with self.assertRaises(self.failureException) as ctx:
            self.matcher().expect("rss")

        self.assertIn("element mismatch at /feed", str(ctx.exception))

    def test_unordered_failure_lists_candidates(self) -> None:
        def feed(m):
            m.unordered()
            m.expect("entry", block=lambda m: m.expect("title", "third"))

        with self.assertRaises(self.failureException) as ctx:
            self.matcher().expect("feed", block=feed)

        message = str(ctx.exception)
        self.assertIn("/feed/entry[1]/title", message)
        self.assertIn("/feed/entry[2]/title", message)
        self.assertTrue(message.endswith("failed to match tree starting at element entry"))

    def test_unmatched_children_is_a_test_failure(self) -> None:
        with self.assertRaises(self.failureException) as ctx:
            self.matcher().expect("feed", block=lambda m: m.expect("entry"))

        self.assertIn("children mismatch for element feed", str(ctx.exception))
