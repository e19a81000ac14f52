#!/usr/bin/env python3
"""
Quick Start Guide for XML Inspector structural assertions.

This example walks through ordered, unordered and subset matching, namespace
declarations and what a failure message looks like.
"""

import re
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_inspector import (
    NoCandidateMatchedError,
    XMLMatchAssertion,
    assert_xml_match,
)

FEED = """
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:media="http://search.yahoo.com/mrss/">
  <title>Example Feed</title>
  <entry>
    <title>Second post</title>
    <updated>2024-05-02T10:00:00Z</updated>
    <media:thumbnail/>
  </entry>
  <entry>
    <title>First post</title>
    <updated>2024-05-01T09:30:00Z</updated>
  </entry>
</feed>
"""


def ordered_example():
    """Match a document child by child, in order."""
    print("\n📄 Step 1: Ordered matching")
    print("-" * 30)

    def entry(m):
        m.subset_match()
        m.expect("title")
        m.expect("updated", re.compile(r"^\d{4}-\d{2}-\d{2}T"))

    def feed(m):
        m.expect("title", "Example Feed")
        m.expect("entry", block=entry)
        m.expect("entry", block=entry)

    m = XMLMatchAssertion(FEED).xmlns("http://www.w3.org/2005/Atom")
    m.expect("feed", block=feed)
    print("✅ feed has a title followed by two dated entries")


def unordered_example():
    """Match entries in any order, with a prefixed namespace."""
    print("\n🔀 Step 2: Unordered matching with namespaces")
    print("-" * 30)

    def first(m):
        m.expect("title", "First post")
        m.expect("updated")

    def second(m):
        m.xmlns({"media": "http://search.yahoo.com/mrss/"})
        m.expect("title", "Second post")
        m.expect("updated")
        m.expect("media:thumbnail")

    def feed(m):
        m.unordered()
        m.expect("entry", block=first)
        m.expect("entry", block=second)
        m.expect("title")

    def document(m):
        m.xmlns("http://www.w3.org/2005/Atom")
        m.expect("feed", block=feed)

    assert_xml_match(FEED, document)
    print("✅ entries matched regardless of document order")


def failure_example():
    """Show the consolidated message of a failed unordered search."""
    print("\n❌ Step 3: Reading a failure")
    print("-" * 30)

    def feed(m):
        m.unordered().subset_match()
        m.expect("entry", block=lambda m: m.subset_match().expect("title", "Third post"))

    try:
        XMLMatchAssertion(FEED).xmlns("http://www.w3.org/2005/Atom").expect("feed", block=feed)
    except NoCandidateMatchedError as e:
        for line in str(e).splitlines():
            print(f"  {line}")


def main():
    """Main function."""
    try:
        ordered_example()
        unordered_example()
        failure_example()

        print("\n✅ All examples completed successfully!")
        return 0

    except Exception as e:
        print(f"\n❌ Example failed: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
