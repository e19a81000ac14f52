"""Document loading for XML structure assertions.

Key Components:
    XMLNode: Immutable element view walked by the matching engine
    load_document: Accepts text, bytes, lxml or ElementTree input
    parse_document: Parses text with the fixed whitespace context
"""

from .loader import (
    DOCUMENT_PARSE_CONTEXT,
    XMLNode,
    load_document,
    parse_document,
    split_clark_name,
)

__all__ = [
    "DOCUMENT_PARSE_CONTEXT",
    "XMLNode",
    "load_document",
    "parse_document",
    "split_clark_name",
]
