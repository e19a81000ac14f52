"""Document loading for XML structure assertions.

This module turns the accepted inputs (raw XML text, lxml trees, standard
library ElementTree trees) into an immutable ``XMLNode`` tree that the matching
engine walks. Only elements are kept as children; comments and processing
instructions never take part in matching.
"""

import re
import xml.etree.ElementTree as ElementTree
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from lxml import etree

from xml_inspector.errors import DocumentLoadError
from xml_inspector.shared import DocumentConfig, get_logger

# Parse context applied to documents given as text. Whitespace-only text nodes
# are dropped and runs of whitespace in retained text collapse to one space.
DOCUMENT_PARSE_CONTEXT: Mapping[str, str] = MappingProxyType({
    "compress_whitespace": "all",
    "ignore_whitespace_nodes": "all",
})

PREVIEW_LENGTH = 100

_WHITESPACE_RUN = re.compile(r"\s+")

# A declaration naming a byte encoding is meaningless once the document is text.
_XML_DECLARATION = re.compile(r"^\ufeff?\s*<\?xml[^>]*\?>")


@dataclass(frozen=True, eq=False)
class XMLNode:
    """Read-only view of one element of the document under test.

    Equality is identity: two sibling ``<item/>`` elements are distinct
    children even though their names and text agree.
    """

    name: str
    namespace: str = ""
    text: Optional[str] = None
    children: Tuple["XMLNode", ...] = ()
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    path: str = ""
    sourceline: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate node values."""
        if not self.name:
            raise ValueError("Element name cannot be empty")
        if self.namespace is None:
            raise ValueError("Element namespace must be a string, use '' for none")
        if not self.path:
            object.__setattr__(self, "path", f"/{self.name}")

    @property
    def clark_name(self) -> str:
        """Name in ``{namespace}local`` form, or the bare name without a namespace."""
        if self.namespace:
            return f"{{{self.namespace}}}{self.name}"
        return self.name

    def __repr__(self) -> str:
        return f"XMLNode({self.clark_name!r}, path={self.path!r})"


def split_clark_name(tag: str) -> Tuple[str, str]:
    """Split ``{uri}local`` into ``(uri, local)``; plain names get ``''``."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return "", tag


def _normalize_text(text: Optional[str]) -> Optional[str]:
    if text is None or not text.strip():
        return None
    return _WHITESPACE_RUN.sub(" ", text)


def _is_element(node: Any) -> bool:
    # Comments, PIs and entities carry a callable rather than a string tag.
    return isinstance(getattr(node, "tag", None), str)


def _convert(element: Any, path: str, normalize: bool) -> XMLNode:
    namespace, name = split_clark_name(element.tag)
    child_elements = [child for child in element if _is_element(child)]

    name_totals = Counter(split_clark_name(child.tag)[1] for child in child_elements)
    name_seen: Dict[str, int] = {}
    children = []
    for child in child_elements:
        local = split_clark_name(child.tag)[1]
        if name_totals[local] > 1:
            name_seen[local] = name_seen.get(local, 0) + 1
            child_path = f"{path}/{local}[{name_seen[local]}]"
        else:
            child_path = f"{path}/{local}"
        children.append(_convert(child, child_path, normalize))

    text = _normalize_text(element.text) if normalize else element.text
    return XMLNode(
        name=name,
        namespace=namespace,
        text=text,
        children=tuple(children),
        attributes=MappingProxyType(dict(element.attrib)),
        path=path,
        sourceline=getattr(element, "sourceline", None),
    )


def _build_parser(config: DocumentConfig) -> etree.XMLParser:
    return etree.XMLParser(
        remove_blank_text=True,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=config.resolve_entities,
        no_network=config.no_network,
        huge_tree=config.huge_tree,
    )


def parse_document(
    xml: Union[str, bytes],
    config: Optional[DocumentConfig] = None,
    correlation_id: Optional[str] = None,
) -> XMLNode:
    """Parse XML text into an ``XMLNode`` tree using the fixed parse context.

    Args:
        xml: XML content as text or bytes
        config: Parser security settings
        correlation_id: Optional correlation ID for log records

    Returns:
        Root ``XMLNode`` of the document

    Raises:
        DocumentLoadError: If the content is not well-formed XML

    Examples:
        >>> root = parse_document('<root>\\n  <a>  one   two </a>\\n</root>')
        >>> [child.text for child in root.children]
        [' one two ']
    """
    config = config or DocumentConfig()
    logger = get_logger(__name__, correlation_id, "parse_document")

    if isinstance(xml, str):
        xml = _XML_DECLARATION.sub("", xml, count=1).encode("utf-8")

    try:
        root = etree.fromstring(xml, parser=_build_parser(config))
    except etree.XMLSyntaxError as e:
        preview = xml[:PREVIEW_LENGTH].decode("utf-8", errors="replace")
        logger.warning(
            "Document is not well-formed XML",
            extra={"error": str(e), "preview": preview},
        )
        raise DocumentLoadError(f"document is not well-formed XML: {e}") from e

    return _convert(root, f"/{split_clark_name(root.tag)[1]}", normalize=True)


def load_document(
    source: Any,
    config: Optional[DocumentConfig] = None,
    correlation_id: Optional[str] = None,
) -> XMLNode:
    """Load any supported document source as an ``XMLNode`` tree.

    Text and bytes are parsed with ``parse_document``. Pre-built lxml or
    ElementTree elements and trees are converted as they are, without
    whitespace normalization. ``XMLNode`` instances are returned unchanged.

    Raises:
        DocumentLoadError: For malformed text or unsupported source types
    """
    if isinstance(source, XMLNode):
        return source
    if isinstance(source, (str, bytes)):
        return parse_document(source, config, correlation_id)

    if isinstance(source, (etree._ElementTree, ElementTree.ElementTree)):
        source = source.getroot()
        if source is None:
            raise DocumentLoadError("element tree has no root element")

    if isinstance(source, (etree._Element, ElementTree.Element)):
        if not _is_element(source):
            raise DocumentLoadError("document root must be an element")
        return _convert(source, f"/{split_clark_name(source.tag)[1]}", normalize=False)

    raise DocumentLoadError(
        f"unsupported document source: {type(source).__name__}"
    )
