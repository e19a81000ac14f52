"""Matching state for the direct children of one element."""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from xml_inspector.assertions.namespaces import NamespaceContext
from xml_inspector.document import XMLNode
from xml_inspector.shared import CandidateFailure


@dataclass
class MatchScope:
    """State of matching one element's children against a block of expectations.

    ``pool`` is fixed when the scope is entered. Every successful expectation
    statement consumes exactly one child of the pool and bumps
    ``matched_count`` by one, so the two always agree.
    """

    pool: Tuple[XMLNode, ...]
    namespaces: NamespaceContext
    element_name: Optional[str] = None
    path: str = "/"
    ordered: bool = True
    subset_allowed: bool = False
    matched_count: int = 0
    consumed: Set[XMLNode] = field(default_factory=set)
    pending_errors: List[CandidateFailure] = field(default_factory=list)

    @classmethod
    def for_element(
        cls,
        element: XMLNode,
        namespaces: NamespaceContext,
        ordered: bool = True,
        subset_allowed: bool = False,
    ) -> "MatchScope":
        """Create a fresh scope over ``element``'s children."""
        return cls(
            pool=element.children,
            namespaces=namespaces,
            element_name=element.name,
            path=element.path,
            ordered=ordered,
            subset_allowed=subset_allowed,
        )

    def remaining(self) -> List[XMLNode]:
        """Unconsumed children, in document order."""
        return [child for child in self.pool if child not in self.consumed]

    def consume(self, child: XMLNode) -> None:
        if not any(child is candidate for candidate in self.pool):
            raise ValueError(f"{child!r} is not a child of {self.path}")
        if child in self.consumed:
            raise ValueError(f"{child!r} was already matched")
        self.consumed.add(child)
        self.matched_count += 1

    @property
    def is_complete(self) -> bool:
        """True when every child of the pool has been matched."""
        return len(self.consumed) == len(self.pool)
