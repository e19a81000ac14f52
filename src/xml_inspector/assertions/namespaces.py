"""Namespace prefix resolution for expectation statements."""

from typing import Dict, Iterator, Mapping, Optional, Union

from xml_inspector.errors import InvalidNamespaceArgumentError, UndeclaredPrefixError

# Key under which an unprefixed (default) namespace may be given in a mapping.
DEFAULT_PREFIX = ""


class NamespaceContext:
    """Mapping of prefix to namespace URI plus a default namespace.

    Each match scope owns its own context; nested scopes start from a
    ``copy()`` so declarations never leak back to the parent or across to
    sibling blocks.
    """

    def __init__(
        self,
        prefixes: Optional[Mapping[str, str]] = None,
        default: str = "",
    ) -> None:
        self._default = default
        self._prefixes: Dict[str, str] = {}
        if prefixes:
            self.declare(prefixes)

    @property
    def default(self) -> str:
        return self._default

    def resolve(self, prefix: Optional[str] = None) -> str:
        """Return the URI bound to ``prefix``; ``None`` or ``""`` give the default namespace.

        Raises:
            UndeclaredPrefixError: If the prefix was never declared in this scope
        """
        if prefix is None or prefix == DEFAULT_PREFIX:
            return self._default
        try:
            return self._prefixes[prefix]
        except KeyError:
            raise UndeclaredPrefixError(prefix) from None

    def declare(self, namespaces: Union[str, Mapping[str, str]]) -> None:
        """Declare namespaces for the rest of the current scope.

        A string sets the default namespace. A mapping merges prefix bindings,
        replacing existing ones of the same name; its ``""`` key, if present,
        sets the default namespace.

        Raises:
            InvalidNamespaceArgumentError: For any other argument, or a mapping
                with non-string prefixes or URIs
        """
        if isinstance(namespaces, str):
            self._default = namespaces
            return
        if not isinstance(namespaces, Mapping):
            raise InvalidNamespaceArgumentError(namespaces)

        for prefix, uri in namespaces.items():
            if not isinstance(prefix, str) or not isinstance(uri, str):
                raise InvalidNamespaceArgumentError(namespaces)

        for prefix, uri in namespaces.items():
            if prefix == DEFAULT_PREFIX:
                self._default = uri
            else:
                self._prefixes[prefix] = uri

    def copy(self) -> "NamespaceContext":
        clone = NamespaceContext(default=self._default)
        clone._prefixes = dict(self._prefixes)
        return clone

    def as_dict(self) -> Dict[str, str]:
        """Return the bindings, with the default namespace under ``""``."""
        result = {DEFAULT_PREFIX: self._default}
        result.update(self._prefixes)
        return result

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._prefixes

    def __iter__(self) -> Iterator[str]:
        return iter(self._prefixes)

    def __repr__(self) -> str:
        return f"NamespaceContext({self._prefixes!r}, default={self._default!r})"
