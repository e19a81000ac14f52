"""Configuration classes for XML structure assertions.

This module provides immutable configuration objects for document loading and
for the default matching behavior of every assertion scope.
"""

import json
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List, Optional


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


def _require_bool(owner: str, name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigValidationError(
            f"{owner}.{name} must be a bool, got {type(value).__name__}",
            field_name=name,
        )


@dataclass(frozen=True)
class DocumentConfig:
    """Parser settings used when a document is loaded from a string.

    Whitespace handling is fixed (see ``DOCUMENT_PARSE_CONTEXT`` in the
    loader); only the parser's security related switches are exposed.
    """

    resolve_entities: bool = False
    no_network: bool = True
    huge_tree: bool = False

    def __post_init__(self) -> None:
        """Validate document configuration."""
        for name in ("resolve_entities", "no_network", "huge_tree"):
            _require_bool("DocumentConfig", name, getattr(self, name))


@dataclass(frozen=True)
class MatchConfig:
    """Defaults applied to every match scope created by an assertion.

    ``ordered`` and ``subset_match`` seed the mode flags of each new scope,
    including nested ones; ``ordered()``, ``unordered()`` and
    ``subset_match()`` then override them for the remainder of that scope.
    """

    ordered: bool = True
    subset_match: bool = False
    document: DocumentConfig = field(default_factory=DocumentConfig)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate match configuration."""
        _require_bool("MatchConfig", "ordered", self.ordered)
        _require_bool("MatchConfig", "subset_match", self.subset_match)
        if not isinstance(self.document, DocumentConfig):
            raise ConfigValidationError(
                "MatchConfig.document must be a DocumentConfig",
                field_name="document",
                suggestions=["Use DocumentConfig(...) or MatchConfig.from_dict()"],
            )
        if self.correlation_id is not None and not self.correlation_id:
            raise ConfigValidationError(
                "correlation_id cannot be empty",
                field_name="correlation_id",
                suggestions=["Pass None to disable correlation tracking"],
            )

    def override(self, **kwargs: Any) -> "MatchConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = MatchConfig()
            >>> relaxed = config.override(ordered=False, document__huge_tree=True)
            >>> relaxed.ordered, relaxed.document.huge_tree
            (False, True)
        """
        document_overrides: Dict[str, Any] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if key.startswith("document__"):
                document_overrides[key.split("__", 1)[1]] = value
            else:
                top_level[key] = value

        if document_overrides:
            try:
                top_level["document"] = replace(self.document, **document_overrides)
            except TypeError as e:
                raise ConfigValidationError(str(e), field_name="document") from e

        try:
            return replace(self, **top_level)
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize configuration to JSON."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        """Create configuration from dictionary representation.

        Raises:
            ConfigValidationError: If the data contains unknown keys or
                invalid values
        """
        values = dict(data)
        document = values.pop("document", None)
        try:
            if isinstance(document, dict):
                values["document"] = DocumentConfig(**document)
            elif document is not None:
                values["document"] = document
            return cls(**values)
        except TypeError as e:
            raise ConfigValidationError(
                f"Invalid configuration data: {e}",
                suggestions=["Check field names against MatchConfig and DocumentConfig"],
            ) from e

    @classmethod
    def from_json(cls, json_str: str) -> "MatchConfig":
        """Create configuration from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON configuration: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("JSON configuration must be an object")
        return cls.from_dict(data)
