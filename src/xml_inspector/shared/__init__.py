"""Shared utilities for XML structure assertions.

This module provides configuration objects, diagnostic records and logging
helpers used by the document loader and the matching engine.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    DocumentConfig,
    MatchConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import CandidateFailure

__all__ = [
    "CandidateFailure",
    "ConfigError",
    "ConfigValidationError",
    "DocumentConfig",
    "MatchConfig",
    "CorrelationLogger",
    "get_logger",
]
