"""Structured logging utilities for XML structure assertions.

This module provides correlation-aware logging so that the trace of one
assertion run (scope entries, rejected candidates, failures) can be picked out
of a test session's log output. Matching traces are emitted at DEBUG; documents
that fail to load are reported at WARNING.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Logger that tags every record with the assertion run it belongs to."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for tracking one assertion run
            component: Component name; defaults to the last part of ``name``
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.rsplit(".", 1)[-1]

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        fields = {"component": self.component, "correlation_id": self.correlation_id}
        fields.update(extra or {})
        self.logger.log(level, message, extra=fields)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a matching trace record."""
        self._log(logging.DEBUG, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a document problem."""
        self._log(logging.WARNING, message, extra)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance."""
    return CorrelationLogger(name, correlation_id, component)
