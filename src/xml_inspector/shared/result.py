"""Diagnostic records produced while matching.

An unordered search keeps one ``CandidateFailure`` per rejected child so the
consolidated failure can explain why every candidate was turned down.
"""

import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CandidateFailure:
    """Why a single candidate child did not satisfy an expectation."""

    element_name: str
    candidate_path: str
    message: str
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        """Validate candidate failure."""
        if not self.message:
            raise ValueError("Candidate failure message cannot be empty")
        if not self.candidate_path:
            raise ValueError("Candidate path cannot be empty")

    def __str__(self) -> str:
        return self.message
