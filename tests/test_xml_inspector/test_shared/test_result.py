"""Tests for diagnostic records."""

import pytest

from xml_inspector.shared.result import CandidateFailure


class TestCandidateFailure:
    """Test CandidateFailure validation."""

    def test_creation(self) -> None:
        """Test a valid candidate failure."""
        failure = CandidateFailure(
            element_name="a",
            candidate_path="/root/b",
            message="element mismatch at /root/b",
        )

        assert str(failure) == "element mismatch at /root/b"
        assert failure.timestamp > 0

    def test_empty_message_raises_error(self) -> None:
        """Test that an empty message raises ValueError."""
        with pytest.raises(ValueError, match="message cannot be empty"):
            CandidateFailure(element_name="a", candidate_path="/r", message="")

    def test_empty_path_raises_error(self) -> None:
        """Test that an empty candidate path raises ValueError."""
        with pytest.raises(ValueError, match="Candidate path cannot be empty"):
            CandidateFailure(element_name="a", candidate_path="", message="x")
