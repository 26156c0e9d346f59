"""Tests for error types."""

from __future__ import annotations

import pytest

from filepath.errors import ContractViolation, FilePathError


class TestFilePathError:
    """Tests for FilePathError."""

    def test_message_and_path(self) -> None:
        """Test the message is the string form and the path is kept."""
        error = FilePathError("open reading handle failed: /x", "/x")
        assert str(error) == "open reading handle failed: /x"
        assert error.message == "open reading handle failed: /x"
        assert error.path == "/x"

    def test_path_optional(self) -> None:
        """Test the path defaults to None."""
        assert FilePathError("boom").path is None


class TestContractViolation:
    """Tests for ContractViolation."""

    def test_is_assertion_error(self) -> None:
        """Test violations are programmer errors, not OSErrors."""
        with pytest.raises(AssertionError):
            raise ContractViolation("bad argument")
        assert not issubclass(ContractViolation, OSError)
