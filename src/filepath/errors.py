"""Error types raised by filepath."""

from __future__ import annotations

__all__ = ["ContractViolation", "FilePathError"]


class FilePathError(Exception):
    """Operational failure bound to a specific path.

    Attributes:
        message: Human readable description, including the path.
        path: The path string the failure refers to, if any.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the failure.
            path: Offending path string.
        """
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ContractViolation(AssertionError):
    """Raised when a caller breaks a precondition.

    This signals a programming error, not an environmental one, and is not
    meant to be caught.
    """

    pass
