"""Immutable path values with pass-through filesystem operations."""

__version__ = "0.1.0"

# Export the value type and the protocol interface for type hints and dependency injection
from filepath.errors import ContractViolation, FilePathError
from filepath.filesystem import RealFileSystem
from filepath.path import FilePath
from filepath.protocols import FileSystem

__all__ = [
    "__version__",
    "ContractViolation",
    "FilePath",
    "FilePathError",
    "FileSystem",
    "RealFileSystem",
]
