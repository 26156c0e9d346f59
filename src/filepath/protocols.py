"""Protocol definitions for filesystem access.

Code that performs I/O on FilePath values should depend on the FileSystem
protocol rather than on RealFileSystem. Designing to the interface enables:
- Substituting test doubles without touching the disk
- Keeping FilePath itself free of side effects

Implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filepath.attributes import FileAttributes
    from filepath.path import FilePath


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations on FilePath values.

    Query methods (exists, is_directory, is_symbolic_link) never raise.
    Every other method propagates the host's OSError on failure.
    """

    def children(self, path: FilePath) -> list[FilePath]:
        """List the immediate entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names, relative to ``path``.

        Raises:
            NotADirectoryError: If path is not a directory.
            FileNotFoundError: If path does not exist.
        """
        ...

    def subpaths(self, path: FilePath) -> list[FilePath]:
        """List every descendant of a directory.

        Args:
            path: Directory to walk.

        Returns:
            Descendant paths, relative to ``path``.
        """
        ...

    def exists(self, path: FilePath) -> bool:
        """Check if any entry exists at path.

        Args:
            path: Path to check.

        Returns:
            True if a file, directory, symlink or other entry exists.
        """
        ...

    def is_directory(self, path: FilePath) -> bool:
        """Check if path exists and is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_symbolic_link(self, path: FilePath) -> bool:
        """Check if path is a readable symbolic link.

        Args:
            path: Path to check.

        Returns:
            True if the link target can be read, False on any failure.
        """
        ...

    def create_directory(self, path: FilePath, with_intermediates: bool = False) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            with_intermediates: Also create missing ancestors, and accept an
                existing directory at path.
        """
        ...

    def delete(self, path: FilePath, if_exists: bool = False) -> None:
        """Remove a file, symlink or directory tree.

        Args:
            path: Path to remove.
            if_exists: Do nothing if path does not exist.
        """
        ...

    def copy(self, source: FilePath, destination: FilePath) -> None:
        """Copy a file or directory tree.

        Args:
            source: Path to copy.
            destination: New path; must not exist.
        """
        ...

    def move(
        self,
        source: FilePath,
        destination: FilePath,
        delete_destination: bool = False,
        create_directory: bool = False,
    ) -> None:
        """Move a file or directory.

        Args:
            source: Path to move.
            destination: New path.
            delete_destination: Remove an existing destination first.
            create_directory: Create the destination's parent tree first.
        """
        ...

    def read(self, path: FilePath) -> bytes:
        """Read the full contents of a file.

        Args:
            path: File to read.

        Returns:
            File content as bytes.
        """
        ...

    def write(self, path: FilePath, data: bytes, create_directory: bool = False) -> None:
        """Atomically replace the contents of a file.

        Args:
            path: File to write.
            data: Content to write.
            create_directory: Create the parent tree first.
        """
        ...

    def attributes(self, path: FilePath) -> FileAttributes:
        """Return the attributes of an entry, without following a final symlink.

        Args:
            path: Path to inspect.

        Returns:
            Mapping of AttributeKey to tagged value.
        """
        ...

    def open_reading_handle(self, path: FilePath) -> BinaryIO:
        """Open a file for streaming reads. The caller closes the handle.

        Args:
            path: File to open.

        Raises:
            FilePathError: If the file cannot be opened.
        """
        ...

    def open_writing_handle(self, path: FilePath) -> BinaryIO:
        """Open an existing file for streaming writes, without truncating it.

        Args:
            path: File to open.

        Raises:
            FilePathError: If the file cannot be opened.
        """
        ...

    def current(self) -> FilePath:
        """Return the current working directory."""
        ...

    def temporary(self) -> FilePath:
        """Return the temporary directory."""
        ...

    def permanent(self) -> FilePath:
        """Return the per-user application support directory."""
        ...

    def cache(self) -> FilePath:
        """Return the per-user cache directory."""
        ...
