"""Host filesystem operations on FilePath values.

RealFileSystem delegates every operation to the standard library (os,
shutil) and lets the resulting OSError propagate unchanged.
It satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import contextlib
import errno
import logging
import os
import shutil
import stat
import uuid
from typing import BinaryIO

from filepath import locations
from filepath.attributes import FileAttributes, attributes_from_stat
from filepath.errors import FilePathError
from filepath.path import FilePath

logger = logging.getLogger(__name__)

# Prefix of the temporary files used by atomic writes
TEMP_PREFIX = ".filepath-"

# Mode requested for new files; the kernel applies the process umask
NEW_FILE_MODE = 0o666

_TEMP_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)


def _raise(error: OSError) -> None:
    raise error


def _exists_error(path: FilePath) -> FileExistsError:
    return FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path.as_string())


class RealFileSystem:
    """Production filesystem implementation.

    Wraps os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, temp_prefix: str = TEMP_PREFIX, durable: bool = True) -> None:
        """Initialize the filesystem.

        Args:
            temp_prefix: Name prefix for temporary files created by ``write``.
            durable: Call fsync on written data before it replaces the target.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.temp_prefix = temp_prefix
        self.durable = durable

    @classmethod
    def create(cls, temp_prefix: str = TEMP_PREFIX, durable: bool = True) -> RealFileSystem:
        """Create a filesystem with custom write settings.

        Args:
            temp_prefix: Name prefix for temporary files.
            durable: Whether writes are flushed to disk before the rename.

        Returns:
            Configured RealFileSystem instance.
        """
        return cls(temp_prefix=temp_prefix, durable=durable)

    @classmethod
    def create_default(cls) -> RealFileSystem:
        """Create a filesystem with durable atomic writes."""
        return cls()

    def children(self, path: FilePath) -> list[FilePath]:
        """List the immediate entries of a directory, relative to it."""
        return [FilePath(name) for name in os.listdir(path)]

    def subpaths(self, path: FilePath) -> list[FilePath]:
        """List every descendant of a directory, relative to it.

        Symbolic links to directories are listed but not descended into.

        Raises:
            NotADirectoryError: If path is not a directory.
            FileNotFoundError: If path does not exist.
        """
        root = path.as_string()
        found: list[FilePath] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            prefix = FilePath(dirpath[len(root):].lstrip(os.sep))
            for name in dirnames + filenames:
                found.append(prefix + name)
        return found

    def exists(self, path: FilePath) -> bool:
        return os.path.lexists(path)

    def is_directory(self, path: FilePath) -> bool:
        return os.path.isdir(path)

    def is_symbolic_link(self, path: FilePath) -> bool:
        try:
            os.readlink(path)
        except (OSError, ValueError):
            return False
        return True

    def create_directory(self, path: FilePath, with_intermediates: bool = False) -> None:
        """Create a directory, optionally with its missing ancestors.

        Raises:
            FileExistsError: If path exists (as anything, or as a
                non-directory when with_intermediates is set).
            FileNotFoundError: If the parent is missing and
                with_intermediates is not set.
        """
        if with_intermediates:
            os.makedirs(path, exist_ok=True)
        else:
            os.mkdir(path)
        logger.debug("Created directory %s", path)

    def delete(self, path: FilePath, if_exists: bool = False) -> None:
        """Remove a file, symlink or directory tree.

        Args:
            path: Path to remove. A symlink is removed, never its target.
            if_exists: Treat a missing path as success.
        """
        if if_exists and not self.exists(path):
            return

        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.unlink(path)
        logger.debug("Deleted %s", path)

    def copy(self, source: FilePath, destination: FilePath) -> None:
        """Copy a file or directory tree. Symlinks are copied as links.

        Raises:
            FileExistsError: If destination already exists.
        """
        if self.exists(destination):
            raise _exists_error(destination)

        if os.path.isdir(source) and not os.path.islink(source):
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination, follow_symlinks=False)
        logger.debug("Copied %s to %s", source, destination)

    def move(
        self,
        source: FilePath,
        destination: FilePath,
        delete_destination: bool = False,
        create_directory: bool = False,
    ) -> None:
        """Move a file or directory.

        Steps run in order: delete the destination (if requested), create
        the destination's parent tree (if requested), move.

        Raises:
            FileExistsError: If destination exists and delete_destination
                is not set.
        """
        if delete_destination:
            self.delete(destination, if_exists=True)
        if create_directory:
            self._create_parent(destination)
        if self.exists(destination):
            raise _exists_error(destination)

        shutil.move(source.as_string(), destination.as_string())
        logger.debug("Moved %s to %s", source, destination)

    def read(self, path: FilePath) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()

    def write(self, path: FilePath, data: bytes, create_directory: bool = False) -> None:
        """Atomically replace the contents of a file.

        Data goes to a temporary file in the target's directory, which is
        then renamed over the target. Readers see either the old content
        or the new content, never a partial file. An existing target keeps
        its permission bits; a new one gets the umask-derived default mode.

        Args:
            path: File to write.
            data: Content to write.
            create_directory: Create the parent tree first.
        """
        if create_directory:
            self._create_parent(path)

        directory = path.parent.as_string() or os.curdir
        try:
            mode: int | None = stat.S_IMODE(os.stat(path).st_mode)
        except FileNotFoundError:
            mode = None

        temp_name = os.path.join(directory, f"{self.temp_prefix}{uuid.uuid4().hex}")
        fd = os.open(temp_name, _TEMP_FLAGS, NEW_FILE_MODE)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                if self.durable:
                    os.fsync(handle.fileno())
            if mode is not None:
                os.chmod(temp_name, mode)
            os.replace(temp_name, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(temp_name)
            raise
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def attributes(self, path: FilePath) -> FileAttributes:
        return attributes_from_stat(os.lstat(path))

    def open_reading_handle(self, path: FilePath) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            raise FilePathError(f"open reading handle failed: {path}", path.as_string()) from e

    def open_writing_handle(self, path: FilePath) -> BinaryIO:
        try:
            return open(path, "r+b")
        except OSError as e:
            raise FilePathError(f"open writing handle failed: {path}", path.as_string()) from e

    def current(self) -> FilePath:
        return locations.current()

    def temporary(self) -> FilePath:
        return locations.temporary()

    def permanent(self) -> FilePath:
        return locations.permanent()

    def cache(self) -> FilePath:
        return locations.cache()

    def _create_parent(self, path: FilePath) -> None:
        parent = path.parent
        # An empty parent means the working directory, which always exists.
        if parent.as_string():
            self.create_directory(parent, with_intermediates=True)
