"""Immutable path value type.

FilePath wraps a path string and provides pure, string-level operations
(joining, splitting, normalization, extension handling). It performs no
filesystem access; I/O lives in filepath.filesystem and takes FilePath
values as arguments.

Equality, ordering and hashing are defined by the exact string value, so
two spellings of the same location (``a/b`` and ``a/b/``) are different
values. Normalization only happens when ``normalized()`` is called.
"""

from __future__ import annotations

import os
import posixpath
from functools import total_ordering
from typing import Any
from urllib.parse import SplitResult, quote, unquote, urlsplit

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from filepath.errors import ContractViolation

__all__ = ["SEPARATOR", "FilePath"]

SEPARATOR = "/"

FILE_SCHEME = "file"


@total_ordering
class FilePath:
    """A filesystem path held as a plain string.

    Instances are immutable. Operations that look like mutation in other
    path libraries (normalize, make absolute, append) return a new value;
    ``p += q`` rebinds ``p``.

    Example:
        >>> FilePath("/usr") + FilePath("bin")
        FilePath('/usr/bin')
        >>> FilePath("a/b/../c").normalized()
        FilePath('a/c')
    """

    __slots__ = ("_value",)

    def __init__(self, value: str | os.PathLike[str] = "") -> None:
        """Wrap a path string verbatim.

        Args:
            value: Path string, or any os.PathLike.
        """
        text = value if isinstance(value, str) else os.fspath(value)
        object.__setattr__(self, "_value", text)

    @classmethod
    def from_url(cls, url: str | SplitResult) -> FilePath:
        """Create a path from a file-scheme URL.

        Args:
            url: URL string or result of ``urllib.parse.urlsplit``.

        Returns:
            FilePath holding the percent-decoded URL path.

        Raises:
            ContractViolation: If the URL scheme is not ``file``.
        """
        parts = urlsplit(url) if isinstance(url, str) else url
        if parts.scheme != FILE_SCHEME:
            raise ContractViolation(f"expected a file URL, got {parts.geturl()!r}")
        return cls(unquote(parts.path))

    @property
    def value(self) -> str:
        return self._value

    def as_string(self) -> str:
        """Return the wrapped path string."""
        return self._value

    def as_url(self) -> str:
        """Return the ``file://`` URL of the absolute form of this path."""
        return f"{FILE_SCHEME}://{quote(self.absolute().as_string())}"

    @property
    def is_absolute(self) -> bool:
        # Textual check only.
        return self._value.startswith(SEPARATOR)

    @property
    def is_relative(self) -> bool:
        return not self.is_absolute

    def normalized(self) -> FilePath:
        """Return the standardized form of this path.

        Expands a leading ``~``, resolves ``.`` and ``..`` segments and
        collapses redundant separators using the host's ``posixpath``
        rules. No filesystem access takes place. The empty path is
        returned unchanged.
        """
        if not self._value:
            return self
        return FilePath(posixpath.normpath(posixpath.expanduser(self._value)))

    def absolute(self) -> FilePath:
        """Return the normalized absolute form of this path.

        Relative paths are resolved against the current working directory.
        """
        if self.is_absolute:
            return self.normalized()

        from filepath.locations import current

        return (current() + self).normalized()

    @property
    def components(self) -> list[FilePath]:
        """Path segments in order, starting with the root for absolute paths."""
        parts = [part for part in self._value.split(SEPARATOR) if part]
        if self.is_absolute:
            parts.insert(0, SEPARATOR)
        return [FilePath(part) for part in parts]

    @property
    def last_component(self) -> FilePath:
        stripped = self._value.rstrip(SEPARATOR)
        if not stripped:
            # Root stays root, empty stays empty.
            return FilePath(self._value[:1])
        return FilePath(posixpath.basename(stripped))

    @property
    def last_component_without_extension(self) -> FilePath:
        last = self.last_component.as_string()
        stem, suffix = posixpath.splitext(last)
        if len(suffix) > 1:
            return FilePath(stem)
        return FilePath(last)

    @property
    def extension(self) -> str:
        """Suffix after the final dot of the last component, without the dot.

        Follows ``posixpath.splitext``: leading-dot names such as
        ``.bashrc`` and names without a dot have no extension.
        """
        return posixpath.splitext(self.last_component.as_string())[1][1:]

    @property
    def parent(self) -> FilePath:
        """This path with its last component removed.

        The parent of ``/`` is ``/`` and the parent of a single relative
        component (or of the empty path) is the empty path.
        """
        stripped = self._value.rstrip(SEPARATOR)
        if not stripped:
            return FilePath(self._value[:1])
        head = posixpath.dirname(stripped).rstrip(SEPARATOR)
        if not head and stripped.startswith(SEPARATOR):
            return FilePath(SEPARATOR)
        return FilePath(head)

    def __add__(self, other: FilePath | str) -> FilePath:
        if isinstance(other, str):
            other = FilePath(other)
        if not isinstance(other, FilePath):
            return NotImplemented
        return FilePath(_append_component(self._value, other._value))

    def __radd__(self, other: str) -> FilePath:
        if not isinstance(other, str):
            return NotImplemented
        return FilePath(other) + self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePath):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: FilePath) -> bool:
        if not isinstance(other, FilePath):
            return NotImplemented
        return self._value < other._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[FilePath], tuple[str]]:
        return (FilePath, (self._value,))

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"FilePath({self._value!r})"

    def __fspath__(self) -> str:
        return self._value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Serialize as a single plain string in both Python and JSON modes."""
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.as_string, when_used="always"
            ),
        )


def _append_component(base: str, component: str) -> str:
    """Append ``component`` to ``base`` with a single separator between them.

    Separators already present on either side of the boundary, and trailing
    separators of the component, are dropped. Unlike ``posixpath.join``, an
    absolute component does not replace the base.
    """
    if not base:
        return component
    tail = component.strip(SEPARATOR)
    if not tail:
        return base
    return f"{base.rstrip(SEPARATOR)}{SEPARATOR}{tail}"
