"""Typed file attributes.

Host attribute lookups return loosely typed values. This module maps them
onto a fixed set of keys whose values are tagged variants, so calling code
can branch on ``kind`` instead of guessing Python types.
"""

from __future__ import annotations

import os
import stat
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

try:
    import grp
    import pwd
except ImportError:  # Windows has no user or group database modules
    grp = pwd = None  # type: ignore[assignment]

__all__ = [
    "AttributeKey",
    "AttributeValue",
    "BooleanValue",
    "FILE_ATTRIBUTES_ADAPTER",
    "FileAttributes",
    "FileType",
    "IntegerValue",
    "StringValue",
    "TimestampValue",
    "attributes_from_stat",
    "file_type_from_mode",
]


class AttributeKey(str, Enum):
    """Names of the attributes reported for a filesystem entry."""

    TYPE = "type"
    SIZE = "size"
    MODIFICATION_DATE = "modification_date"
    CREATION_DATE = "creation_date"
    POSIX_PERMISSIONS = "posix_permissions"
    REFERENCE_COUNT = "reference_count"
    OWNER_ACCOUNT_ID = "owner_account_id"
    GROUP_OWNER_ACCOUNT_ID = "group_owner_account_id"
    OWNER_ACCOUNT_NAME = "owner_account_name"
    GROUP_OWNER_ACCOUNT_NAME = "group_owner_account_name"
    SYSTEM_NUMBER = "system_number"
    SYSTEM_FILE_NUMBER = "system_file_number"
    IMMUTABLE = "immutable"


class FileType(str, Enum):
    """Kind of filesystem entry, as reported under ``AttributeKey.TYPE``."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symbolic_link"
    CHARACTER_SPECIAL = "character_special"
    BLOCK_SPECIAL = "block_special"
    SOCKET = "socket"
    FIFO = "fifo"
    UNKNOWN = "unknown"


class IntegerValue(BaseModel):
    """Integer attribute such as a size or an id."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    value: int


class TimestampValue(BaseModel):
    """Point in time, always timezone-aware UTC."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["timestamp"] = "timestamp"
    value: datetime


class StringValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str


class BooleanValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"
    value: bool


AttributeValue = Annotated[
    Union[IntegerValue, TimestampValue, StringValue, BooleanValue],
    Field(discriminator="kind"),
]

FileAttributes = dict[AttributeKey, AttributeValue]

# Validates/serializes whole attribute mappings, e.g. for JSON export.
FILE_ATTRIBUTES_ADAPTER: TypeAdapter[FileAttributes] = TypeAdapter(FileAttributes)

_MODE_TYPES = (
    (stat.S_ISREG, FileType.REGULAR),
    (stat.S_ISDIR, FileType.DIRECTORY),
    (stat.S_ISLNK, FileType.SYMBOLIC_LINK),
    (stat.S_ISCHR, FileType.CHARACTER_SPECIAL),
    (stat.S_ISBLK, FileType.BLOCK_SPECIAL),
    (stat.S_ISSOCK, FileType.SOCKET),
    (stat.S_ISFIFO, FileType.FIFO),
)


def file_type_from_mode(mode: int) -> FileType:
    """Classify an ``st_mode`` value.

    Args:
        mode: The ``st_mode`` field of a stat result.

    Returns:
        Matching FileType, or FileType.UNKNOWN.
    """
    for predicate, file_type in _MODE_TYPES:
        if predicate(mode):
            return file_type
    return FileType.UNKNOWN


def _timestamp(seconds: float) -> TimestampValue:
    return TimestampValue(value=datetime.fromtimestamp(seconds, tz=timezone.utc))


def _owner_name(uid: int) -> str | None:
    if pwd is None:
        return None
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


def _group_name(gid: int) -> str | None:
    if grp is None:
        return None
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def attributes_from_stat(st: os.stat_result) -> FileAttributes:
    """Convert a stat result into a typed attribute mapping.

    Only attributes the host reports are included: ``creation_date`` needs
    ``st_birthtime`` and ``immutable`` needs ``st_flags``. Account names are
    omitted when the id has no user or group database entry.

    Args:
        st: Result of ``os.stat`` or ``os.lstat``.

    Returns:
        Mapping of AttributeKey to tagged value.
    """
    attrs: FileAttributes = {
        AttributeKey.TYPE: StringValue(value=file_type_from_mode(st.st_mode).value),
        AttributeKey.SIZE: IntegerValue(value=st.st_size),
        AttributeKey.MODIFICATION_DATE: _timestamp(st.st_mtime),
        AttributeKey.POSIX_PERMISSIONS: IntegerValue(value=stat.S_IMODE(st.st_mode)),
        AttributeKey.REFERENCE_COUNT: IntegerValue(value=st.st_nlink),
        AttributeKey.OWNER_ACCOUNT_ID: IntegerValue(value=st.st_uid),
        AttributeKey.GROUP_OWNER_ACCOUNT_ID: IntegerValue(value=st.st_gid),
        AttributeKey.SYSTEM_NUMBER: IntegerValue(value=st.st_dev),
        AttributeKey.SYSTEM_FILE_NUMBER: IntegerValue(value=st.st_ino),
    }

    birthtime = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        attrs[AttributeKey.CREATION_DATE] = _timestamp(birthtime)

    flags = getattr(st, "st_flags", None)
    if flags is not None:
        immutable = bool(flags & (stat.UF_IMMUTABLE | stat.SF_IMMUTABLE))
        attrs[AttributeKey.IMMUTABLE] = BooleanValue(value=immutable)

    owner = _owner_name(st.st_uid)
    if owner is not None:
        attrs[AttributeKey.OWNER_ACCOUNT_NAME] = StringValue(value=owner)
    group = _group_name(st.st_gid)
    if group is not None:
        attrs[AttributeKey.GROUP_OWNER_ACCOUNT_NAME] = StringValue(value=group)

    return attrs
