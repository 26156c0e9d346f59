"""Well-known directories.

Each lookup is re-evaluated on every call, so changes to the working
directory or to the environment variables below are picked up immediately.

Platform-specific behavior:
- permanent: Windows %APPDATA%, macOS ~/Library/Application Support,
  others $XDG_DATA_HOME or ~/.local/share
- cache: Windows %LOCALAPPDATA%, macOS ~/Library/Caches,
  others $XDG_CACHE_HOME or ~/.cache
"""

from __future__ import annotations

import os
import platform
import tempfile
from pathlib import Path

from filepath.path import FilePath

__all__ = ["cache", "current", "permanent", "temporary"]


def current() -> FilePath:
    """Return the process's current working directory."""
    return FilePath(os.getcwd())


def temporary() -> FilePath:
    """Return the platform temporary directory."""
    return FilePath(tempfile.gettempdir())


def permanent() -> FilePath:
    """Return the per-user application support directory.

    Returns:
        FilePath of the directory. It is not created.
    """
    system = platform.system()

    if system == "Windows":
        base = os.environ.get("APPDATA")
        if not base:
            return FilePath(Path.home() / "AppData" / "Roaming")
        return FilePath(base)

    if system == "Darwin":
        return FilePath(Path.home() / "Library" / "Application Support")

    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return FilePath(xdg_data)
    return FilePath(Path.home() / ".local" / "share")


def cache() -> FilePath:
    """Return the per-user cache directory.

    Returns:
        FilePath of the directory. It is not created.
    """
    system = platform.system()

    if system == "Windows":
        base = os.environ.get("LOCALAPPDATA")
        if not base:
            return FilePath(Path.home() / "AppData" / "Local")
        return FilePath(base)

    if system == "Darwin":
        return FilePath(Path.home() / "Library" / "Caches")

    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return FilePath(xdg_cache)
    return FilePath(Path.home() / ".cache")
