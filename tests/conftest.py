"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from filepath.filesystem import RealFileSystem
from filepath.path import FilePath


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def fs() -> RealFileSystem:
    """Create the production filesystem."""
    return RealFileSystem.create_default()


@pytest.fixture
def root(tmp_path: Path) -> FilePath:
    """Temporary directory as a FilePath."""
    return FilePath(tmp_path)


@pytest.fixture
def sample_tree(root: FilePath) -> FilePath:
    """Create a small directory tree.

    Layout:
        tree/
        ├── a.txt
        └── sub/
            └── b.bin
    """
    tree = root + "tree"
    (Path(tree) / "sub").mkdir(parents=True)
    (Path(tree) / "a.txt").write_bytes(b"alpha")
    (Path(tree) / "sub" / "b.bin").write_bytes(b"\x00\x01\x02")
    return tree

