"""Test configuration and fixtures for diriter."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small directory tree.

    Structure::

        root/
        ├── .git/
        │   └── config
        ├── .env
        ├── README.md
        ├── docs/
        │   ├── guide.txt
        │   └── notes.md
        ├── empty/
        └── src/
            ├── app.py
            ├── notes.txt
            └── pkg/
                └── mod.py
    """
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]")
    (tmp_path / ".env").write_text("SECRET=1")
    (tmp_path / "README.md").write_text("readme")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.txt").write_text("guide")
    (tmp_path / "docs" / "notes.md").write_text("notes")
    (tmp_path / "empty").mkdir()
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("app")
    (tmp_path / "src" / "notes.txt").write_text("notes")
    (tmp_path / "src" / "pkg").mkdir()
    (tmp_path / "src" / "pkg" / "mod.py").write_text("mod")
    return tmp_path


def bump_mtime(directory: Path, seconds: int = 10) -> None:
    """Move a directory's modification time forward.

    Filesystem timestamps are coarse enough that a change made right after a scan can
    leave the mtime untouched, so tests that rely on invalidation bump it explicitly.
    """
    stat_info = directory.stat()
    os.utime(directory, ns=(stat_info.st_atime_ns, stat_info.st_mtime_ns + seconds * 1_000_000_000))


def set_mtime(path: Path, seconds: int) -> None:
    """Give path a fixed modification time, in seconds since the epoch."""
    os.utime(path, (seconds, seconds))


def relative_names(root: Path, entries) -> list:
    """Return entries as POSIX paths relative to root."""
    return [entry.relative_to(root).as_posix() for entry in entries]
