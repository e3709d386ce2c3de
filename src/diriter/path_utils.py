"""Path normalization and identity helpers shared by the iterator and its filters."""

import os
from pathlib import Path
from typing import Iterable, List

from diriter.types import PathType

# Leading character that marks an entry as hidden.
HIDDEN_MARKER = "."


def clean(path: PathType) -> Path:
    """Return an absolute, user-expanded and normalized form of path.

    Symbolic links are not resolved, so the result still names the entry the caller
    pointed at. Applying clean() to its own result returns an equal path.

    Args:
        path: A string or path-like object. Relative paths are taken relative to the
            current working directory.

    Returns:
        The cleaned absolute path.

    Raises:
        TypeError: If path is not a string or path-like object.

    Example:
        >>> clean("/tmp/../tmp/./notes.txt")
        PosixPath('/tmp/notes.txt')
    """
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def identity(path: PathType) -> str:
    """Return the key used to recognize the same entry across directory rescans.

    Example:
        >>> identity("/tmp/project/setup.py")
        'setup.py'
    """
    return Path(path).name


def is_hidden(path: PathType) -> bool:
    """Return True when the entry's name starts with the hidden marker.

    Example:
        >>> is_hidden("/home/user/.bashrc")
        True
        >>> is_hidden("/home/user/bashrc")
        False
    """
    return identity(path).startswith(HIDDEN_MARKER)


def clean_all(paths: Iterable[PathType]) -> List[Path]:
    """Apply clean() to each path, preserving order."""
    return [clean(path) for path in paths]


def identities(paths: Iterable[PathType]) -> List[str]:
    """Apply identity() to each path, preserving order."""
    return [identity(path) for path in paths]
