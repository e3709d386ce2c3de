"""Lazy, resumable directory tree iteration.

This package provides a configurable iterator that walks a directory tree one
file at a time, in a caller-defined order, re-scanning directories whose
contents change while the walk is in progress.
"""

from importlib.metadata import PackageNotFoundError, version

from diriter.dir_iterator import DirIterator
from diriter.exceptions import DirIteratorError, InvalidFilterProviderError, InvalidFilterResultError
from diriter.iterator import DirectoryIterator
from diriter.permission_action import PermissionAction

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("diriter")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DirIterator",
    "DirIteratorError",
    "DirectoryIterator",
    "InvalidFilterProviderError",
    "InvalidFilterResultError",
    "PermissionAction",
]
