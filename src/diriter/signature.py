"""Directory metadata used to invalidate cached directory listings."""

import os
import stat
from pathlib import Path
from typing import Optional

from diriter.types import DirectorySignature


def stat_signature(path: Path) -> Optional[DirectorySignature]:
    """Read a directory's modification and metadata-change times.

    This is the default signature source. A cached listing of path stays valid for as
    long as the returned signature is unchanged.

    Args:
        path: Directory to inspect.

    Returns:
        The directory's signature, or None if path no longer exists or is not a
        directory.

    Raises:
        PermissionError: If the directory's metadata cannot be read.
    """
    try:
        stat_info = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None
    if not stat.S_ISDIR(stat_info.st_mode):
        return None
    return DirectorySignature(stat_info.st_mtime_ns, stat_info.st_ctime_ns)
