from os import PathLike
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Sequence, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# A filter receives the current ordering of a directory's children and returns
# a reordered subsequence of it.
FilterFunction = Callable[[List[Path]], Sequence[Path]]


class DirectorySignature(NamedTuple):
    """Modification metadata used to decide whether a directory must be re-scanned.

    Attributes:
        mtime_ns: Content modification time in nanoseconds.
        ctime_ns: Metadata change time in nanoseconds.
    """

    mtime_ns: int
    ctime_ns: int


# Returns the current signature of a directory, or None when it no longer exists.
SignatureSource = Callable[[Path], Optional[DirectorySignature]]
