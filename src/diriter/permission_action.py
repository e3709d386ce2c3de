"""Permission action enum for handling unreadable directories during iteration."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory's children cannot be listed.

    Values:
        IGNORE: Treat the directory as empty and keep iterating (default behavior)
        RAISE: Propagate the PermissionError to the caller of next()/peek()
    """

    IGNORE = "ignore"
    RAISE = "raise"
