"""Signal handling for the diriter CLI.

The CLI streams one line per file, so it is routinely piped into tools such as
``head`` that close the pipe early. The handlers below only record that a signal
arrived; the walk and the writer notice and stop, and main() turns the signal into an
exit code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class SignalHandler:
    """Records SIGPIPE and SIGINT so the output loop can stop cleanly.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been received.
        sigint_received: Set once SIGINT has been received.
        original_sigpipe_handler: Handler that was installed for SIGPIPE before ours.
        original_sigint_handler: Handler that was installed for SIGINT before ours.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        # A second Ctrl+C falls through to the original handler.
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def until_interrupted(entries: Iterable[T]) -> Iterator[T]:
    """Yield from entries until SIGPIPE or SIGINT is received.

    The flags are checked before each entry is requested, so an interrupted walk stops
    without listing any further directories.
    """
    iterator = iter(entries)
    while not signal_handler.interrupted:
        try:
            entry = next(iterator)
        except StopIteration:
            return
        yield entry


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    This keeps the interpreter from reporting a second broken pipe while flushing
    stdout at shutdown.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
