"""Line-oriented output that stops cleanly when the reader goes away."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from diriter.cli.signal_handler import signal_handler


class SafeWriter:
    """Write UTF-8 text to a file descriptor or a file, honoring received signals.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Open the output.

        Args:
            file: An open file descriptor, or a path to create or truncate.

        Raises:
            TypeError: If file is neither an int nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data.

        Raises:
            BrokenPipeError: If the reader closed the pipe or an interrupt was received.
            ValueError: If the writer is already closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_line(self, line: str) -> None:
        self.write(line + "\n")

    def close(self) -> None:
        """Close the file if this writer opened it. Broken pipes on close are ignored."""
        if self._closed:
            return
        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over a failed close.
            if exc_type is None:
                raise
