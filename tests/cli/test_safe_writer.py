"""Unit tests for the SafeWriter class in the diriter CLI."""

import errno
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from diriter.cli.safe_writer import SafeWriter


@pytest.fixture
def mock_signals():
    """Replace the signal handler seen by SafeWriter."""
    with patch("diriter.cli.safe_writer.signal_handler") as mock:
        mock.interrupted = False
        yield mock


@pytest.fixture
def mock_write():
    with patch("os.write") as mock:
        mock.side_effect = lambda fd, data: len(data)
        yield mock


def test_init_with_fd():
    writer = SafeWriter(3)
    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


def test_init_with_path(tmp_path):
    target = tmp_path / "out.txt"
    writer = SafeWriter(target)
    try:
        assert writer.file == target
        assert writer._file_obj is not None
        assert writer.fd == writer._file_obj.fileno()
    finally:
        writer.close()


def test_init_with_invalid_type():
    with pytest.raises(TypeError, match="Expected int, str, or PathLike"):
        SafeWriter(42.0)


def test_write(mock_signals, mock_write):
    SafeWriter(3).write("test data")
    mock_write.assert_called_once_with(3, b"test data")


def test_write_line_appends_newline(mock_signals, mock_write):
    SafeWriter(3).write_line("src/app.py")
    mock_write.assert_called_once_with(3, b"src/app.py\n")


def test_write_encodes_utf8(mock_signals, mock_write):
    SafeWriter(3).write("naïve.txt")
    mock_write.assert_called_once_with(3, "naïve.txt".encode("utf-8"))


def test_partial_writes_are_continued(mock_signals):
    with patch("os.write") as mock_write:
        mock_write.side_effect = [4, 5]
        SafeWriter(3).write("test data")
    assert [c.args[1] for c in mock_write.call_args_list] == [b"test data", b" data"]


def test_write_after_close():
    writer = SafeWriter(3)
    writer.close()
    with pytest.raises(ValueError, match="Cannot write to closed SafeWriter"):
        writer.write("test data")


def test_write_after_interrupt(mock_signals, mock_write):
    mock_signals.interrupted = True
    with pytest.raises(BrokenPipeError):
        SafeWriter(3).write("test data")
    mock_write.assert_not_called()


def test_write_with_os_error(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EIO, "Input/output error")):
        with pytest.raises(OSError) as excinfo:
            SafeWriter(3).write("test data")
    assert excinfo.value.errno == errno.EIO
    assert not isinstance(excinfo.value, BrokenPipeError)


def test_write_with_epipe(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("test data")


def test_close_with_file_object_closes_once():
    mock_file = MagicMock()
    writer = SafeWriter(3)
    writer._file_obj = mock_file
    writer.close()
    writer.close()
    mock_file.close.assert_called_once()
    assert writer._closed


def test_close_ignores_broken_pipe():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer = SafeWriter(3)
    writer._file_obj = mock_file
    writer.close()
    assert writer._closed


def test_context_manager_writes_file(tmp_path, mock_signals):
    target = tmp_path / "out.txt"
    with SafeWriter(str(target)) as writer:
        writer.write_line("first")
        writer.write_line("second")
    assert writer._closed
    assert Path(target).read_text(encoding="utf-8") == "first\nsecond\n"
