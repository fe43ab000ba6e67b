# topmark:header:start
#
#   project      : LinePack
#   file         : test_io.py
#   file_relpath : tests/cli/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the binary stdin/stdout helpers in linepack.cli.io."""

from __future__ import annotations

import io
import sys
import warnings
from typing import TYPE_CHECKING

import pytest

from linepack.cli.errors import LinepackIOError
from linepack.cli.exit_codes import ExitCode
from linepack.cli.io import read_chunks, write_all
from linepack.codec.errors import MalformedFrameError

if TYPE_CHECKING:
    from collections.abc import Iterator


class _FlushRecorder(io.BytesIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushed_with: bytes | None = None

    def flush(self) -> None:
        self.flushed_with = self.getvalue()
        super().flush()


class _BrokenPipe(io.BytesIO):
    def write(self, data: object) -> int:
        raise BrokenPipeError("reader went away")


def test_read_chunks_splits_stream_by_size() -> None:
    assert list(read_chunks(io.BytesIO(b"abcdefg"), size=3)) == [b"abc", b"def", b"g"]


def test_read_chunks_defaults_to_binary_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a stream, stdin's byte buffer is read without deprecation noise."""
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"02hi<\n")))
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        assert b"".join(read_chunks()) == b"02hi<\n"


def test_write_all_flushes_what_was_written_before_an_error() -> None:
    """Output produced before the source fails is still flushed."""

    def parts() -> Iterator[bytes]:
        yield b"hi\n"
        raise MalformedFrameError("invalid length field", line=b"zz<", line_number=2)

    dst = _FlushRecorder()
    with pytest.raises(MalformedFrameError):
        write_all(parts(), dst)
    assert dst.flushed_with == b"hi\n"


def test_write_all_maps_os_errors_to_io_error() -> None:
    with pytest.raises(LinepackIOError) as excinfo:
        write_all([b"x"], _BrokenPipe())
    assert excinfo.value.exit_code == ExitCode.IO_ERROR
    assert "cannot write output" in str(excinfo.value)
