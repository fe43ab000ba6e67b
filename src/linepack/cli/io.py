# topmark:header:start
#
#   project      : LinePack
#   file         : io.py
#   file_relpath : src/linepack/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binary stdin/stdout plumbing for the streaming commands."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, BinaryIO

from linepack.cli.errors import LinepackIOError
from linepack.constants import STREAM_CHUNK_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def read_chunks(stream: BinaryIO | None = None, size: int = STREAM_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield chunks from ``stream`` (binary stdin by default) until EOF.

    Raises:
        LinepackIOError: If reading fails.
    """
    src: BinaryIO = stream or sys.stdin.buffer
    while True:
        try:
            chunk: bytes = src.read(size)
        except OSError as exc:
            raise LinepackIOError(f"cannot read input: {exc}") from exc
        if not chunk:
            return
        yield chunk


def write_all(parts: Iterable[bytes], stream: BinaryIO | None = None) -> None:
    """Write ``parts`` to ``stream`` (binary stdout by default) and flush.

    Whatever was written is flushed even when ``parts`` raises part-way.

    Raises:
        LinepackIOError: If writing fails.
    """
    dst: BinaryIO = stream or sys.stdout.buffer
    try:
        try:
            for part in parts:
                dst.write(part)
        finally:
            dst.flush()
    except OSError as exc:
        raise LinepackIOError(f"cannot write output: {exc}") from exc
