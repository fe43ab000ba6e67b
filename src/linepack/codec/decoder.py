# topmark:header:start
#
#   project      : LinePack
#   file         : decoder.py
#   file_relpath : src/linepack/codec/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Streaming decoder: frame lines in, original bytes out.

Each line is parsed with [`linepack.codec.grammar.parse_frame`][]; its data is
appended to the output, followed by a line feed for terminal (``<``) frames.
Decoding is stateless across frames apart from the line numbering and the
incomplete trailing line kept between `Decoder.feed` calls.

What happens on a malformed line is the caller's choice:

* ``skip_malformed=False`` (default): raise
  [`linepack.codec.errors.MalformedFrameError`][] carrying the line number;
* ``skip_malformed=True``: log a warning, record the error in
  `Decoder.errors`, and continue with the next line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linepack.codec.errors import MalformedFrameError
from linepack.codec.grammar import MAX_ENCODED_LINE_LENGTH, Frame, parse_frame
from linepack.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from linepack.config.logging import LinepackLogger

logger: LinepackLogger = get_logger(__name__)


class Decoder:
    """Per-stream frame decoder.

    Args:
        skip_malformed (bool): Skip malformed lines instead of raising.

    Attributes:
        skip_malformed (bool): Recovery policy for malformed lines.
        errors (list[MalformedFrameError]): Errors skipped so far (skip mode only).
        frames_in (int): Number of frames decoded successfully.
        terminal_frames (int): Number of terminal frames among them.
        bytes_out (int): Number of decoded bytes produced.
    """

    def __init__(self, *, skip_malformed: bool = False) -> None:
        self.skip_malformed: bool = skip_malformed
        self.errors: list[MalformedFrameError] = []
        self.frames_in: int = 0
        self.terminal_frames: int = 0
        self.bytes_out: int = 0
        self._line_number: int = 0
        self._pending: bytearray = bytearray()
        # Set while skipping the rest of an over-long line.
        self._discarding: bool = False

    def decode_line(self, line: bytes) -> bytes:
        """Decode one encoded line and return its payload.

        Args:
            line (bytes): One encoded line, with or without its trailing EOL.

        Returns:
            bytes: The frame's data, plus a line feed for terminal frames. Empty
                when the line was malformed and skipped.

        Raises:
            MalformedFrameError: If the line is malformed and ``skip_malformed`` is False.
        """
        self._line_number += 1
        try:
            frame: Frame = parse_frame(line)
        except MalformedFrameError as exc:
            return self._reject(exc.at_line(self._line_number))

        self.frames_in += 1
        if frame.is_terminal:
            self.terminal_frames += 1
        payload: bytes = frame.payload()
        self.bytes_out += len(payload)
        logger.trace(
            "Line %d: %s frame (%d bytes)", self._line_number, frame.kind.name, frame.length
        )
        return payload

    def iter_feed(self, data: bytes) -> Iterator[bytes]:
        """Decode every complete line in ``data``, one payload at a time.

        Payloads are yielded as each line is decoded, so output that precedes a
        malformed line reaches the caller before the error does. The generator
        must be exhausted for the incomplete remainder to be kept.

        Args:
            data (bytes): A chunk of the encoded stream.

        Yields:
            bytes: The payload of each decoded line (never empty).

        Raises:
            MalformedFrameError: On the first malformed line, unless skipping.
        """
        start: int = 0
        while True:
            end: int = data.find(b"\n", start)
            if end < 0:
                break
            if self._discarding:
                self._discarding = False
                start = end + 1
                continue
            self._pending += data[start:end]
            line: bytes = bytes(self._pending)
            self._pending.clear()
            start = end + 1
            payload: bytes = self.decode_line(line)
            if payload:
                yield payload

        if not self._discarding:
            self._pending += data[start:]
            if len(self._pending) >= MAX_ENCODED_LINE_LENGTH:
                overlong: bytes = bytes(self._pending)
                self._pending.clear()
                self._line_number += 1
                self._discarding = True
                self._reject(
                    MalformedFrameError(
                        f"line exceeds {MAX_ENCODED_LINE_LENGTH} bytes",
                        line=overlong,
                        line_number=self._line_number,
                    )
                )

    def feed(self, data: bytes) -> bytes:
        """Decode every complete line in ``data`` and keep the incomplete remainder.

        Args:
            data (bytes): A chunk of the encoded stream.

        Returns:
            bytes: Decoded output for the lines completed by this chunk.

        Raises:
            MalformedFrameError: On the first malformed line, unless skipping.
        """
        return b"".join(self.iter_feed(data))

    def finish(self) -> bytes:
        """Decode a final line that lacks its line feed, if any.

        Returns:
            bytes: Decoded output of the trailing line (often empty).

        Raises:
            MalformedFrameError: If the trailing line is malformed, unless skipping.
        """
        if self._discarding:
            self._discarding = False
            self._pending.clear()
            return b""
        if not self._pending:
            return b""
        line: bytes = bytes(self._pending)
        self._pending.clear()
        logger.debug("Decoding final line without line feed (%d bytes)", len(line))
        return self.decode_line(line)

    def _reject(self, exc: MalformedFrameError) -> bytes:
        if not self.skip_malformed:
            raise exc
        logger.warning("Skipping %s", exc)
        self.errors.append(exc)
        return b""


def iter_decode(chunks: Iterable[bytes], *, skip_malformed: bool = False) -> Iterator[bytes]:
    """Decode a stream of encoded chunks, yielding decoded output line by line.

    Args:
        chunks (Iterable[bytes]): Encoded input chunks, in stream order.
        skip_malformed (bool): Skip malformed lines instead of raising.

    Yields:
        bytes: Decoded output (never empty).
    """
    decoder = Decoder(skip_malformed=skip_malformed)
    for chunk in chunks:
        yield from decoder.iter_feed(chunk)
    tail: bytes = decoder.finish()
    if tail:
        yield tail


def decode(data: bytes, *, skip_malformed: bool = False) -> bytes:
    """Decode a complete encoded stream in one call; see `iter_decode`."""
    return b"".join(iter_decode((data,), skip_malformed=skip_malformed))
