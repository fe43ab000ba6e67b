# topmark:header:start
#
#   project      : LinePack
#   file         : encoder.py
#   file_relpath : src/linepack/codec/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Streaming encoder: raw bytes in, frame lines out.

The encoder accumulates data bytes and emits a [`linepack.codec.grammar.Frame`][]
whenever the input forces a flush:

* a line feed closes the current frame as *terminal* (the LF itself is not
  stored; the ``<`` marker stands for it);
* any other byte is buffered while ``len(buffer) + 1 + ws < capacity``, where
  ``ws`` is 1 for SP/HT and 0 otherwise. The first byte that fails this test is
  appended and the frame is closed as *continuation*.

The extra unit reserved for whitespace makes a pending SP/HT close a frame one
byte earlier than a non-space byte would in the same buffer state. A full buffer
alone never flushes; flushing is always driven by an input byte or by
`Encoder.finish`.

Example:
    ```python
    from linepack.codec import encode

    assert encode(b"abcdef\\n", line_size=4) == b"04abcd/\\n02ef<\\n"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linepack.codec.alphabet import LF, find_invalid_byte, is_data_byte, is_space_byte
from linepack.codec.errors import InvalidInputError
from linepack.codec.grammar import DEFAULT_LINE_SIZE, Frame, FrameKind, validate_line_size
from linepack.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from linepack.config.logging import LinepackLogger

logger: LinepackLogger = get_logger(__name__)


class Encoder:
    """Per-stream frame encoder.

    Args:
        line_size (int): Capacity ``L`` of a frame's data field (``1..=250``).
        strict_input (bool): If True, reject bytes outside the text-stream alphabet
            with [`linepack.codec.errors.InvalidInputError`][] instead of passing
            them through unchecked.

    Attributes:
        capacity (int): The validated line size.
        strict_input (bool): Whether input bytes are checked against the alphabet.
        bytes_in (int): Number of input bytes consumed so far.
        frames_out (int): Number of frames emitted so far.
        bytes_out (int): Number of encoded bytes emitted so far.

    Raises:
        ConfigError: If ``line_size`` is not an integer within ``1..=250``.
    """

    def __init__(self, line_size: int = DEFAULT_LINE_SIZE, *, strict_input: bool = False) -> None:
        self.capacity: int = validate_line_size(line_size)
        self.strict_input: bool = strict_input
        self._buffer: bytearray = bytearray()
        self.bytes_in: int = 0
        self.frames_out: int = 0
        self.bytes_out: int = 0

    @property
    def pending(self) -> bytes:
        """Data bytes buffered but not yet emitted."""
        return bytes(self._buffer)

    def consume(self, value: int | None) -> Frame | None:
        """Consume one input byte, or the end-of-input sentinel ``None``.

        Args:
            value (int | None): Byte value ``0..255``, or None at end of input.

        Returns:
            Frame | None: The frame emitted by this input, if any.

        Raises:
            InvalidInputError: In strict mode, when ``value`` is neither a data
                byte nor a line feed.
        """
        if value is None:
            return self.finish()

        if self.strict_input and value != LF and not is_data_byte(value):
            raise InvalidInputError(self.bytes_in, value)
        return self._push(value)

    def iter_feed(self, data: bytes) -> Iterator[Frame]:
        """Consume a chunk of input, yielding each frame as it is completed.

        In strict mode the chunk is scanned up front; the bytes before the first
        offending one are still encoded, and their frames yielded, before
        [`linepack.codec.errors.InvalidInputError`][] is raised.

        Args:
            data (bytes): A chunk of raw input.

        Yields:
            Frame: Frames completed by this chunk, in stream order.

        Raises:
            InvalidInputError: In strict mode, at the first byte outside the alphabet.
        """
        bad: int | None = find_invalid_byte(data) if self.strict_input else None
        for value in data if bad is None else data[:bad]:
            frame: Frame | None = self._push(value)
            if frame is not None:
                yield frame
        if bad is not None:
            raise InvalidInputError(self.bytes_in, data[bad])

    def feed(self, data: bytes) -> list[Frame]:
        """Consume a chunk of input and return the frames it completed."""
        return list(self.iter_feed(data))

    def finish(self) -> Frame | None:
        """Flush pending data at end of input.

        Pending bytes form a final line with no observed line feed and are emitted
        as a continuation frame. The encoder can be reused afterwards.

        Returns:
            Frame | None: The final frame, or None if nothing was pending.
        """
        if not self._buffer:
            logger.debug(
                "Encoder finished: %d bytes in, %d frames (%d bytes) out",
                self.bytes_in,
                self.frames_out,
                self.bytes_out,
            )
            return None
        frame: Frame = self._flush(FrameKind.CONTINUATION)
        logger.debug(
            "Encoder finished with trailing partial line: %d bytes in, %d frames (%d bytes) out",
            self.bytes_in,
            self.frames_out,
            self.bytes_out,
        )
        return frame

    def _flush(self, kind: FrameKind) -> Frame:
        frame = Frame(data=bytes(self._buffer), kind=kind)
        self._buffer.clear()
        self.frames_out += 1
        self.bytes_out += frame.encoded_length
        logger.trace("Flushed %s frame #%d (%d bytes)", kind.name, self.frames_out, frame.length)
        return frame

    def _push(self, value: int) -> Frame | None:
        self.bytes_in += 1
        ws: int = 1 if is_space_byte(value) else 0
        if value != LF and len(self._buffer) + 1 + ws < self.capacity:
            self._buffer.append(value)
            return None

        if value != LF:
            self._buffer.append(value)
        return self._flush(FrameKind.TERMINAL if value == LF else FrameKind.CONTINUATION)


def iter_encode(
    chunks: Iterable[bytes],
    line_size: int = DEFAULT_LINE_SIZE,
    *,
    strict_input: bool = False,
) -> Iterator[bytes]:
    """Encode a stream of chunks, yielding one encoded line per frame.

    Args:
        chunks (Iterable[bytes]): Input chunks, in stream order.
        line_size (int): Capacity ``L`` of a frame's data field.
        strict_input (bool): Reject bytes outside the text-stream alphabet.

    Yields:
        bytes: Encoded lines, each ending in a line feed.
    """
    encoder = Encoder(line_size, strict_input=strict_input)
    for chunk in chunks:
        for frame in encoder.iter_feed(chunk):
            yield frame.encode()
    last: Frame | None = encoder.finish()
    if last is not None:
        yield last.encode()


def encode(data: bytes, line_size: int = DEFAULT_LINE_SIZE, *, strict_input: bool = False) -> bytes:
    """Encode ``data`` in one call; see `iter_encode`."""
    return b"".join(iter_encode((data,), line_size, strict_input=strict_input))
