# topmark:header:start
#
#   project      : LinePack
#   file         : grammar.py
#   file_relpath : src/linepack/codec/grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frame grammar shared by the encoder and the decoder.

Every encoded line has the shape::

    line   = length , { data char } , marker , EOL ;
    length = hex digit , hex digit ;        (* 00..fa, number of data chars *)
    marker = "<" | "/" ;

``<`` marks a *terminal* frame: the packed text had a line feed right after this
frame's data. ``/`` marks a *continuation* frame: the line break exists only to
keep the line within the supported length and the packed text continues on the
next line.

C99 (7.19.2) requires text streams to support lines of at least 254 characters
including the EOL. Two hex digits, the marker and the EOL take 4 of those, which
caps the data part at 250 bytes. Since every line ends in a non-space marker,
storage that trims trailing whitespace can never alter an encoded line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from linepack.codec.alphabet import LF, is_data_byte, is_space_byte
from linepack.codec.errors import ConfigError, MalformedFrameError

MIN_LINE_SIZE: Final[int] = 1
MAX_LINE_SIZE: Final[int] = 250
DEFAULT_LINE_SIZE: Final[int] = MAX_LINE_SIZE

# 2 hex digits + data + marker + EOL
FRAME_OVERHEAD: Final[int] = 4
MAX_ENCODED_LINE_LENGTH: Final[int] = MAX_LINE_SIZE + FRAME_OVERHEAD

_HEX_DIGITS: Final[frozenset[int]] = frozenset(b"0123456789abcdefABCDEF")


class FrameKind(Enum):
    """How a frame boundary relates to the packed text."""

    TERMINAL = "<"
    CONTINUATION = "/"

    @property
    def marker(self) -> bytes:
        """The single marker byte written after the frame's data."""
        return self.value.encode("ascii")

    @classmethod
    def from_marker(cls, value: int) -> FrameKind | None:
        """Return the kind for a marker byte value, or None if it is no marker."""
        for kind in cls:
            if kind.marker[0] == value:
                return kind
        return None


@dataclass(frozen=True)
class Frame:
    """One encoded line: a bounded run of data bytes plus its boundary kind.

    Attributes:
        data (bytes): The packed data bytes (never contains a line feed).
        kind (FrameKind): Whether the packed text had a line feed after ``data``.
    """

    data: bytes
    kind: FrameKind

    @property
    def length(self) -> int:
        """Number of data bytes in this frame."""
        return len(self.data)

    @property
    def is_terminal(self) -> bool:
        """True if this frame closes a line of the packed text."""
        return self.kind is FrameKind.TERMINAL

    @property
    def encoded_length(self) -> int:
        """Length of `encode()` in bytes, including the EOL."""
        return self.length + FRAME_OVERHEAD

    def encode(self) -> bytes:
        """Render the frame as one text-stream line (EOL included)."""
        return b"%02x%s%s\n" % (self.length, self.data, self.kind.marker)

    def payload(self) -> bytes:
        """Return the bytes this frame contributes to the unpacked stream."""
        if self.is_terminal:
            return self.data + b"\n"
        return self.data


def validate_line_size(value: object) -> int:
    """Return ``value`` as a line size, or raise if it is out of range.

    Args:
        value (object): Candidate capacity (must be an ``int``, not a ``bool``).

    Returns:
        int: The validated line size.

    Raises:
        ConfigError: If ``value`` is not an integer within ``1..=250``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"line size must be an integer, got {value!r}")
    if not MIN_LINE_SIZE <= value <= MAX_LINE_SIZE:
        raise ConfigError(
            f"line size must be within {MIN_LINE_SIZE}..{MAX_LINE_SIZE}, got {value}"
        )
    return value


def parse_frame(line: bytes) -> Frame:
    """Parse a single encoded line into a `Frame`.

    A single trailing line feed is accepted and ignored. Nothing is resynchronised
    or guessed: any deviation from the grammar raises.

    Args:
        line (bytes): One encoded line, with or without its trailing EOL.

    Returns:
        Frame: The parsed frame.

    Raises:
        MalformedFrameError: If the length field is not two hex digits, exceeds the
            maximum, fewer data bytes than declared precede the marker position, the
            marker is missing or invalid, or bytes follow the marker.
    """
    body: bytes = line[:-1] if line.endswith(b"\n") else line

    if LF in body:
        raise MalformedFrameError("embedded line feed", line=body)
    if len(body) < 2 or body[0] not in _HEX_DIGITS or body[1] not in _HEX_DIGITS:
        raise MalformedFrameError("invalid length field", line=body)

    length: int = int(body[:2], 16)
    if length > MAX_LINE_SIZE:
        raise MalformedFrameError(
            f"declared length {length} exceeds {MAX_LINE_SIZE}",
            line=body,
        )

    end: int = 2 + length
    if len(body) < end:
        raise MalformedFrameError(
            f"truncated data: declared {length}, found {len(body) - 2}",
            line=body,
        )
    if len(body) == end:
        raise MalformedFrameError("missing kind marker", line=body)

    kind: FrameKind | None = FrameKind.from_marker(body[end])
    if kind is None:
        raise MalformedFrameError(f"invalid kind marker {body[end:end + 1]!r}", line=body)
    if len(body) > end + 1:
        raise MalformedFrameError("unexpected bytes after kind marker", line=body)

    return Frame(data=body[2:end], kind=kind)


def is_text_stream_safe(line: bytes) -> bool:
    """Return True if ``line`` survives a conforming text stream unchanged.

    The line (EOL included) must be at most 254 bytes long, hold only data
    characters, and either be empty or end in a non-space character::

        line = [ { data char } , non-space char ] , EOL ;

    Args:
        line (bytes): A complete line including its trailing line feed.

    Returns:
        bool: Whether the line satisfies the text-stream line grammar.
    """
    if not line.endswith(b"\n") or len(line) > MAX_ENCODED_LINE_LENGTH:
        return False
    body: bytes = line[:-1]
    if not all(is_data_byte(b) for b in body):
        return False
    return not body or not is_space_byte(body[-1])
