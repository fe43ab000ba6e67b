# topmark:header:start
#
#   project      : LinePack
#   file         : test_grammar.py
#   file_relpath : tests/codec/test_grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the frame grammar (rendering, strict parsing, line safety)."""

from __future__ import annotations

import pytest

from linepack.codec.alphabet import find_invalid_byte, is_data_byte, is_space_byte
from linepack.codec.errors import ConfigError, MalformedFrameError
from linepack.codec.grammar import (
    MAX_ENCODED_LINE_LENGTH,
    MAX_LINE_SIZE,
    Frame,
    FrameKind,
    is_text_stream_safe,
    parse_frame,
    validate_line_size,
)


def test_frame_encode_terminal() -> None:
    """A terminal frame renders as hex length, data, '<' and EOL."""
    frame = Frame(data=b"hi", kind=FrameKind.TERMINAL)
    assert frame.encode() == b"02hi<\n"
    assert frame.encoded_length == len(frame.encode()) == 6
    assert frame.payload() == b"hi\n"


def test_frame_encode_continuation_uses_lowercase_hex() -> None:
    """Lengths are written as two lowercase hex digits."""
    frame = Frame(data=b"x" * MAX_LINE_SIZE, kind=FrameKind.CONTINUATION)
    line: bytes = frame.encode()
    assert line.startswith(b"fa")
    assert line.endswith(b"/\n")
    assert len(line) == MAX_ENCODED_LINE_LENGTH
    assert frame.payload() == b"x" * MAX_LINE_SIZE


def test_empty_terminal_frame() -> None:
    """An empty line of the packed text becomes '00<'."""
    frame = Frame(data=b"", kind=FrameKind.TERMINAL)
    assert frame.encode() == b"00<\n"
    assert parse_frame(b"00<\n") == frame


def test_frame_kind_markers() -> None:
    """Marker bytes map back to their kinds; anything else is no marker."""
    assert FrameKind.from_marker(ord("<")) is FrameKind.TERMINAL
    assert FrameKind.from_marker(ord("/")) is FrameKind.CONTINUATION
    assert FrameKind.from_marker(ord(">")) is None


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (b"02hi<\n", Frame(b"hi", FrameKind.TERMINAL)),
        (b"02hi<", Frame(b"hi", FrameKind.TERMINAL)),
        (b"04ab c/\n", Frame(b"ab c", FrameKind.CONTINUATION)),
        (b"03a\tb/\n", Frame(b"a\tb", FrameKind.CONTINUATION)),
        (b"0A0123456789<\n", Frame(b"0123456789", FrameKind.TERMINAL)),
        (b"02<</\n", Frame(b"<<", FrameKind.CONTINUATION)),
    ],
)
def test_parse_frame_valid(line: bytes, expected: Frame) -> None:
    """Well-formed lines parse to the expected frame."""
    assert parse_frame(line) == expected


@pytest.mark.parametrize(
    ("line", "reason"),
    [
        (b"\n", "invalid length field"),
        (b"2hi<\n", "invalid length field"),
        (b"zzhi<\n", "invalid length field"),
        (b" 2hi<\n", "invalid length field"),
        (b"05hi<\n", "truncated data"),
        (b"02hi\n", "missing kind marker"),
        (b"02hi>\n", "invalid kind marker"),
        (b"02hi<x\n", "unexpected bytes after kind marker"),
        (b"02h\ni<\n", "embedded line feed"),
        (b"fb" + b"x" * 251 + b"<\n", "exceeds"),
    ],
)
def test_parse_frame_malformed(line: bytes, reason: str) -> None:
    """Grammar violations raise MalformedFrameError instead of a partial parse."""
    with pytest.raises(MalformedFrameError) as excinfo:
        parse_frame(line)
    assert reason in excinfo.value.reason
    assert excinfo.value.line_number is None


def test_malformed_frame_error_at_line() -> None:
    """at_line() attaches a line number to the message."""
    err = MalformedFrameError("missing kind marker", line=b"02hi").at_line(7)
    assert err.line_number == 7
    assert str(err).startswith("line 7: malformed frame (missing kind marker)")


@pytest.mark.parametrize("value", [1, 72, MAX_LINE_SIZE])
def test_validate_line_size_accepts_range(value: int) -> None:
    """Capacities 1..250 are accepted unchanged."""
    assert validate_line_size(value) == value


@pytest.mark.parametrize("value", [0, -1, MAX_LINE_SIZE + 1, True, "5", 5.0, None])
def test_validate_line_size_rejects(value: object) -> None:
    """Out-of-range or non-integer capacities raise ConfigError."""
    with pytest.raises(ConfigError):
        validate_line_size(value)


@pytest.mark.parametrize(
    ("line", "safe"),
    [
        (b"\n", True),
        (b"02hi<\n", True),
        (b"abc \n", False),
        (b"abc\t\n", False),
        (b"abc\r\n", False),
        (b"abc", False),
        (b"x" * 253 + b"\n", True),
        (b"x" * 254 + b"\n", False),
    ],
)
def test_is_text_stream_safe(line: bytes, safe: bool) -> None:
    """Lines must be short, printable, and must not end in whitespace."""
    assert is_text_stream_safe(line) is safe


def test_alphabet_classes() -> None:
    """SP/HT are data and whitespace; CR and LF are not data."""
    assert is_data_byte(ord(" ")) and is_space_byte(ord(" "))
    assert is_data_byte(ord("\t")) and is_space_byte(ord("\t"))
    assert is_data_byte(ord("~")) and not is_space_byte(ord("~"))
    assert not is_data_byte(ord("\n"))
    assert not is_data_byte(ord("\r"))
    assert not is_data_byte(0x7F)
    assert find_invalid_byte(b"ok\tfine\n") is None
    assert find_invalid_byte(b"ok\rno") == 2
