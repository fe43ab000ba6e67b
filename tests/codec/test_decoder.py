# topmark:header:start
#
#   project      : LinePack
#   file         : test_decoder.py
#   file_relpath : tests/codec/test_decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the streaming decoder and its malformed-line policies."""

from __future__ import annotations

import logging

import pytest

from linepack.codec.decoder import Decoder, decode, iter_decode
from linepack.codec.errors import MalformedFrameError


def test_decode_terminal_frame() -> None:
    """A terminal frame restores its line feed."""
    assert decode(b"02hi<\n") == b"hi\n"


def test_decode_continuation_then_terminal() -> None:
    """Continuation frames join the next frame without a line feed."""
    assert decode(b"04abcd/\n02ef<\n") == b"abcdef\n"


def test_decode_empty_stream_and_empty_lines() -> None:
    """No frames decode to nothing; '00<' decodes to a bare line feed."""
    assert decode(b"") == b""
    assert decode(b"00<\n00<\n") == b"\n\n"


def test_decode_final_line_without_line_feed() -> None:
    """A last line missing its EOL is still decoded."""
    assert decode(b"02hi<\n03abc/") == b"hi\nabc"


def test_decode_keeps_whitespace_in_data() -> None:
    """Spaces and tabs inside the data are restored exactly."""
    assert decode(b"04abc /\n01d<\n") == b"abc d\n"
    assert decode(b"02\t <\n") == b"\t \n"


@pytest.mark.parametrize(
    "stream",
    [
        b"02hi<\n05hi<\n",
        b"02hi<\n02hi>\n",
        b"02hi<\nzz<\n",
        b"02hi<\n\n",
        b"02hi<\n02hi\n",
    ],
)
def test_malformed_second_line_raises_with_line_number(stream: bytes) -> None:
    """The first malformed line aborts decoding and reports its line number."""
    with pytest.raises(MalformedFrameError) as excinfo:
        decode(stream)
    assert excinfo.value.line_number == 2


def test_declared_length_beyond_line_end_is_not_partially_decoded() -> None:
    """An over-declared length yields an error, not a best-effort payload."""
    decoder = Decoder()
    with pytest.raises(MalformedFrameError):
        decoder.decode_line(b"09short<")
    assert decoder.bytes_out == 0
    assert decoder.frames_in == 0


def test_skip_malformed_resynchronises_on_next_line(caplog: pytest.LogCaptureFixture) -> None:
    """In skip mode bad lines are logged, recorded and skipped."""
    decoder = Decoder(skip_malformed=True)
    with caplog.at_level(logging.WARNING, logger="linepack"):
        out = decoder.feed(b"02hi<\nbad\n02ok<\n") + decoder.finish()

    assert out == b"hi\nok\n"
    assert [err.line_number for err in decoder.errors] == [2]
    assert decoder.frames_in == 2
    assert "Skipping line 2" in caplog.text


def test_over_long_line_without_line_feed_is_rejected() -> None:
    """A line longer than any valid frame fails before it is complete."""
    decoder = Decoder()
    with pytest.raises(MalformedFrameError) as excinfo:
        decoder.feed(b"x" * 300)
    assert "exceeds" in excinfo.value.reason
    assert excinfo.value.line_number == 1


def test_over_long_line_is_discarded_in_skip_mode() -> None:
    """In skip mode the rest of an over-long line is dropped up to its EOL."""
    decoder = Decoder(skip_malformed=True)
    assert decoder.feed(b"x" * 300) == b""
    assert decoder.feed(b"yyy\n02ok<\n") == b"ok\n"
    assert decoder.finish() == b""
    assert [err.line_number for err in decoder.errors] == [1]


def test_caller_can_resume_after_a_malformed_line() -> None:
    """A caught error leaves no stale bytes behind for the next line."""
    decoder = Decoder()
    with pytest.raises(MalformedFrameError):
        decoder.feed(b"zz<\n")
    assert decoder.feed(b"02ok<\n") == b"ok\n"
    assert decoder.finish() == b""


def test_iter_feed_yields_lines_before_the_malformed_one() -> None:
    """Payloads decoded ahead of a bad line are handed out before it raises."""
    decoder = Decoder()
    lines = decoder.iter_feed(b"02hi<\n02ok<\nzz<\n02no<\n")
    assert next(lines) == b"hi\n"
    assert next(lines) == b"ok\n"
    with pytest.raises(MalformedFrameError) as excinfo:
        next(lines)
    assert excinfo.value.line_number == 3
    assert decoder.frames_in == 2


def test_iter_decode_yields_valid_prefix_of_a_damaged_stream() -> None:
    decoded: list[bytes] = []
    with pytest.raises(MalformedFrameError):
        for part in iter_decode([b"04abcd/\n02ef<\n01\n"]):
            decoded.append(part)
    assert b"".join(decoded) == b"abcdef\n"


def test_counters() -> None:
    """Frame and byte counters follow the decoded stream."""
    decoder = Decoder()
    decoder.feed(b"04abcd/\n02ef<\n00<\n")
    assert decoder.frames_in == 3
    assert decoder.terminal_frames == 2
    assert decoder.bytes_out == len(b"abcdef\n\n")


def test_byte_at_a_time_feeding_matches_one_shot() -> None:
    """Splitting the input anywhere does not change the result."""
    stream = b"04abcd/\n02ef<\n00<\n05there/"
    chunks = [stream[i : i + 1] for i in range(len(stream))]
    assert b"".join(iter_decode(chunks)) == decode(stream) == b"abcdef\n\nthere"
