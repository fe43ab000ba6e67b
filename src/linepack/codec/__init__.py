# topmark:header:start
#
#   project      : LinePack
#   file         : __init__.py
#   file_relpath : src/linepack/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public codec API.

Encoding and decoding are pure, synchronous byte-stream transforms. Use the
one-shot helpers for in-memory data and the `Encoder` / `Decoder` classes (or
the ``iter_*`` generators) for streaming:

    ```python
    from linepack.codec import decode, encode

    packed = encode(b"hi\\n")          # b"02hi<\\n"
    assert decode(packed) == b"hi\\n"
    ```
"""

from __future__ import annotations

from linepack.codec.decoder import Decoder, decode, iter_decode
from linepack.codec.encoder import Encoder, encode, iter_encode
from linepack.codec.errors import (
    ConfigError,
    InvalidInputError,
    LinepackError,
    MalformedFrameError,
)
from linepack.codec.grammar import (
    DEFAULT_LINE_SIZE,
    MAX_LINE_SIZE,
    MIN_LINE_SIZE,
    Frame,
    FrameKind,
    is_text_stream_safe,
    parse_frame,
    validate_line_size,
)

__all__ = [
    "DEFAULT_LINE_SIZE",
    "MAX_LINE_SIZE",
    "MIN_LINE_SIZE",
    "ConfigError",
    "Decoder",
    "Encoder",
    "Frame",
    "FrameKind",
    "InvalidInputError",
    "LinepackError",
    "MalformedFrameError",
    "decode",
    "encode",
    "is_text_stream_safe",
    "iter_decode",
    "iter_encode",
    "parse_frame",
    "validate_line_size",
]
