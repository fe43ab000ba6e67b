# topmark:header:start
#
#   project      : LinePack
#   file         : alphabet.py
#   file_relpath : src/linepack/codec/alphabet.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Byte classes of the text-stream alphabet.

A text stream is only guaranteed to read back what was written when it holds
printing characters, horizontal tabs and line feeds:

    data char      = printing char | HT ;  (* no CR or LF *)
    printing char  = graphic char | SP ;
    space char     = SP | HT ;

Classification is per byte (0x20-0x7E are the printing characters); no locale
or code point handling takes place.
"""

from __future__ import annotations

from typing import Final

LF: Final[int] = 0x0A
HT: Final[int] = 0x09
SP: Final[int] = 0x20

DATA_BYTES: Final[frozenset[int]] = frozenset(range(0x20, 0x7F)) | {HT}
SPACE_BYTES: Final[frozenset[int]] = frozenset({SP, HT})


def is_data_byte(value: int) -> bool:
    """Return True if ``value`` may appear inside a frame's data."""
    return value in DATA_BYTES


def is_space_byte(value: int) -> bool:
    """Return True for horizontal whitespace (SP or HT)."""
    return value in SPACE_BYTES


def find_invalid_byte(data: bytes) -> int | None:
    """Return the offset of the first byte that is neither data nor LF.

    Args:
        data (bytes): Raw input to scan.

    Returns:
        int | None: Offset of the first offending byte, or None if ``data`` is packable.
    """
    for offset, value in enumerate(data):
        if value != LF and value not in DATA_BYTES:
            return offset
    return None
