# topmark:header:start
#
#   project      : LinePack
#   file         : errors.py
#   file_relpath : src/linepack/codec/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the LinePack codec.

These are plain library exceptions with no Click dependency. The CLI layer maps
them onto exit codes in [`linepack.cli.errors`][].
"""

from __future__ import annotations


class LinepackError(Exception):
    """Base class for all LinePack codec and configuration errors."""


class ConfigError(LinepackError, ValueError):
    """Invalid configuration value (e.g. a line size outside ``1..=250``)."""


class MalformedFrameError(LinepackError, ValueError):
    """An encoded line does not follow the frame grammar.

    Attributes:
        reason (str): Human readable description of the violation.
        line_number (int | None): 1-based line number in the encoded stream, when known.
        line (bytes): The offending line (without its line terminator).
    """

    def __init__(self, reason: str, *, line: bytes = b"", line_number: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.line_number = line_number
        super().__init__(self._render())

    def _render(self) -> str:
        where: str = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{where}malformed frame ({self.reason}): {self.line[:40]!r}"

    def at_line(self, line_number: int) -> MalformedFrameError:
        """Return a copy of this error that carries ``line_number``."""
        return MalformedFrameError(self.reason, line=self.line, line_number=line_number)


class InvalidInputError(LinepackError, ValueError):
    """Input byte outside the packable alphabet (strict input mode only).

    Attributes:
        offset (int): 0-based offset of the byte in the input stream.
        value (int): The offending byte value.
    """

    def __init__(self, offset: int, value: int) -> None:
        self.offset = offset
        self.value = value
        super().__init__(f"byte 0x{value:02x} at offset {offset} is not a printing character")
