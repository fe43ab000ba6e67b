# topmark:header:start
#
#   project      : LinePack
#   file         : errors.py
#   file_relpath : src/linepack/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for LinePack CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Codec exceptions are translated with
    `cli_error_from`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from linepack.cli.exit_codes import ExitCode
from linepack.codec.errors import (
    ConfigError,
    InvalidInputError,
    LinepackError,
    MalformedFrameError,
)


class LinepackCliError(click.ClickException):
    """Base class for all LinePack CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LinepackUsageError(LinepackCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LinepackConfigError(LinepackCliError):
    """Error for configuration errors (bad line size, missing/invalid config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class LinepackDataError(LinepackCliError):
    """Error for malformed frames or input outside the packable alphabet."""

    exit_code = ExitCode.DATA_ERROR


class LinepackIOError(LinepackCliError):
    """Error for I/O errors reading/writing the byte streams."""

    exit_code = ExitCode.IO_ERROR


class LinepackUnexpectedError(LinepackCliError):
    """Error for codec failures with no more specific mapping (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def cli_error_from(exc: LinepackError) -> LinepackCliError:
    """Map a codec exception onto the CLI error carrying the matching exit code."""
    if isinstance(exc, ConfigError):
        return LinepackConfigError(str(exc))
    if isinstance(exc, (MalformedFrameError, InvalidInputError)):
        return LinepackDataError(str(exc))
    return LinepackUnexpectedError(str(exc))
