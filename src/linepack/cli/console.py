# topmark:header:start
#
#   project      : LinePack
#   file         : console.py
#   file_relpath : src/linepack/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI messages from internal logging. Commands that
stream codec data write bytes to the binary stdout directly and keep every
human-readable message on stderr (`ClickConsole.diag`, `warn`, `error`).
"""

from __future__ import annotations

from typing import Any, TextIO

import click

from linepack.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Text stream for standard output. Defaults to
            Click's resolution of ``sys.stdout`` at write time.
        err (TextIO | None): Text stream for error output. Defaults to
            Click's resolution of ``sys.stderr`` at write time.
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    @property
    def _color(self) -> bool | None:
        # None lets Click strip ANSI codes when the stream is not a terminal.
        return None if self.enable_color else False

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self._color)

    def diag(self, text: str, *, nl: bool = True) -> None:
        """Write an informational diagnostic to stderr."""
        click.echo(text, nl=nl, file=self.err, err=True, color=self._color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, err=True, color=self._color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self._color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
