# topmark:header:start
#
#   project      : LinePack
#   file         : check.py
#   file_relpath : src/linepack/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack `check` command.

Validates an encoded stream on STDIN without writing the unpacked data. Prints
a one-line summary on STDOUT, or fails with exit code 65 on the first malformed
line.
"""

from __future__ import annotations

import click

from linepack.cli.cmd_common import get_console
from linepack.cli.errors import cli_error_from
from linepack.cli.io import read_chunks
from linepack.cli.keys import CliCmd
from linepack.codec.decoder import Decoder
from linepack.codec.errors import LinepackError


@click.command(
    name=CliCmd.CHECK,
    help="Validate frame lines on STDIN and print a summary.",
)
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """Validate an encoded stream."""
    console = get_console(ctx)
    decoder = Decoder()
    try:
        for chunk in read_chunks():
            decoder.feed(chunk)
        decoder.finish()
    except LinepackError as exc:
        raise cli_error_from(exc) from exc

    console.print(
        f"{decoder.frames_in} frames, {decoder.terminal_frames} terminal, "
        f"{decoder.bytes_out} bytes"
    )
