# topmark:header:start
#
#   project      : LinePack
#   file         : encode.py
#   file_relpath : src/linepack/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack `encode` command.

Reads raw bytes from STDIN and writes frame lines to STDOUT. The optional
positional ``L`` selects the frame capacity (``1..=250``); when given and
accepted it is echoed on stderr as ``L = <n>``. An out-of-range or
non-numeric ``L`` is a configuration error (exit code 78).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from click.core import ParameterSource

from linepack.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    report,
    resolve_config,
)
from linepack.cli.errors import LinepackConfigError, cli_error_from
from linepack.cli.io import read_chunks, write_all
from linepack.cli.keys import CliCmd, CliOpt
from linepack.codec.encoder import Encoder
from linepack.codec.errors import LinepackError
from linepack.config.logging import get_logger
from linepack.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterator

    from linepack.config.logging import LinepackLogger
    from linepack.config.model import Config

logger: LinepackLogger = get_logger(__name__)


def parse_line_size_arg(raw: str | None) -> int | None:
    """Convert the positional ``L`` argument to an int (None when omitted).

    Raises:
        LinepackConfigError: If ``raw`` is not a decimal integer.
    """
    if raw is None:
        return None
    try:
        return int(raw.strip(), 10)
    except ValueError as exc:
        raise LinepackConfigError(f"line size must be an integer, got {raw!r}") from exc


def _encoded_lines(encoder: Encoder) -> Iterator[bytes]:
    for chunk in read_chunks():
        for frame in encoder.iter_feed(chunk):
            yield frame.encode()
    last = encoder.finish()
    if last is not None:
        yield last.encode()


@click.command(
    name=CliCmd.ENCODE,
    help="Pack STDIN into text-stream-safe frame lines on STDOUT.",
)
@click.argument("line_size", metavar="[L]", required=False, type=str)
@click.option(
    CliOpt.STRICT_INPUT,
    "strict_input",
    is_flag=True,
    default=False,
    help="Fail on input bytes that are not printing characters, TAB or LF.",
)
@click.pass_context
def encode_command(ctx: click.Context, line_size: str | None, strict_input: bool) -> None:
    """Pack STDIN into frame lines.

    Args:
        ctx (click.Context): The Click context carrying the shared state.
        line_size (str | None): Positional capacity ``L`` as typed by the user.
        strict_input (bool): Whether to reject bytes outside the text-stream alphabet.
    """
    console = get_console(ctx)
    requested: int | None = parse_line_size_arg(line_size)
    strict_source = ctx.get_parameter_source("strict_input")
    overrides = MutableConfig(
        line_size=requested,
        strict_input=None if strict_source is ParameterSource.DEFAULT else strict_input,
    )
    config: Config = resolve_config(ctx, overrides)

    if requested is not None and get_effective_verbosity(ctx) >= 0:
        console.diag(f"L = {config.line_size}")

    encoder = Encoder(config.line_size, strict_input=config.strict_input)
    try:
        write_all(_encoded_lines(encoder))
    except LinepackError as exc:
        logger.error("Encoding failed: %s", exc)
        raise cli_error_from(exc) from exc

    report(
        ctx,
        f"encoded {encoder.bytes_in} bytes into {encoder.frames_out} frames "
        f"({encoder.bytes_out} bytes, L = {encoder.capacity})",
    )
