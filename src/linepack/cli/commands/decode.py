# topmark:header:start
#
#   project      : LinePack
#   file         : decode.py
#   file_relpath : src/linepack/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack `decode` command.

Reads frame lines from STDIN and writes the reconstructed bytes to STDOUT.
A malformed line aborts with exit code 65 unless ``--skip-malformed`` is
given, in which case it is reported on stderr and skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from click.core import ParameterSource

from linepack.cli.cmd_common import get_console, report, resolve_config
from linepack.cli.errors import cli_error_from
from linepack.cli.io import read_chunks, write_all
from linepack.cli.keys import CliCmd, CliOpt
from linepack.codec.decoder import Decoder
from linepack.codec.errors import LinepackError
from linepack.config.logging import get_logger
from linepack.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterator

    from linepack.config.logging import LinepackLogger
    from linepack.config.model import Config

logger: LinepackLogger = get_logger(__name__)


def _decoded_chunks(decoder: Decoder) -> Iterator[bytes]:
    for chunk in read_chunks():
        yield from decoder.iter_feed(chunk)
    tail = decoder.finish()
    if tail:
        yield tail


@click.command(
    name=CliCmd.DECODE,
    help="Unpack frame lines from STDIN into the original bytes on STDOUT.",
)
@click.option(
    CliOpt.SKIP_MALFORMED,
    "skip_malformed",
    is_flag=True,
    default=False,
    help="Report and skip malformed lines instead of failing.",
)
@click.pass_context
def decode_command(ctx: click.Context, skip_malformed: bool) -> None:
    """Unpack frame lines.

    Args:
        ctx (click.Context): The Click context carrying the shared state.
        skip_malformed (bool): Whether malformed lines are skipped.
    """
    console = get_console(ctx)
    source = ctx.get_parameter_source("skip_malformed")
    overrides = MutableConfig(
        skip_malformed=None if source is ParameterSource.DEFAULT else skip_malformed,
    )
    config: Config = resolve_config(ctx, overrides)

    decoder = Decoder(skip_malformed=config.skip_malformed)
    try:
        write_all(_decoded_chunks(decoder))
    except LinepackError as exc:
        logger.error("Decoding failed: %s", exc)
        raise cli_error_from(exc) from exc

    for err in decoder.errors:
        console.warn(f"skipped {err}")

    report(
        ctx,
        f"decoded {decoder.frames_in} frames ({decoder.terminal_frames} terminal) "
        f"into {decoder.bytes_out} bytes",
    )
