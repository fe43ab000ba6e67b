# topmark:header:start
#
#   project      : LinePack
#   file         : main.py
#   file_relpath : src/linepack/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack Click CLI: group-level options plus the codec subcommands.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console, verbosity and config discovery settings from
there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linepack.cli.commands.check import check_command
from linepack.cli.commands.decode import decode_command
from linepack.cli.commands.encode import encode_command
from linepack.cli.commands.version import version_command
from linepack.cli.console import ClickConsole
from linepack.cli.keys import CtxKey
from linepack.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from linepack.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from linepack.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config discovery) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[Path, ...]): Explicit config files from ``--config``.
        no_config (bool): Whether ``--no-config`` disables config discovery.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj[CtxKey.VERBOSITY] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    setup_logging(level=resolve_env_log_level(), color=False if no_color else None)

    ctx.obj[CtxKey.CONFIG_PATHS] = config_paths
    ctx.obj[CtxKey.NO_CONFIG] = no_config

    ctx.color = False if no_color else None
    ctx.obj[CtxKey.CONSOLE] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LinePack: pack byte streams into text-stream-safe lines and back.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the LinePack CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'linepack encode [L] < text > packed' to pack a stream.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(encode_command)

cli.add_command(decode_command)

cli.add_command(check_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
