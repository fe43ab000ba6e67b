# topmark:header:start
#
#   project      : LinePack
#   file         : cmd_common.py
#   file_relpath : src/linepack/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers used by multiple CLI commands. They avoid
policy (messages, exit code rules) and only encapsulate plumbing such as
resolving the effective configuration and reporting summaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from linepack.cli.errors import LinepackConfigError
from linepack.cli.keys import CtxKey
from linepack.codec.errors import ConfigError
from linepack.config.io import load_config
from linepack.config.logging import get_logger

if TYPE_CHECKING:
    from linepack.cli.console_api import ConsoleLike
    from linepack.config.logging import LinepackLogger
    from linepack.config.model import Config, MutableConfig

logger: LinepackLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (-1 quiet, 0 default, >0 verbose)."""
    return int(ctx.obj.get(CtxKey.VERBOSITY, 0))


def resolve_config(ctx: click.Context, overrides: MutableConfig) -> Config:
    """Merge file configuration with CLI ``overrides`` and freeze the result.

    Config files named on the group (``--config``) replace discovery; with
    ``--no-config`` and no explicit paths, only defaults and overrides apply.

    Raises:
        LinepackConfigError: If a config file is invalid or a value is out of range.
    """
    paths: tuple[Path, ...] = ctx.obj.get(CtxKey.CONFIG_PATHS, ())
    discover: bool = not ctx.obj.get(CtxKey.NO_CONFIG, False)
    try:
        merged: MutableConfig = load_config(paths, discover=discover)
        config: Config = merged.merge_with(overrides).freeze()
    except ConfigError as exc:
        raise LinepackConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config


def report(ctx: click.Context, text: str) -> None:
    """Print a summary line on stderr when running verbosely."""
    if get_effective_verbosity(ctx) > 0:
        get_console(ctx).diag(text)
