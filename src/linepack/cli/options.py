# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/linepack/cli/options.py
#   project      : LinePack
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config discovery)
and their resolution logic, so the group and commands can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from linepack.cli.errors import LinepackUsageError
from linepack.cli.keys import CliOpt

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the -v/-q counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` (positive), ``-1`` when quiet, or ``0`` by default.

    Raises:
        LinepackUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LinepackUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``--verbose`` and ``--quiet`` options to a command."""
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        count=True,
        help="Increase verbosity (print byte/frame summaries on stderr).",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        count=True,
        help="Suppress diagnostics on stderr (errors are still shown).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    f = click.option(
        CliOpt.NO_COLOR,
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in diagnostics.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` (repeatable) and ``--no-config`` to a command."""
    f = click.option(
        CliOpt.CONFIG_PATHS,
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Read settings from this TOML file (repeatable; later files win).",
    )(f)
    f = click.option(
        CliOpt.NO_CONFIG,
        "no_config",
        is_flag=True,
        default=False,
        help="Do not discover linepack.toml / pyproject.toml in the working directory.",
    )(f)
    return f
