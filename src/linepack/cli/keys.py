# topmark:header:start
#
#   project      : LinePack
#   file         : keys.py
#   file_relpath : src/linepack/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names, option spellings and context keys for LinePack.

Centralizing these values avoids string duplication between the Click
definitions, the commands reading ``ctx.obj``, and the tests.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the LinePack CLI (e.g., `linepack encode`)."""

    ENCODE: Final[str] = "encode"
    DECODE: Final[str] = "decode"
    CHECK: Final[str] = "check"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings for the LinePack CLI.

    Values include the leading `--`. Short options are defined alongside the
    Click options.
    """

    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    NO_COLOR: Final[str] = "--no-color"
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"
    STRICT_INPUT: Final[str] = "--strict-input"
    SKIP_MALFORMED: Final[str] = "--skip-malformed"


class CtxKey:
    """Keys of the shared ``ctx.obj`` dictionary."""

    CONSOLE: Final[str] = "console"
    VERBOSITY: Final[str] = "verbosity_level"
    CONFIG_PATHS: Final[str] = "config_paths"
    NO_CONFIG: Final[str] = "no_config"
