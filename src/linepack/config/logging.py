# topmark:header:start
#
#   project      : LinePack
#   file         : logging.py
#   file_relpath : src/linepack/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack logging: a TRACE level for per-frame records, chalk colors, stderr only.

The codec logs every emitted or decoded frame at TRACE, stream summaries at
DEBUG and skipped lines at WARNING. Nothing is shown unless a level is
requested through ``LINEPACK_LOG_LEVEL`` (or `setup_logging`).

Log records always go to ``sys.stderr``: ``sys.stdout`` carries codec data.
Colors are applied only when stderr is a terminal and the caller did not turn
them off (``linepack --no-color``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from linepack.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class LinepackLogger(logging.Logger):
    """Logger with a `trace()` method for the TRACE level below DEBUG."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(LinepackLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Checked top-down; the first threshold the record reaches picks the style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Args:
        fmt (str): The `logging` format string.
        color (bool): Apply chalk colors; False yields plain text.
    """

    def __init__(self, fmt: str = LOG_FORMAT, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color: bool = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``LINEPACK_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``) and numbers.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(
    level: int | None = None,
    *,
    color: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Route all log records to a single colored handler on stderr.

    Args:
        level (int | None): Root level. None consults `resolve_env_log_level`
            and falls back to CRITICAL, which keeps the codec silent.
        color (bool | None): Force colors on or off. None colors only when the
            target stream is a terminal.
        stream (TextIO | None): Target stream; defaults to the current ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL
    target: TextIO = stream or sys.stderr
    if color is None:
        color = target.isatty()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Reconfiguring replaces the previous handler instead of stacking another
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(target)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> LinepackLogger:
    """Return the `LinepackLogger` registered under ``name``."""
    return cast("LinepackLogger", logging.getLogger(name))
