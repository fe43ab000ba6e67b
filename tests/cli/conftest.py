# topmark:header:start
#
#   project      : LinePack
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LinePack in a controlled working directory.

Every CLI test runs from a fresh temporary directory so that config discovery
(``linepack.toml`` / ``pyproject.toml``) never picks up files from the
repository checkout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from linepack.cli.exit_codes import ExitCode
from linepack.cli.main import cli
from linepack.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run each CLI test in an isolated temporary directory.

    The CLI reconfigures root logging on every invocation (bound to the
    runner's temporary stderr); the test-suite logging setup is restored
    afterwards.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Yields:
        Path: The isolated working directory.
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    setup_logging(level=TRACE_LEVEL)


def run_cli(argv: Sequence[str], *, input_bytes: bytes | None = None) -> Result:
    """Invoke the CLI with optional binary STDIN.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["encode", "4"]``.
        input_bytes (bytes | None): Data fed to STDIN.

    Returns:
        Result: The `click.testing.Result`; use ``stdout_bytes`` for codec data
            and ``stderr`` for diagnostics.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), input=input_bytes)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
