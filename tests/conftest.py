# topmark:header:start
#
#   project      : LinePack
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LinePack test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, so that TRACE output of the codec is captured on failures.
"""

from __future__ import annotations

import pytest

from linepack.config import logging
from linepack.constants import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def silence_linepack_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LinePack's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
