# topmark:header:start
#
#   project      : LinePack
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest (fast suite) and pyright.
  - `property_test`: Hypothesis property tests only.
  - `lint`: Ruff lint.
  - `format_check`: Verify ruff formatting.

Common invocations:
  - `nox -s lint`
  - `nox -s qa`
"""

from __future__ import annotations

import nox

PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (without slow property tests) and pyright."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", session.python)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the hypothesis-driven property tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff lint."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting with ruff."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")
