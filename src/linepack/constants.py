# topmark:header:start
#
#   project      : LinePack
#   file         : constants.py
#   file_relpath : src/linepack/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    LINEPACK_VERSION: str = get_version("linepack")
except PackageNotFoundError:  # running from a source checkout
    LINEPACK_VERSION = "0.0.0+unknown"

# Config discovery: a dedicated file wins over the pyproject.toml table.
LINEPACK_TOML_NAME: str = "linepack.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: tuple[str, str] = ("tool", "linepack")

# Environment variable consulted by `linepack.config.logging`.
LOG_LEVEL_ENV_VAR: str = "LINEPACK_LOG_LEVEL"

# Read size for stdin streaming; frames are still produced byte by byte.
STREAM_CHUNK_SIZE: int = 64 * 1024
