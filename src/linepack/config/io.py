# topmark:header:start
#
#   project      : LinePack
#   file         : io.py
#   file_relpath : src/linepack/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load LinePack configuration from TOML.

Sources, in discovery order (the first one found wins):
    1. explicit ``--config`` paths (all of them, merged left to right);
    2. ``linepack.toml`` in the working directory (top-level keys);
    3. the ``[tool.linepack]`` table of ``pyproject.toml`` in the working directory.

Parsing is done with `tomlkit`. Unknown keys are logged and ignored; a value of
the wrong type raises [`linepack.codec.errors.ConfigError`][].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linepack.codec.errors import ConfigError
from linepack.config.logging import get_logger
from linepack.config.model import MutableConfig
from linepack.constants import LINEPACK_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from linepack.config.logging import LinepackLogger

logger: LinepackLogger = get_logger(__name__)

KEY_LINE_SIZE = "line_size"
KEY_STRICT_INPUT = "strict_input"
KEY_SKIP_MALFORMED = "skip_malformed"

KNOWN_KEYS: frozenset[str] = frozenset({KEY_LINE_SIZE, KEY_STRICT_INPUT, KEY_SKIP_MALFORMED})


def read_toml_file(path: Path) -> dict[str, Any]:
    """Parse a TOML file into a plain ``dict``.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _get_int(table: Mapping[str, Any], key: str, source: Path) -> int | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{source}: '{key}' must be an integer, got {value!r}")
    return value


def _get_bool(table: Mapping[str, Any], key: str, source: Path) -> bool | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"{source}: '{key}' must be a boolean, got {value!r}")
    return value


def config_from_table(table: Mapping[str, Any], source: Path) -> MutableConfig:
    """Build a `MutableConfig` layer from a parsed LinePack table.

    Args:
        table (Mapping[str, Any]): The LinePack settings table.
        source (Path): File the table was read from (used in messages).

    Returns:
        MutableConfig: The config layer (unset keys stay None).

    Raises:
        ConfigError: If a known key has a value of the wrong type.
    """
    for key in sorted(set(table) - KNOWN_KEYS):
        logger.warning("%s: ignoring unknown config key '%s'", source, key)

    layer = MutableConfig(
        line_size=_get_int(table, KEY_LINE_SIZE, source),
        strict_input=_get_bool(table, KEY_STRICT_INPUT, source),
        skip_malformed=_get_bool(table, KEY_SKIP_MALFORMED, source),
        config_files=[source],
    )
    logger.debug("Loaded config layer from %s: %s", source, layer)
    return layer


def load_config_file(path: Path) -> MutableConfig:
    """Load one config file.

    ``pyproject.toml`` files contribute their ``[tool.linepack]`` table (or
    nothing); any other file is read as a LinePack table at top level.
    """
    data: dict[str, Any] = read_toml_file(path)
    if path.name == PYPROJECT_TOML_NAME:
        table: Any = data
        for part in PYPROJECT_TOOL_SECTION:
            table = table.get(part, {}) if isinstance(table, dict) else {}
        if not isinstance(table, dict):
            raise ConfigError(f"{path}: [tool.linepack] must be a table")
        data = table
    return config_from_table(data, path)


def discover_config_files(cwd: Path) -> list[Path]:
    """Return the implicit config file for ``cwd`` (at most one)."""
    candidate: Path = cwd / LINEPACK_TOML_NAME
    if candidate.is_file():
        return [candidate]
    pyproject: Path = cwd / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        return [pyproject]
    return []


def load_config(
    paths: Iterable[Path] = (),
    *,
    discover: bool = True,
    cwd: Path | None = None,
) -> MutableConfig:
    """Load and merge configuration layers.

    Args:
        paths (Iterable[Path]): Explicit config files; when given, discovery is skipped.
        discover (bool): Look for implicit config files in ``cwd``.
        cwd (Path | None): Directory used for discovery (defaults to the process CWD).

    Returns:
        MutableConfig: The merged file layers (CLI overrides are applied by the caller).

    Raises:
        ConfigError: If a file cannot be read or holds invalid values.
    """
    explicit: list[Path] = list(paths)
    sources: list[Path]
    if explicit:
        sources = explicit
    elif discover:
        sources = discover_config_files(cwd or Path.cwd())
    else:
        sources = []

    merged = MutableConfig()
    for source in sources:
        merged.merge_with(load_config_file(source))
    return merged
