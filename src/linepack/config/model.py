# topmark:header:start
#
#   project      : LinePack
#   file         : model.py
#   file_relpath : src/linepack/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the CLI commands.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Scope:
    - *In scope*: data shapes, field defaults, merge policy
      (`MutableConfig.merge_with`), and freeze/thaw mechanics.
    - *Out of scope*: TOML I/O and discovery, see [`linepack.config.io`][].

Precedence (lowest to highest): built-in defaults, config file, CLI arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from linepack.codec.grammar import DEFAULT_LINE_SIZE, validate_line_size

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        line_size (int): Capacity ``L`` of a frame's data field.
        strict_input (bool): Reject encoder input outside the text-stream alphabet.
        skip_malformed (bool): Let the decoder skip malformed lines instead of failing.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    line_size: int = DEFAULT_LINE_SIZE
    strict_input: bool = False
    skip_malformed: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            line_size=self.line_size,
            strict_input=self.strict_input,
            skip_malformed=self.skip_malformed,
            config_files=list(self.config_files),
        )

    def validate(self) -> Config:
        """Return self if all fields are in range.

        Raises:
            ConfigError: If ``line_size`` is outside ``1..=250``.
        """
        validate_line_size(self.line_size)
        return self


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer"; `merge_with` only overrides fields
    the other layer sets, and `freeze` falls back to the defaults of `Config`.
    """

    line_size: int | None = None
    strict_input: bool | None = None
    skip_malformed: bool | None = None
    config_files: list[Path] = field(default_factory=list)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this builder (in place) and return self."""
        if other.line_size is not None:
            self.line_size = other.line_size
        if other.strict_input is not None:
            self.strict_input = other.strict_input
        if other.skip_malformed is not None:
            self.skip_malformed = other.skip_malformed
        self.config_files.extend(other.config_files)
        return self

    def freeze(self) -> Config:
        """Return a validated, immutable `Config` snapshot.

        Raises:
            ConfigError: If the merged values are out of range.
        """
        defaults = Config()
        frozen = replace(
            defaults,
            line_size=defaults.line_size if self.line_size is None else self.line_size,
            strict_input=defaults.strict_input
            if self.strict_input is None
            else self.strict_input,
            skip_malformed=defaults.skip_malformed
            if self.skip_malformed is None
            else self.skip_malformed,
            config_files=tuple(self.config_files),
        )
        return frozen.validate()
