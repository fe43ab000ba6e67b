# topmark:header:start
#
#   project      : LinePack
#   file         : __init__.py
#   file_relpath : src/linepack/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack configuration: model, TOML loading and logging setup.

Import the pieces from their modules:

- [`linepack.config.model`][]: `Config` / `MutableConfig`;
- [`linepack.config.io`][]: TOML discovery and loading;
- [`linepack.config.logging`][]: TRACE level and colored log output.
"""

from __future__ import annotations
