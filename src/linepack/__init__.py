# topmark:header:start
#
#   project      : LinePack
#   file         : __init__.py
#   file_relpath : src/linepack/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack package.

LinePack packages a byte stream into bounded-length, self-delimiting lines that
survive storage in lossy text streams (trailing whitespace trimming, limited
line lengths), and unpacks such lines back into the exact original bytes. It
exposes both a CLI and a small typed API (see [`linepack.codec`][]).
"""

from __future__ import annotations
