# topmark:header:start
#
#   project      : LinePack
#   file         : __main__.py
#   file_relpath : src/linepack/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LinePack via ``python -m linepack``.

It delegates directly to :func:`linepack.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how LinePack is launched.

Examples:
    Pack a text file::

        python -m linepack encode 72 < notes.txt > notes.lp
"""

from __future__ import annotations

from linepack.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
