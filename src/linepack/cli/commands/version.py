# topmark:header:start
#
#   project      : LinePack
#   file         : version.py
#   file_relpath : src/linepack/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinePack `version` command.

Prints the current LinePack version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from linepack.cli.cmd_common import get_console, get_effective_verbosity
from linepack.cli.keys import CliCmd
from linepack.constants import LINEPACK_VERSION


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of LinePack.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of LinePack."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("LinePack version:", bold=True, underline=True))
        console.print(f"    {console.styled(LINEPACK_VERSION, bold=True)}")
    else:
        console.print(console.styled(LINEPACK_VERSION, bold=True))
