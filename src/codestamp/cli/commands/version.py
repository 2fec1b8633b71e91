# topmark:header:start
#
#   project      : CodeStamp
#   file         : version.py
#   file_relpath : src/codestamp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CodeStamp `version` command.

Prints the current CodeStamp version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from codestamp.cli.console import ClickConsole
from codestamp.constants import CODESTAMP_VERSION


@click.command(
    name="version",
    help="Show the current version of CodeStamp.",
)
def version_command() -> None:
    """Show the current version of CodeStamp."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj.get("console") or ClickConsole()
    console.print(CODESTAMP_VERSION)
