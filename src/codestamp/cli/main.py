# topmark:header:start
#
#   project      : CodeStamp
#   file         : main.py
#   file_relpath : src/codestamp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the `codestamp` CLI.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``console``: the [`ClickConsole`][codestamp.cli.console.ClickConsole] used for
  program output and error display;
- ``color_enabled``: whether program output may be colored;
- ``log_level``: the effective diagnostic log level.
"""

from __future__ import annotations

import click

from codestamp.cli.commands.render import render_command
from codestamp.cli.commands.version import version_command
from codestamp.cli.console import ClickConsole
from codestamp.cli.options import common_color_options, common_verbose_options, resolve_log_level
from codestamp.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, no_color: bool) -> None:
    """Initialize logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level = resolve_log_level(verbose)
    setup_logging(level=level)
    ctx.obj["log_level"] = level

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CodeStamp: render templates into stamped, formatted source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, no_color: bool) -> None:
    """Entry point for the CodeStamp CLI."""
    init_common_state(ctx, verbose=verbose, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'codestamp render OUTPUT TEMPLATE...' to generate a file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
