"""CLI entry point for declarations.

Invoked as::

    declarations [OPTIONS] [ARGS]...

or, during development::

    python -m declarations.cli.main

Every invocation prints the declarations walkthrough.  Positional
``ARGS`` are accepted and ignored, the same as options the command
does not define.

Options
-------
--info      Show version information instead of the walkthrough
--version   Show the version and exit
--verbose   Log debug output to stderr
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.table import Table

console = Console()

logger = logging.getLogger(__name__)


def _show_info(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print the version table and stop, before ARGS are looked at."""
    if not value or ctx.resilient_parsing:
        return
    from declarations import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]declarations[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)
    ctx.exit(0)


def _configure_logging(verbose: bool) -> None:
    """Send ``declarations`` debug records to stderr when asked to."""
    if not verbose:
        return
    logging.basicConfig(stream=sys.stderr)
    logging.getLogger("declarations").setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# CLI command
# ---------------------------------------------------------------------------


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(package_name="declarations")
@click.option(
    "--info",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_info,
    help="Show detailed version information and exit",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(verbose: bool, args: tuple[str, ...]) -> None:
    """Declarations walkthrough: variables, a record type and string templates.

    ARGS are accepted and ignored.
    """
    from declarations.scenario import scenario_lines

    _configure_logging(verbose)
    logger.debug("Running scenario with %d ignored argument(s)", len(args))
    for line in scenario_lines(args):
        click.echo(line)


if __name__ == "__main__":
    cli()
