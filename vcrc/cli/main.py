"""VCRC command-line interface.

Entry point for the ``vcrc`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console

from vcrc import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """VCRC: Vapor-Compression Refrigeration Cycles.

    Solve single- and two-stage refrigeration cycles and break down their
    losses by entropy analysis.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-command groups
from vcrc.cli.cycle_cmd import cycle  # noqa: E402
from vcrc.cli.info_cmd import info  # noqa: E402

cli.add_command(cycle)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
