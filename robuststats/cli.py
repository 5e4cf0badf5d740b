"""Command-line interface for robuststats using Click command groups."""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from robuststats import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Log resampling details to stderr")
def cli(verbose: bool) -> None:
    """robuststats: robust estimation and bootstrap inference."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from robuststats.commands.ci import ci  # noqa: E402
from robuststats.commands.trimci import trimci  # noqa: E402
from robuststats.commands.trimcibt import trimcibt  # noqa: E402

cli.add_command(ci)
cli.add_command(trimci)
cli.add_command(trimcibt)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
