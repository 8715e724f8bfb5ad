"""Stockroom CLI - In-memory inventory tracker."""

import click

from stockroom import __version__
from stockroom.commands.init import init
from stockroom.commands.run import run


@click.group()
@click.version_option(version=__version__, prog_name="stockroom")
def cli() -> None:
    """Stockroom - In-memory inventory tracker.

    List, add and update stock records from a text menu. Nothing is
    saved between runs.
    """
    pass


cli.add_command(init)
cli.add_command(run)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
