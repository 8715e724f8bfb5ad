"""Stockroom init command - Write a project configuration file."""

import click


@click.command()
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing configuration file.",
)
def init(force: bool) -> None:
    """Write the default configuration to .stockroom/config.yaml.

    Edit the file to change the seed items, the currency symbol,
    negative-value validation or the activity log location.
    """
    from stockroom.commands._init_impl import run_init

    run_init(force=force)
