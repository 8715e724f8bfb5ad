"""Implementation of the stockroom init command."""

import click

from stockroom.config import get_local_config_dir, write_default_config


def run_init(force: bool = False) -> None:
    """Run the init command implementation.

    Args:
        force: If True, overwrite an existing config file.
    """
    config_path = get_local_config_dir() / "config.yaml"

    if write_default_config(config_path, force=force):
        click.echo(click.style(f"Created {config_path}", fg="green"))
        click.echo("\nNext steps:")
        click.echo("  1. Edit the seed items and display settings")
        click.echo("  2. Run 'stockroom run' to start a session")
    else:
        click.echo(f"{config_path} already exists (use --force to overwrite)")
