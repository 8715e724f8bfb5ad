"""Stockroom run command - Start an interactive inventory session."""

import click


@click.command()
@click.option(
    "--log-dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory for the activity log (overrides logging.dir in config).",
)
@click.option(
    "--no-log",
    is_flag=True,
    help="Do not write an activity log for this session.",
)
def run(log_dir: str | None, no_log: bool) -> None:
    """Start the interactive inventory menu.

    The inventory lives in memory only and is discarded on exit.
    Seed items, currency and validation come from (in priority order):
    1. ./.stockroom/config.yaml (local project)
    2. ~/.config/stockroom/config.yaml (global)
    3. Built-in defaults
    """
    from stockroom.commands._run_impl import run_session

    run_session(log_dir=log_dir, no_log=no_log)
