"""Implementation of the stockroom run command."""

from pathlib import Path
from typing import Any, Optional

import click

from stockroom.config import ConfigError, get_section, get_seed_items, load_config
from stockroom.logger import InventoryLogger
from stockroom.registry import ItemRegistry
from stockroom.session import SessionLoop


def run_session(log_dir: Optional[str] = None, no_log: bool = False) -> None:
    """Run the run command implementation.

    Args:
        log_dir: Activity log directory, overriding the config value.
        no_log: If True, no activity log is written.

    Raises:
        click.ClickException: If the configuration or the log directory
            cannot be used.
    """
    try:
        config = load_config()
        seed_items = get_seed_items(config)
    except ConfigError as e:
        raise click.ClickException(str(e))

    registry = ItemRegistry(seed_items=seed_items)
    logger = _create_logger(get_section(config, "logging"), log_dir, no_log)

    session = SessionLoop(
        registry,
        logger=logger,
        currency=str(get_section(config, "display").get("currency", "$")),
        reject_negative=bool(get_section(config, "validation").get("reject_negative", False)),
    )
    session.run()


def _create_logger(
    logging_config: dict[str, Any], log_dir: Optional[str], no_log: bool
) -> Optional[InventoryLogger]:
    """Build the session logger, or None when logging is off.

    Raises:
        click.ClickException: If the log directory cannot be created.
    """
    if no_log or not logging_config.get("enabled", True):
        return None

    directory = Path(log_dir) if log_dir else Path(str(logging_config.get("dir", ".stockroom/logs")))
    try:
        return InventoryLogger(log_dir=directory, echo=False)
    except OSError as e:
        raise click.ClickException(f"Cannot create log directory {directory}: {e}")
