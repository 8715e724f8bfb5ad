"""Stockroom configuration management.

Handles global (~/.config/stockroom/) and local (.stockroom/) configuration.
"""

import copy
from pathlib import Path
from typing import Any, Optional

import yaml

from stockroom.registry import DEFAULT_SEED_ITEMS

# Default configuration values
DEFAULT_CONFIG = {
    "version": "0.1.0",
    "inventory": {
        "seed_items": [dict(seed) for seed in DEFAULT_SEED_ITEMS],
    },
    "display": {
        "currency": "$",
    },
    "validation": {
        "reject_negative": False,
    },
    "logging": {
        "enabled": True,
        "dir": ".stockroom/logs",
    },
}

SEED_FIELDS = ("name", "quantity", "unit_price")
SECTIONS = ("inventory", "display", "validation", "logging")


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


def get_global_config_dir() -> Path:
    """Get the global configuration directory path."""
    return Path.home() / ".config" / "stockroom"


def get_local_config_dir() -> Path:
    """Get the local configuration directory path (current project)."""
    return Path.cwd() / ".stockroom"


def write_default_config(config_path: Path, force: bool = False) -> bool:
    """Write default configuration to file.

    Args:
        config_path: Destination file
        force: Overwrite an existing file

    Returns:
        True if the file was written, False if it already existed
    """
    if config_path.exists() and not force:
        return False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
    return True


def load_config() -> dict[str, Any]:
    """Load merged configuration (global + local).

    Priority (highest first):
    1. Local project config (.stockroom/config.yaml)
    2. Global config (~/.config/stockroom/config.yaml)
    3. Default values

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigError: If a config file cannot be read, is not valid YAML,
            or a section is not a mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Load global config
    global_config = _read_config_file(get_global_config_dir() / "config.yaml")
    if global_config:
        config = _deep_merge(config, global_config)

    # Load local config (overrides global)
    local_config = _read_config_file(get_local_config_dir() / "config.yaml")
    if local_config:
        config = _deep_merge(config, local_config)

    for name in SECTIONS:
        get_section(config, name)

    return config


def get_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return one top-level section of a loaded config.

    Raises:
        ConfigError: If the section is not a mapping
    """
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(section).__name__}")
    return section


def _read_config_file(config_path: Path) -> Optional[dict[str, Any]]:
    """Read one YAML config file, or None if it does not exist."""
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with overriding values

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def get_seed_items(config: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract and check the seed items from a loaded config.

    Args:
        config: Merged configuration dictionary

    Returns:
        Seed items as dicts with name, quantity and unit_price

    Raises:
        ConfigError: If an entry is missing a field or has the wrong type
    """
    seeds = get_section(config, "inventory").get("seed_items") or []
    if not isinstance(seeds, list):
        raise ConfigError("inventory.seed_items must be a list")

    items = []
    for index, seed in enumerate(seeds):
        if not isinstance(seed, dict):
            raise ConfigError(f"inventory.seed_items[{index}] must be a mapping")
        missing = [field for field in SEED_FIELDS if field not in seed]
        if missing:
            raise ConfigError(
                f"inventory.seed_items[{index}] is missing: {', '.join(missing)}"
            )
        quantity = seed["quantity"]
        price = seed["unit_price"]
        # bool is an int subclass
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ConfigError(f"inventory.seed_items[{index}].quantity must be an integer")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ConfigError(f"inventory.seed_items[{index}].unit_price must be a number")
        items.append(
            {"name": str(seed["name"]), "quantity": quantity, "unit_price": float(price)}
        )

    return items
