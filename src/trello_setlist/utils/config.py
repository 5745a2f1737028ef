"""Configuration utilities for set list generation."""

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = 'trello-setlist.yaml'

DEFAULT_INPUT = 'exported.json'
DEFAULT_OUTPUT = 'set_list.md'
DEFAULT_LIST_NAME = 'Set List'
DEFAULT_TITLE = 'Bookends Set List'

DEFAULT_SETTINGS: dict[str, Any] = {
    'input': DEFAULT_INPUT,
    'output': DEFAULT_OUTPUT,
    'list_name': DEFAULT_LIST_NAME,
    'title': None,
    'include_date': True,
}

STRING_KEYS = ('input', 'output', 'list_name', 'title')


class ConfigError(Exception):
    """Configuration error."""

    pass


def get_config_path(start_dir: Path | None = None) -> Path:
    """Find the configuration file.

    Looks in the start directory, then up to three parent directories.

    Args:
        start_dir: Directory to start from. Defaults to the current directory.

    Returns:
        Path to the first config file found, or the start directory candidate
        if none exists.
    """
    current_dir = start_dir or Path.cwd()
    config_path = current_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        for parent in current_dir.parents[:3]:
            candidate = parent / CONFIG_FILE_NAME
            if candidate.exists():
                return candidate
    return config_path


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load and parse YAML configuration file.

    Args:
        config_path: Optional path to config file. Defaults to trello-setlist.yaml
            in the current directory or one of its parents.

    Returns:
        Configuration dictionary. Empty if no config file exists.

    Raises:
        ConfigError: If config file is invalid or cannot be read.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading config file: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError("Config must be a dictionary")
    return config


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate configuration structure.

    Args:
        config: Configuration dictionary to validate.

    Returns:
        List of validation error messages. Empty list if valid.
    """
    errors: list[str] = []

    if not isinstance(config, dict):
        errors.append("Config must be a dictionary")
        return errors

    for key in config:
        if key not in DEFAULT_SETTINGS:
            errors.append(f"Unknown config key '{key}'")

    for key in STRING_KEYS:
        value = config.get(key)
        if value is not None and not isinstance(value, str):
            errors.append(f"'{key}' must be a string")
        elif isinstance(value, str) and not value.strip():
            errors.append(f"'{key}' must not be empty")

    if 'include_date' in config and not isinstance(config['include_date'], bool):
        errors.append("'include_date' must be a boolean")

    return errors


def load_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Load config and merge it over the built-in defaults.

    Args:
        config_path: Optional path to config file.

    Returns:
        Settings dictionary with every key of DEFAULT_SETTINGS.

    Raises:
        ConfigError: If the config file cannot be loaded or fails validation.
    """
    config = load_config(config_path)
    errors = validate_config(config)
    if errors:
        raise ConfigError("Invalid configuration: " + '; '.join(errors))

    settings = dict(DEFAULT_SETTINGS)
    settings.update({k: v for k, v in config.items() if v is not None})
    return settings


def get_credentials() -> tuple[str, str]:
    """Get Trello credentials from environment.

    Returns:
        Tuple of (api_key, token).

    Raises:
        ValueError: If credentials are not found in environment.
    """
    api_key = os.getenv('TRELLO_API_KEY')
    token = os.getenv('TRELLO_TOKEN') or os.getenv('TRELLO_API_TOKEN')
    if not api_key or not token:
        raise ValueError(
            "TRELLO_API_KEY and TRELLO_TOKEN (or TRELLO_API_TOKEN) must be set in .env file"
        )
    return api_key, token
