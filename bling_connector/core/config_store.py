"""Configuration loading and persistence for the connector."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import ClientSettings, ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"

# Environment variable -> settings field
_ENV_OVERRIDES: dict[str, str] = {
    "BLING_API_BASE_URL": "base_url",
    "BLING_TIMEOUT": "timeout_seconds",
    "BLING_MAX_RETRIES": "max_retries",
}


def get_base_dir() -> Path:
    """
    Get the base directory for storing configuration.

    The directory is determined by:
    1. Environment variable BLING_CONNECTOR_HOME if set
    2. Otherwise, ~/.bling_connector

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get("BLING_CONNECTOR_HOME")
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".bling_connector"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def settings_path() -> Path:
    """Return the path of the settings file."""
    return get_base_dir() / SETTINGS_FILE


def save_json(path: Path, data: dict) -> Path:
    """
    Save a dictionary as JSON.

    Args:
        path: Destination file
        data: Dictionary to save

    Returns:
        Path to the saved file
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.debug(f"Saved JSON to {path}")
        return path
    except OSError as e:
        raise ConfigurationError(f"Failed to save JSON to {path}: {e}")


def load_json(path: Path) -> dict:
    """
    Load a dictionary from a JSON file.

    Raises:
        ConfigurationError: If the file does not exist or JSON is invalid
    """
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to load JSON from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a JSON object in {path}")

    logger.debug(f"Loaded JSON from {path}")
    return data


def validate_settings(settings: ClientSettings) -> ClientSettings:
    """
    Check that settings can drive a repository.

    Returns:
        The same settings, for chaining

    Raises:
        ConfigurationError: If timeout_seconds <= 0 or max_retries < 1
    """
    if settings.timeout_seconds <= 0:
        raise ConfigurationError("timeout_seconds must be > 0")
    if settings.max_retries < 1:
        raise ConfigurationError("max_retries must be >= 1")
    return settings


def load_settings() -> ClientSettings:
    """
    Load connection settings.

    Defaults are overlaid by the settings file (if present), which is in
    turn overlaid by BLING_API_BASE_URL, BLING_TIMEOUT and BLING_MAX_RETRIES.

    Returns:
        The effective ClientSettings

    Raises:
        ConfigurationError: If the file or an environment value is invalid
    """
    data: dict[str, Any] = {}

    path = settings_path()
    if path.exists():
        data.update(load_json(path))

    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data[field_name] = value

    try:
        settings = ClientSettings.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid connector settings: {e}")

    return validate_settings(settings)


def load_saved_settings() -> ClientSettings:
    """
    Load the settings file alone, falling back to defaults if it is unusable.

    Environment overrides are not applied. Used when rewriting the file, so
    a broken settings.json can always be replaced.
    """
    path = settings_path()
    if not path.exists():
        return ClientSettings()

    try:
        return validate_settings(ClientSettings.from_dict(load_json(path)))
    except (ConfigurationError, TypeError, ValueError) as e:
        logger.warning(f"Ignoring invalid settings in {path}: {e}")
        return ClientSettings()


def save_settings(settings: ClientSettings) -> Path:
    """
    Save settings to the settings file.

    Returns:
        Path to the saved file

    Raises:
        ConfigurationError: If the settings are invalid
    """
    validate_settings(settings)
    return save_json(settings_path(), settings.to_dict())
