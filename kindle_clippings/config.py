"""Configuration management for kindle-clippings.

Settings live in a JSON file in the platform-specific configuration
directory. They only provide defaults for the command line; the parser
itself takes no configuration.
"""

import json
import logging
import os
import platform
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

APP_NAME = "kindle-clippings"

# Default configuration settings
DEFAULT_CONFIG = {
    "clippings_path": "My Clippings.txt",
    "output_format": "text",
    "log_level": "INFO",
}

OUTPUT_FORMATS = ["text", "json"]


def get_config_dir() -> Path:
    """Get the platform-specific configuration directory."""
    system = platform.system()
    home = Path.home()

    if system == "Darwin":  # macOS
        config_dir = home / "Library" / "Application Support" / APP_NAME
    elif system == "Windows":
        config_dir = Path(os.getenv("APPDATA", str(home / "AppData" / "Roaming"))) / APP_NAME
    else:  # Linux and others
        config_dir = home / ".config" / APP_NAME

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@lru_cache(maxsize=1)
def get_config_file_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration from file, falling back to the defaults.

    Missing keys are filled in from DEFAULT_CONFIG. A file that can't be read
    or decoded is logged and ignored.
    """
    config_file = get_config_file_path()
    config = DEFAULT_CONFIG.copy()

    if not config_file.exists():
        logger.debug("No configuration file at %s, using defaults", config_file)
        return config

    try:
        with open(config_file, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Error loading configuration from %s: %s", config_file, e)
        logger.info("Using default configuration instead")
        return config

    if not isinstance(data, dict):
        logger.error("Configuration in %s is not a JSON object, ignoring it", config_file)
        logger.info("Using default configuration instead")
        return config

    config.update(data)
    logger.debug("Loaded configuration from %s", config_file)
    return config


def save_config(config: dict[str, Any]) -> bool:
    """Save configuration to file.

    Args:
        config: Configuration dictionary to save

    Returns:
        bool: True if successful, False otherwise
    """
    config_file = get_config_file_path()
    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        logger.debug("Saved configuration to %s", config_file)
        return True
    except OSError as e:
        logger.error("Error saving configuration to %s: %s", config_file, e)
        return False


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value by key, or ``default`` if it is not set."""
    return load_config().get(key, default)


def set_config_value(key: str, value: Any) -> bool:
    """Set a configuration value and persist it.

    Returns:
        bool: True if successful, False otherwise
    """
    config = load_config()
    config[key] = value
    return save_config(config)


def list_config() -> dict[str, Any]:
    """Get all configuration values for display."""
    return dict(sorted(load_config().items()))
