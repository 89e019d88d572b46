"""
Configuration management for file-inventory.

Configuration is optional. Without a config file every setting falls back to
its default, so a bare ``file-inventory`` run behaves the same everywhere.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from file_inventory.writer import DEFAULT_OUTPUT_FILENAME

logger = logging.getLogger(__name__)

# Default locations to search for a config file
CONFIG_SEARCH_PATHS = [
    Path("file_inventory.yaml"),
    Path.home() / ".file_inventory" / "config.yaml",
]

DEFAULT_CONFIG: Dict[str, Any] = {
    "output_filename": DEFAULT_OUTPUT_FILENAME,
    "indent": 2,
    "log_level": "WARNING",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Specific path to config file. If None, searches default locations.

    Returns:
        Dictionary containing configuration, merged over the defaults.

    Raises:
        FileNotFoundError: If config_path is given but does not exist.
        ValueError: If the file does not contain a YAML mapping.
    """
    path_to_load = None

    if config_path:
        if config_path.exists():
            path_to_load = config_path
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                path_to_load = path
                break

    config = dict(DEFAULT_CONFIG)

    if not path_to_load:
        logger.debug("No config file found, using defaults")
        return config

    logger.info("Loading config from %s", path_to_load)

    with open(path_to_load, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {path_to_load}")

    config.update(loaded)
    return config


def get_output_filename(config: Dict[str, Any]) -> str:
    """
    Get the name of the output document from config.

    The name must be a bare file name; the document is always written into
    the scanned directory.
    """
    filename = config.get("output_filename", DEFAULT_OUTPUT_FILENAME)
    if not isinstance(filename, str) or not filename or Path(filename).name != filename:
        raise ValueError(f"Invalid 'output_filename' setting: {filename!r}")
    return filename


def get_indent(config: Dict[str, Any]) -> int:
    """Get the JSON indentation width from config."""
    indent = config.get("indent", DEFAULT_CONFIG["indent"])
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ValueError(f"Invalid 'indent' setting: {indent!r}")
    return indent


def get_log_level(config: Dict[str, Any]) -> str:
    """Get the log level name from config."""
    level = str(config.get("log_level", DEFAULT_CONFIG["log_level"])).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid 'log_level' setting: {level!r}")
    return level
