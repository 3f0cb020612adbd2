# src/vast_validator/utils/config_loader.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).resolve().parent.parent / "settings.json"


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Loads the validator configuration from settings.json."""
    config_path = config_path or SETTINGS_PATH
    try:
        if not config_path.exists():
            logger.warning("Configuration file 'settings.json' not found at %s. Using empty config.", config_path)
            return {}

        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)

    except (OSError, ValueError) as e:
        logger.error("Failed to load %s: %s", config_path, e, exc_info=True)
        return {}


CONFIG = load_config()


def get_nested_config(key_path: str, default: Optional[Any] = None, config: Optional[Dict[str, Any]] = None) -> Any:
    """
    Safely retrieves a nested value from the configuration dictionary.

    Uses a dot as a separator, e.g., 'http.timeout'.

    Args:
        key_path (str): The dotted path to the configuration value.
        default (Any, optional): The default value to return if the key is not found.
        config (dict, optional): The dictionary to search. Defaults to the global CONFIG.

    Returns:
        Any: The configuration value or the provided default.
    """
    value: Any = CONFIG if config is None else config

    for key in key_path.split('.'):
        if isinstance(value, dict):
            value = value.get(key)
        else:
            # The current level is not a dictionary, so the path is invalid
            return default

    return value if value is not None else default
