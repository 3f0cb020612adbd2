# src/vast_validator/utils/configure_logging.py
import logging
import sys
from typing import Dict, Optional, Union

from vast_validator.utils.config_loader import get_nested_config

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

Level = Union[str, int]


def _resolve_level(level: Level, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        general_level: Level = 'INFO',
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None,
        stream=None,
) -> logging.Handler:
    """
    Configures the root logger and specific module loggers.

    The validator itself never installs handlers; applications that embed it
    call this once at start-up.

    Returns:
        logging.Handler: The handler that was attached to the root logger.
    """
    # 1. Create a stderr handler and the standard formatter.
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # 2. Configure the root logger.
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(general_level, logging.INFO))

    # 3. Clear any existing handlers and add the new one.
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 4. Configure levels for specific modules.
    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_resolve_level(level, logging.INFO))

    # 5. Muzzle noisy loggers by setting their level high.
    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_resolve_level(level, logging.CRITICAL))

    return handler


def configure_from_settings(stream=None) -> logging.Handler:
    """Applies the 'logging' section of settings.json."""
    return configure_logger(
        general_level=get_nested_config("logging.level", "WARNING"),
        module_specific_levels=get_nested_config("logging.module_levels", {}),
        silenced_loggers=get_nested_config("logging.silenced", {}),
        stream=stream,
    )
