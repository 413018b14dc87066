"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the library.
"""

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any

from booklibrary.core.config import get_settings

# Base configuration that can be extended for different environments
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "booklibrary": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def build_logging_config(level: str = "INFO", log_file: str | None = None) -> dict[str, Any]:
    """
    Build a logging configuration for the given level and optional log file.

    Args:
        level: Log level name applied to handlers and the package logger
        log_file: Path of a rotating log file; console only when None

    Returns:
        A dictionary accepted by ``logging.config.dictConfig``
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["console"]["level"] = level
    config["loggers"]["booklibrary"]["level"] = level

    if log_file:
        config["handlers"]["file_handler"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 10,
            "encoding": "utf8",
        }
        config["loggers"]["booklibrary"]["handlers"].append("file_handler")

    return config


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Configure the logging system from explicit arguments or the settings.

    Args:
        level: Optional log level overriding ``LOG_LEVEL``
        log_file: Optional log file overriding ``LOG_FILE``
    """
    current_settings = get_settings()
    level = (level or current_settings.LOG_LEVEL).upper()
    log_file = log_file or current_settings.LOG_FILE

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_config(level, log_file))

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
