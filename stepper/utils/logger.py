# -*- coding: utf-8 -*-
"""
Logging for the stepper package.

Every module logs through a child of the "md_stepper" logger. Console output
is always on; the rotating log file is opt-in through Config.LOG_TO_FILE.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "md_stepper"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """
    Configure the "md_stepper" logger and return it.

    The console handler filters at Config.LOG_LEVEL. When Config.LOG_TO_FILE
    is set, a RotatingFileHandler under Config.LOGS_DIR also records DEBUG
    output. Calling it again replaces the handlers instead of adding more.
    """
    global _logger

    # Import here to avoid circular imports
    from stepper.app.config import Config

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    if Config.LOG_TO_FILE:
        logger.addHandler(_file_handler(Config))
    logger.addHandler(_console_handler(Config.LOG_LEVEL))

    _logger = logger
    return logger


def _file_handler(config) -> RotatingFileHandler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.getLevelName(level))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get the "md_stepper" child logger for a module, configuring logging on first use.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
