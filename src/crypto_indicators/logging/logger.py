"""Logging setup for the server process."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "crypto_indicators"
CONSOLE_HANDLER = f"{LOGGER_NAME}.stderr"
FILE_HANDLER = f"{LOGGER_NAME}.file"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _named(handler: logging.Handler, name: str, formatter: logging.Formatter) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(formatter)
    return handler


def setup_logger(log_level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure and return the package logger.

    Records go to stderr, plus `log_file` when set; stdout carries the MCP
    stdio transport and must stay clean. Calling again replaces the handlers
    installed here and leaves any other handler on the logger alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_named(logging.StreamHandler(sys.stderr), CONSOLE_HANDLER, formatter))
    if log_file:
        logger.addHandler(_named(logging.FileHandler(log_file), FILE_HANDLER, formatter))
    return logger
