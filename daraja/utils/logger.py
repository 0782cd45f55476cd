"""
Logging Configuration
Centralized logging setup for the Daraja client
"""

import logging
import sys

ROOT_LOGGER = 'daraja'


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a daraja module

    Library loggers only carry a NullHandler; output goes wherever the host
    application configures logging, or through configure_logging().

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Send daraja log records to stdout

    For scripts that do not configure logging themselves. Records do not
    propagate to the root logger afterwards, so they are not printed twice.

    Args:
        level: Minimum level to emit

    Returns:
        The package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    if not any(isinstance(h, logging.StreamHandler) and h.stream is sys.stdout
               for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)

        console_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
