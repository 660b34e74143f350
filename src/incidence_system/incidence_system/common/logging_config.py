"""
Logging configuration for the application.
"""

import logging
import sys

APP_LOGGER_NAME = "incidence_system"


def configure_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger once per process.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The package logger
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
    )
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger nested under the package logger."""
    if name.startswith(APP_LOGGER_NAME):
        return logging.getLogger(name)
    suffix = name.rsplit(f"{APP_LOGGER_NAME}.", 1)[-1]
    return logging.getLogger(f"{APP_LOGGER_NAME}.{suffix}")
