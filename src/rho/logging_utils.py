"""Logging utilities for consistent diagnostics across rho modules."""

import logging
from typing import Optional


ROOT_LOGGER_NAME = "rho"


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Configure the package logger with a prefixed stderr handler.

    Safe to call more than once: the handler is only installed the first
    time, later calls only adjust the level.

    Args:
        level: Optional logging level (default: INFO).

    Returns:
        The configured ``rho`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[rho] %(levelname)s: %(message)s"))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the ``rho`` hierarchy.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger that propagates to the ``rho`` package logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
