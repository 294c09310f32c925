"""Minimal logging utilities for yamlsplit.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from yamlsplit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Splitting stream")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "yamlsplit." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("reader")
        >>> logger.name
        'yamlsplit.reader'
    """
    if not (name == "yamlsplit" or name.startswith("yamlsplit.")):
        name = f"yamlsplit.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    Used by the command-line front end; library callers configure logging
    themselves.

    Args:
        verbose: Log at DEBUG when True, WARNING otherwise
    """
    logger = logging.getLogger("yamlsplit")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
