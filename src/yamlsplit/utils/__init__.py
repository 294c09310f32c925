"""Utility modules for yamlsplit.

Provides:
- logger: get_logger and configure_logging
"""

from yamlsplit.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
