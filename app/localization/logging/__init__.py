"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_localization_context(): Context manager for language and catalog scoped logging
"""

from localization.logging.setup import (
    configure_logging,
    get_module_logger,
)
from localization.logging.context import bind_localization_context

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_localization_context",
]
