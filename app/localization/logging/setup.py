"""Structlog configuration and logger setup.

Usage:
    from localization.logging import get_module_logger

    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - localization.configuration.Settings
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from localization.configuration import get_settings

PACKAGE_NAME = "localization"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        # Language and catalog being loaded
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Output goes through the standard library root logger, which is
    silenced under pytest.

    Args:
        log_level: Override for settings.LOG_LEVEL.
        is_production: Override for settings.is_production, selects JSON
            instead of console rendering.

    Returns:
        Logger bound to the package name.
    """
    if _is_test_environment():
        level = logging.CRITICAL + 1
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ]
    else:
        settings = get_settings()
        prod_mode = is_production if is_production is not None else settings.is_production
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
        processors = _build_processors(prod_mode)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger(PACKAGE_NAME).bind(package=PACKAGE_NAME)


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Returns:
        Logger with `package`, `component` (last dotted part) and
        `module_path` context.

    Example:
        # In localization/i18n/loader.py
        logger = get_module_logger()
        # context: {"package": "localization", "component": "loader",
        #           "module_path": "localization.i18n.loader"}
    """
    module_name = sys._getframe(1).f_globals.get("__name__", "unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
