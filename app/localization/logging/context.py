"""Context binding for structured logging.

Binds language and catalog context to every log entry emitted while
catalogs are loaded, so loader diagnostics can be traced back to the
directory and file they came from.

Usage:
    from localization.logging import bind_localization_context

    with bind_localization_context(language="fr"):
        logger.info("loading_language")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_localization_context(
    language: Optional[str] = None,
    catalog: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind localization context to all logs within the context manager.

    Args:
        language: Language directory being processed.
        catalog: Catalog (file name without extension) being processed.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    if language is not None:
        context["language"] = language

    if catalog is not None:
        context["catalog"] = catalog

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
