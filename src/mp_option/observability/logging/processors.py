"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

# Library loggers stay silent until the application configures logging.
logging.getLogger("mp_option").addHandler(logging.NullHandler())


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by the stdlib logger *name*.

    Output only appears once the application installs handlers, e.g. via
    :meth:`~mp_option.observability.logging.JsonLoggerFactory.configure`.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
