"""Observability – logging."""

from mp_option.observability.logging import JsonLoggerFactory, configure_logging, get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
