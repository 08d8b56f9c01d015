"""Observability – structured logging helpers."""
from mp_option.observability.logging.factory import JsonLoggerFactory
from mp_option.observability.logging.processors import get_logger
from mp_option.observability.logging.setup import configure_logging

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
