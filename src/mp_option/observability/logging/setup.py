"""Observability – apply :class:`OptionSettings` to the logging stack."""
from __future__ import annotations

from mp_option.config import EnvSettingsLoader, OptionSettings
from mp_option.observability.logging.factory import JsonLoggerFactory


def configure_logging(settings: OptionSettings | None = None) -> OptionSettings:
    """Configure structlog from *settings*, or from ``MP_OPTION_*`` env vars.

    Returns the settings that were applied.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(OptionSettings)
    JsonLoggerFactory.configure(level=settings.level, json=settings.log_json)
    return settings


__all__ = ["configure_logging"]
