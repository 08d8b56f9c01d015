"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import logging

from mp_option.config.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class OptionSettings(Settings):
    """Logging knobs, read from ``MP_OPTION_*`` environment variables."""

    _prefix: dataclasses.ClassVar[str] = "MP_OPTION"

    log_level: str = "WARNING"
    log_json: bool = True

    def _validate(self) -> None:
        if not isinstance(self.log_level, str):
            raise InvalidSettingValueError("log_level", self.log_level, "expected a level name")
        if not isinstance(self.log_json, bool):
            raise InvalidSettingValueError("log_json", self.log_json, "expected a boolean")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


__all__ = ["OptionSettings", "Settings"]
