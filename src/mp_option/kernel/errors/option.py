"""Option errors — forced extraction of an absent value."""

from __future__ import annotations

from mp_option.kernel.errors.base import BaseError

DEFAULT_UNWRAP_MESSAGE = "Attempted to unwrap a None value"


class OptionError(BaseError):
    """Raised by :func:`~mp_option.combinators.unwrap` on ``Nothing``."""

    default_code = "option_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else DEFAULT_UNWRAP_MESSAGE)


__all__ = ["DEFAULT_UNWRAP_MESSAGE", "OptionError"]
