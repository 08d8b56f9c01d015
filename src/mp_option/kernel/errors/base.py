"""Root error class for the mp-option error hierarchy."""

from __future__ import annotations


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is a machine-readable slug, ``default_code`` unless overridden.
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
