"""Conversion from nullable values."""

from __future__ import annotations

from typing import TypeVar

from mp_option.kernel.types.option import NOTHING, Option, Some

T = TypeVar("T")


def from_nullable(value: T | None) -> Option[T]:
    """``Nothing`` for ``None``; ``Some(value)`` for anything else, falsy values included."""
    if value is None:
        return NOTHING
    return Some(value)


__all__ = ["from_nullable"]
