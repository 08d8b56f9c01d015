"""Guards — ``is_some`` / ``is_none`` predicates."""

from __future__ import annotations

from typing import TypeGuard, TypeVar

from mp_option.kernel.types.option import Nothing, Option, Some

T = TypeVar("T")


def is_some(option: Option[T]) -> TypeGuard[Some[T]]:
    """Return ``True`` if *option* holds a value."""
    return isinstance(option, Some)


def is_none(option: Option[T]) -> TypeGuard[Nothing]:
    """Return ``True`` if *option* is ``Nothing``."""
    return isinstance(option, Nothing)


__all__ = ["is_none", "is_some"]
