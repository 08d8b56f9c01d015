"""Transformations — combinators producing a new Option from existing ones.

Callbacks run synchronously, at most once, and their exceptions propagate
to the caller untouched.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from mp_option.combinators.guards import is_some
from mp_option.kernel.types.option import NOTHING, Option, Some

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def map(option: Option[T], fn: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Apply *fn* to the payload; ``Nothing`` passes through without calling it."""
    if is_some(option):
        return Some(fn(option.value))
    return NOTHING


def flat_map(option: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a function that itself returns an Option (no double wrapping)."""
    if is_some(option):
        return fn(option.value)
    return NOTHING


def filter(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:  # noqa: A001
    """Keep the Option only if its payload satisfies *predicate*.

    A passing ``Some`` is returned as the same instance, not a copy.
    """
    if is_some(option) and predicate(option.value):
        return option
    return NOTHING


def lift_a2(
    fn: Callable[[T, U], V],
    option1: Option[T],
    option2: Option[U],
) -> Option[V]:
    """Apply a binary function when both options hold a value."""
    if is_some(option1) and is_some(option2):
        return Some(fn(option1.value, option2.value))
    return NOTHING


def match_option(
    option: Option[T],
    on_some: Callable[[T], Option[U]],
    on_none: Callable[[], Option[U]],
) -> Option[U]:
    """Dispatch to exactly one of *on_some* / *on_none*."""
    if is_some(option):
        return on_some(option.value)
    return on_none()


def and_(option1: Option[T], option2: Option[U]) -> Option[tuple[T, U]]:
    """Pair both payloads, or ``Nothing`` if either side is absent."""
    if is_some(option1) and is_some(option2):
        return Some((option1.value, option2.value))
    return NOTHING


def or_(option1: Option[T], option2: Option[T]) -> Option[T]:
    """Return *option1* if it holds a value, else *option2* as-is.

    Both arguments are already evaluated; use :func:`or_else` to defer the
    fallback.
    """
    return option1 if is_some(option1) else option2


__all__ = ["and_", "filter", "flat_map", "lift_a2", "map", "match_option", "or_"]
