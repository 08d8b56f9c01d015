"""Unwrapping — getting the payload back out of an Option."""

from __future__ import annotations

from typing import Callable, TypeVar

from mp_option.combinators.guards import is_some
from mp_option.kernel.errors.option import OptionError
from mp_option.kernel.types.option import Option
from mp_option.observability.logging import get_logger

T = TypeVar("T")


def unwrap_or(option: Option[T], default: T) -> T:
    """Return the payload, or *default* when the option is ``Nothing``."""
    return option.value if is_some(option) else default


def unwrap(option: Option[T], message: str | None = None) -> T:
    """Return the payload or raise :class:`OptionError`.

    This is the only combinator that can fail. *message* overrides the
    default error text.

    Raises:
        OptionError: if *option* is ``Nothing``.
    """
    if is_some(option):
        return option.value
    error = OptionError(message)
    get_logger(__name__).debug("option.unwrap_failed", message=error.message)
    raise error


def or_else(option: Option[T], alternative: Callable[[], Option[T]]) -> Option[T]:
    """Return *option* if it holds a value, else call *alternative* once.

    Unlike :func:`~mp_option.combinators.or_`, the fallback is computed only
    when needed.
    """
    if is_some(option):
        return option
    return alternative()


__all__ = ["or_else", "unwrap", "unwrap_or"]
