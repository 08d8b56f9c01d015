"""Kernel – the Option type and its error hierarchy."""

from mp_option.kernel.errors import BaseError, OptionError
from mp_option.kernel.types import NOTHING, Nothing, Option, Some, none, some

__all__ = ["NOTHING", "BaseError", "Nothing", "Option", "OptionError", "Some", "none", "some"]
