"""
mp_option – Option[T] container and combinators.

Import path convention::

    from mp_option import Some, NOTHING, some, none
    from mp_option import combinators as opt
    from mp_option.kernel.errors import OptionError

``map`` and ``filter`` are only exported from :mod:`mp_option.combinators`
so that ``from mp_option import *`` does not shadow the builtins.
"""

from mp_option.combinators import (
    and_,
    flat_map,
    from_nullable,
    is_none,
    is_some,
    lift_a2,
    match_option,
    or_,
    or_else,
    unwrap,
    unwrap_or,
)
from mp_option.kernel import NOTHING, BaseError, Nothing, Option, OptionError, Some, none, some

__version__ = "0.1.0"
__all__ = [
    "NOTHING",
    "BaseError",
    "Nothing",
    "Option",
    "OptionError",
    "Some",
    "__version__",
    "and_",
    "flat_map",
    "from_nullable",
    "is_none",
    "is_some",
    "lift_a2",
    "match_option",
    "none",
    "or_",
    "or_else",
    "some",
    "unwrap",
    "unwrap_or",
]
