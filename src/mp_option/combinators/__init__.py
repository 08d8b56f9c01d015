"""Combinators – pure functions over :class:`~mp_option.kernel.types.Option`.

``map`` and ``filter`` shadow the builtins of the same name; import them
through the module (``from mp_option import combinators as opt``) when that
matters.
"""

from mp_option.combinators.conversion import from_nullable
from mp_option.combinators.guards import is_none, is_some
from mp_option.combinators.transformations import (
    and_,
    filter,
    flat_map,
    lift_a2,
    map,
    match_option,
    or_,
)
from mp_option.combinators.unwrapping import or_else, unwrap, unwrap_or

__all__ = [
    "and_",
    "filter",
    "flat_map",
    "from_nullable",
    "is_none",
    "is_some",
    "lift_a2",
    "map",
    "match_option",
    "or_",
    "or_else",
    "unwrap",
    "unwrap_or",
]
