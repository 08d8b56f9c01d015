"""Kernel value types — public re-export surface.

Modules:
  option.py — Some, Nothing, NOTHING, Option, some, none
"""

from mp_option.kernel.types.option import NOTHING, Nothing, Option, Some, none, some

__all__ = ["NOTHING", "Nothing", "Option", "Some", "none", "some"]
