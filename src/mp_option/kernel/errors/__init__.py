"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── OptionError      (option.py)
    └── ConfigError      (mp_option.config.errors)
"""

from mp_option.kernel.errors.base import BaseError
from mp_option.kernel.errors.option import DEFAULT_UNWRAP_MESSAGE, OptionError

__all__ = ["DEFAULT_UNWRAP_MESSAGE", "BaseError", "OptionError"]
