"""Testing – helpers for consumers that test code built on Option."""
from mp_option.testing.strategies import nothing_strategy, option_strategy, some_strategy

__all__ = ["nothing_strategy", "option_strategy", "some_strategy"]
