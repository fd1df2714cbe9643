"""Sequence and batch-build constants."""

from typing import Final

# First value handed out for a never-seen sequence key
FIRST_SEQUENCE_VALUE: Final[int] = 0

# build_pair / create_pair size
PAIR_SIZE: Final[int] = 2

# Method suffix that marks a factory definition on a Factory subclass
FACTORY_METHOD_SUFFIX: Final[str] = "_factory"
