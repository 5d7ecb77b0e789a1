"""Ordering between two comparable amounts.

Returned by ``Amount.compare()``. Amounts of different currencies are
incomparable, in which case ``compare()`` returns None instead of an Ordering.
"""

from enum import IntEnum


class Ordering(IntEnum):
    """Result of comparing two amounts of the same currency."""

    LESS = -1
    EQUAL = 0
    GREATER = 1
