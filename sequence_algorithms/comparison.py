"""
Whole-sequence comparisons.

Functions:
    equal(first, second)  - Same length and pairwise equal elements
    is_sorted(sequence)   - Non-strict ascending order check
"""

from collections.abc import Sequence
from itertools import pairwise

from .types import TEq, TOrd

from .constraints import require_orderable


def equal(first: Sequence[TEq] | None, second: Sequence[TEq] | None) -> bool:
    """
    True if both sequences have the same length and equal elements in order.

    Elements are compared the way list elements are: identical objects are
    equal without calling `==`, which keeps `equal(s, s)` true for NaN.
    Two empty (or None) sequences are equal.
    """
    first = first or ()
    second = second or ()
    if len(first) != len(second):
        return False
    return all(a is b or a == b for a, b in zip(first, second))


def is_sorted(sequence: Sequence[TOrd] | None) -> bool:
    """
    True if no element is greater than its successor.

    Empty and single-element sequences are sorted.

    Raises:
        TypeError: If an element has no ordering.
    """
    require_orderable(sequence, "is_sorted")
    return not any(left > right for left, right in pairwise(sequence or ()))


__all__ = [
    "equal",
    "is_sorted",
]
