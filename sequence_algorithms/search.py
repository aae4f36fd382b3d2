"""
First-match scans over sequences.

Functions:
    any_of(sequence, predicate)          - True if some element satisfies predicate
    find_if(sequence, predicate)         - Index of the first element satisfying predicate
    adjacent_find(sequence, predicate)   - Index of the first adjacent pair satisfying predicate

All scans run left to right and stop at the first match, so the predicate
is never called on the elements after it. A `None` sequence is scanned as
an empty one.
"""

from collections.abc import Sequence
from itertools import pairwise

from .constants import NOT_FOUND
from .types import BinaryPredicate, Match, Predicate, T


def any_of(sequence: Sequence[T] | None, predicate: Predicate[T]) -> bool:
    """True if at least one element satisfies `predicate`. False when empty."""
    return any(predicate(element) for element in sequence or ())


def find_if(sequence: Sequence[T] | None, predicate: Predicate[T]) -> Match:
    """
    Finds the first element satisfying `predicate`.

    Args:
        sequence: The sequence to scan.
        predicate: Unary test applied to each element in order.

    Returns:
        `Match(index, True)` for the first match, `Match(-1, False)` otherwise.
    """
    for index, element in enumerate(sequence or ()):
        if predicate(element):
            return Match.at(index)
    return Match.none()


def adjacent_find(
    sequence: Sequence[T] | None, predicate: BinaryPredicate[T]
) -> int:
    """
    Returns the smallest index `i` such that `predicate(sequence[i], sequence[i + 1])`.

    Returns `NOT_FOUND` (-1) if no pair matches or if the sequence holds fewer
    than two elements.
    """
    for index, (left, right) in enumerate(pairwise(sequence or ())):
        if predicate(left, right):
            return index
    return NOT_FOUND


__all__ = [
    "any_of",
    "find_if",
    "adjacent_find",
]
