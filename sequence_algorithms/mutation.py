"""
In-place conditional replacement and removal.

Both operations touch only the first element satisfying the predicate and
leave the sequence untouched when nothing matches. Callers sharing a
sequence between threads must serialize access themselves.
"""

import logging
from collections.abc import MutableSequence

from .types import Match, Predicate, T

from .search import find_if

logger = logging.getLogger(__name__)


def replace_if(
    sequence: MutableSequence[T] | None, replacement: T, predicate: Predicate[T]
) -> Match:
    """
    Overwrites the first element satisfying `predicate` with `replacement`.

    Args:
        sequence: Mutable sequence, modified in place.
        replacement: Value written at the matching position.
        predicate: Unary test applied to each element in order.

    Returns:
        `Match(index, True)` for the replaced position, `Match(-1, False)` if
        nothing matched.
    """
    if sequence is None:
        return Match.none()

    match = find_if(sequence, predicate)
    if match.found:
        sequence[match.index] = replacement
        logger.debug(f"Replaced index {match.index} with {replacement!r}")
    return match


def remove_if(
    sequence: MutableSequence[T] | None, predicate: Predicate[T]
) -> Match:
    """
    Deletes the first element satisfying `predicate`.

    Later elements shift one position left, so the sequence shrinks by exactly
    one and equals `sequence[:i] + sequence[i + 1:]`. Every index, including
    the first and the last, is removed the same way.

    Returns:
        `Match(i, True)` with the original index of the removed element, or
        `Match(-1, False)` if nothing matched.
    """
    if sequence is None:
        return Match.none()

    match = find_if(sequence, predicate)
    if match.found:
        del sequence[match.index]
        logger.debug(
            f"Removed index {match.index}, {len(sequence)} elements remain"
        )
    return match


__all__ = [
    "replace_if",
    "remove_if",
]
