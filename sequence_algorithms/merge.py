"""
Interleave-merge of two sequences.

Despite the name this is not the merge step of merge sort: elements are
alternated by position, not by value. Inputs need not be sorted and the
output is generally not sorted.
"""

from collections.abc import Sequence

from .types import T


def merge(first: Sequence[T] | None, second: Sequence[T] | None) -> list[T]:
    """
    Alternates `first[0], second[0], first[1], second[1], ...` then appends
    the remaining tail of the longer sequence.

    If either input is empty the other is returned as a new list. The result
    is always a fresh list holding `len(first) + len(second)` elements.

    Example:
        >>> merge([2, 4, 6], [1, 8, 90, 12])
        [2, 1, 4, 8, 6, 90, 12]
    """
    first = first or ()
    second = second or ()
    if not first:
        return list(second)
    if not second:
        return list(first)

    merged = [element for pair in zip(first, second) for element in pair]
    shortest = min(len(first), len(second))
    merged.extend(first[shortest:])
    merged.extend(second[shortest:])
    return merged


__all__ = [
    "merge",
]
