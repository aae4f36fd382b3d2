"""
Ready-made predicates for the sequence algorithms.

Functions:
    is_even(n)                - True for even integers
    contains_letter(letter)   - Builds a case-insensitive containment test
    are_adjacent_ints(n, m)   - True if n and m differ by exactly one
    are_adjacent_chars(a, b)  - True if two characters have consecutive code points
"""

from .types import Predicate


def is_even(n: int) -> bool:
    return n % 2 == 0


def contains_letter(letter: str) -> Predicate[str]:
    """Returns a predicate testing whether a string contains `letter`, ignoring case."""
    needle = letter.lower()

    def predicate(word: str) -> bool:
        return needle in word.lower()

    return predicate


def are_adjacent_ints(n: int, m: int) -> bool:
    return abs(n - m) == 1


def are_adjacent_chars(a: str, b: str) -> bool:
    """True if `a` and `b` are single characters one code point apart, in either order."""
    return abs(ord(a) - ord(b)) == 1


__all__ = [
    "is_even",
    "contains_letter",
    "are_adjacent_ints",
    "are_adjacent_chars",
]
