"""
Generic algorithms over finite, index-addressable sequences.

Every operation is a single left-to-right pass with no state kept between
calls. "Not found" is reported with the -1 sentinel or a `Match(-1, False)`
result, never with an exception.

Search:      any_of, find_if, adjacent_find
Comparison:  equal, is_sorted
Mutation:    replace_if, remove_if (in place, first match only)
Merge:       merge (interleaves by position, not a sorted merge)
"""

from .types import Match

from .comparison import equal, is_sorted
from .constraints import is_orderable, require_orderable
from .merge import merge
from .mutation import remove_if, replace_if
from .predicates import (
    are_adjacent_chars,
    are_adjacent_ints,
    contains_letter,
    is_even,
)
from .search import adjacent_find, any_of, find_if

__all__ = [
    # Result type
    "Match",
    # Search
    "any_of",
    "find_if",
    "adjacent_find",
    # Comparison
    "equal",
    "is_sorted",
    # Mutation
    "replace_if",
    "remove_if",
    # Merge
    "merge",
    # Constraints
    "is_orderable",
    "require_orderable",
    # Predicates
    "is_even",
    "contains_letter",
    "are_adjacent_ints",
    "are_adjacent_chars",
]
