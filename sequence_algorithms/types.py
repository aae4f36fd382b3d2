"""
Type definitions for sequence algorithms.

This module contains the custom types used throughout the library,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple, Protocol, TypeVar

from typing_extensions import TypeAliasType

from .constants import NOT_FOUND

# Basic type variables for generic operations
T = TypeVar("T")


# Capabilities
class SupportsEquality(Protocol):
    """Elements that can be compared with `==`. Every Python object qualifies."""

    def __eq__(self, other: Any, /) -> bool: ...


class SupportsOrdering(Protocol):
    """
    Elements with a total order.

    `is_sorted` only calls `>`, which falls back to the reflected `<` when a
    type defines `__lt__` alone.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


TEq = TypeVar("TEq", bound=SupportsEquality)
TOrd = TypeVar("TOrd", bound=SupportsOrdering)


# Predicates
V = TypeVar("V")
Predicate = TypeAliasType("Predicate", Callable[[V], bool], type_params=(V,))
BinaryPredicate = TypeAliasType(
    "BinaryPredicate", Callable[[V, V], bool], type_params=(V,)
)


# Results
class Match(NamedTuple):
    """
    Outcome of a first-match scan.

    Unpacks and compares as a plain `(index, found)` tuple. When nothing
    matched, `index` is the `NOT_FOUND` sentinel and `found` is False.
    """

    index: int
    found: bool

    @classmethod
    def none(cls) -> Match:
        return cls(NOT_FOUND, False)

    @classmethod
    def at(cls, index: int) -> Match:
        return cls(index, True)


__all__ = [
    "T",
    "TEq",
    "TOrd",
    "SupportsEquality",
    "SupportsOrdering",
    "Predicate",
    "BinaryPredicate",
    "Match",
]
