"""
Capability checks enforced at the call boundary.

Functions:
    is_orderable(value)                    - True if the value's type defines `<` or `>`
    require_orderable(sequence, operation) - Raise TypeError on the first unorderable element
"""

from collections.abc import Iterable

from typing_extensions import TypeIs

from .types import SupportsOrdering


def is_orderable(value: object) -> TypeIs[SupportsOrdering]:
    """
    True if the type of `value` defines its own `__lt__` or `__gt__`.

    One of the two is enough: Python answers `a > b` with `b < a` when
    `__gt__` is missing, and the reverse. Comparisons inherited from `object`
    only return NotImplemented, so they do not count.
    """
    cls = type(value)
    return cls.__lt__ is not object.__lt__ or cls.__gt__ is not object.__gt__


def require_orderable(sequence: Iterable[object] | None, operation: str) -> None:
    """
    Rejects sequences holding elements without a total order.

    Each distinct element type is inspected once.

    Raises:
        TypeError: If an element's type defines neither `<` nor `>`.
    """
    checked: set[type] = set()
    for element in sequence or ():
        cls = type(element)
        if cls in checked:
            continue
        if not is_orderable(element):
            raise TypeError(
                f"{operation} requires orderable elements, got {cls.__name__!r}"
            )
        checked.add(cls)


__all__ = [
    "is_orderable",
    "require_orderable",
]
