"""Tests for sequence_algorithms/constraints.py"""

from dataclasses import dataclass

import pytest

from sequence_algorithms import is_orderable, require_orderable


class Plain:
    pass


class OnlyLess:
    def __init__(self, value: int):
        self.value = value

    def __lt__(self, other: "OnlyLess") -> bool:
        return self.value < other.value


class OnlyGreater:
    def __init__(self, value: int):
        self.value = value

    def __gt__(self, other: "OnlyGreater") -> bool:
        return self.value > other.value


@dataclass(frozen=True, order=True)
class Version:
    major: int
    minor: int


class TestIsOrderable:
    def test_builtin_scalars(self):
        for value in (1, 2.5, True, "text", b"bytes"):
            assert is_orderable(value)

    def test_builtin_containers(self):
        assert is_orderable((1, 2))
        assert is_orderable([1, 2])

    def test_none_and_plain_objects(self):
        assert not is_orderable(None)
        assert not is_orderable(object())
        assert not is_orderable(Plain())

    def test_ordered_dataclass(self):
        assert is_orderable(Version(1, 0))

    def test_one_comparison_is_enough(self):
        """Python reflects `>` onto `<` and back, so either method orders the type."""
        assert is_orderable(OnlyLess(1))
        assert is_orderable(OnlyGreater(1))


class TestRequireOrderable:
    def test_accepts_orderable_elements(self):
        require_orderable([3, 1, 2], "op")
        require_orderable([Version(1, 0), Version(0, 9)], "op")

    def test_accepts_empty_and_none(self):
        require_orderable([], "op")
        require_orderable(None, "op")

    def test_rejects_with_operation_and_type(self):
        message = r"merge_check requires orderable elements, got 'Plain'"
        with pytest.raises(TypeError, match=message):
            require_orderable([Plain()], "merge_check")

    def test_rejects_late_element(self):
        with pytest.raises(TypeError, match="NoneType"):
            require_orderable([1, 2, 3, None], "op")
