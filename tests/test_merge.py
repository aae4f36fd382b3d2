"""Tests for sequence_algorithms/merge.py"""

from sequence_algorithms import is_sorted, merge


class TestMerge:
    def test_interleaves_then_appends_longer_tail(self):
        evens = [2, 4, 6]
        others = [1, 8, 90, 12, 50, 66, 73, 28, 19, 110]
        assert merge(evens, others) == [2, 1, 4, 8, 6, 90, 12, 50, 66, 73, 28, 19, 110]

    def test_first_longer(self):
        assert merge([1, 2, 3, 4], ["a"]) == [1, "a", 2, 3, 4]

    def test_same_length(self):
        assert merge("ace", "bdf") == list("abcdef")

    def test_empty_side_returns_other(self, sample_sequences):
        for sequence in sample_sequences:
            assert merge(sequence, []) == list(sequence)
            assert merge([], sequence) == list(sequence)
            assert merge(sequence, None) == list(sequence)
            assert merge(None, sequence) == list(sequence)

    def test_length_is_sum(self, sample_sequences):
        for first in sample_sequences:
            for second in sample_sequences:
                assert len(merge(first, second)) == len(first) + len(second)

    def test_returns_new_list(self):
        source = [1, 2, 3]
        merged = merge(source, [])
        assert merged == source
        assert merged is not source
        merged.append(4)
        assert source == [1, 2, 3]

    def test_inputs_untouched(self):
        first, second = [1, 3], [2, 4, 6]
        merge(first, second)
        assert first == [1, 3]
        assert second == [2, 4, 6]

    def test_not_a_sorted_merge(self):
        """Sorted inputs do not give a sorted output."""
        first, second = [1, 2, 3], [10, 20, 30]
        assert is_sorted(first) and is_sorted(second)
        merged = merge(first, second)
        assert merged == [1, 10, 2, 20, 3, 30]
        assert not is_sorted(merged)
