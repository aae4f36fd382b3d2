"""Shared sample sequences for the sequence algorithm tests."""

import pytest

SAMPLE_SEQUENCES = (
    (),
    (7,),
    (2, 4, 6),
    (1, 3, 5, 7, 9),
    (1, 2, 3, 4, 5, 6, 7, 8, 9, 10),
    (1, 8, 90, 12, 50, 66, 73, 28, 19, 110),
    (5, 5, 5),
    tuple("abcdefghij"),
    tuple("kbmhoswzct"),
    ("apple", "banana", "cherry"),
    ("cucumber",),
)


@pytest.fixture
def sample_sequences() -> tuple[tuple, ...]:
    return SAMPLE_SEQUENCES
