"""
Demonstration of the sequence algorithms.

Runs every operation on fixed samples and prints the results as a table.

Usage:
    python main.py [--debug] [--no-color]
"""

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console

from sequence_algorithms import (
    adjacent_find,
    any_of,
    are_adjacent_chars,
    are_adjacent_ints,
    contains_letter,
    equal,
    find_if,
    is_even,
    is_sorted,
    merge,
    remove_if,
    replace_if,
)
from utils.display import Demonstration, display_demonstrations

logger = logging.getLogger(__name__)

# Default log level when --debug is not given
DEBUG = False

CONSECUTIVE_NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
NON_CONSECUTIVE_NUMBERS = (1, 8, 90, 12, 50, 66, 73, 28, 19, 110)
EVEN_NUMBERS = (2, 4, 6)
ODD_NUMBERS = (1, 3, 5, 7, 9)

CONSECUTIVE_LETTERS = tuple("abcdefghij")
NON_CONSECUTIVE_LETTERS = tuple("kbmhoswzct")

FRUITS_WITH_A = ("apple", "banana", "cherry")
FRUITS_WITHOUT_A = ("cucumber",)


def run_demonstrations() -> list[Demonstration]:
    """
    Calls every operation on the samples.

    The replace and remove calls share one list of even numbers and run in
    that order, so the removal sees the replaced value at index 0.
    """
    has_letter_a = contains_letter("a")

    demonstrations = [
        Demonstration("any_of is_even, even numbers", any_of(EVEN_NUMBERS, is_even)),
        Demonstration("any_of is_even, odd numbers", any_of(ODD_NUMBERS, is_even)),
        Demonstration(
            "any_of has letter a, fruits with a", any_of(FRUITS_WITH_A, has_letter_a)
        ),
        Demonstration(
            "any_of has letter a, fruits without a",
            any_of(FRUITS_WITHOUT_A, has_letter_a),
        ),
        Demonstration("find_if is_even, even numbers", find_if(EVEN_NUMBERS, is_even)),
        Demonstration("find_if is_even, odd numbers", find_if(ODD_NUMBERS, is_even)),
        Demonstration(
            "adjacent_find adjacent ints, consecutive numbers",
            adjacent_find(CONSECUTIVE_NUMBERS, are_adjacent_ints),
        ),
        Demonstration(
            "adjacent_find adjacent ints, non-consecutive numbers",
            adjacent_find(NON_CONSECUTIVE_NUMBERS, are_adjacent_ints),
        ),
        Demonstration(
            "adjacent_find adjacent chars, consecutive letters",
            adjacent_find(CONSECUTIVE_LETTERS, are_adjacent_chars),
        ),
        Demonstration(
            "adjacent_find adjacent chars, non-consecutive letters",
            adjacent_find(NON_CONSECUTIVE_LETTERS, are_adjacent_chars),
        ),
        Demonstration(
            "equal, consecutive and non-consecutive numbers",
            equal(CONSECUTIVE_NUMBERS, NON_CONSECUTIVE_NUMBERS),
        ),
        Demonstration(
            "equal, consecutive numbers with themselves",
            equal(CONSECUTIVE_NUMBERS, CONSECUTIVE_NUMBERS),
        ),
        Demonstration("is_sorted, consecutive numbers", is_sorted(CONSECUTIVE_NUMBERS)),
        Demonstration(
            "is_sorted, non-consecutive numbers", is_sorted(NON_CONSECUTIVE_NUMBERS)
        ),
    ]

    even_numbers = list(EVEN_NUMBERS)
    odd_numbers = list(ODD_NUMBERS)

    match = replace_if(even_numbers, 48, is_even)
    demonstrations.append(
        Demonstration(
            "replace_if 48 where is_even, even numbers", match, list(even_numbers)
        )
    )
    match = replace_if(odd_numbers, 5, is_even)
    demonstrations.append(
        Demonstration(
            "replace_if 5 where is_even, odd numbers", match, list(odd_numbers)
        )
    )
    match = remove_if(even_numbers, is_even)
    demonstrations.append(
        Demonstration("remove_if is_even, even numbers", match, list(even_numbers))
    )

    demonstrations.append(
        Demonstration(
            "merge, even and non-consecutive numbers",
            merge(EVEN_NUMBERS, NON_CONSECUTIVE_NUMBERS),
        )
    )

    logger.debug(f"Ran {len(demonstrations)} demonstrations")
    return demonstrations


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate the sequence algorithms")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug or DEBUG else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    demonstrations = run_demonstrations()
    display_demonstrations(demonstrations, Console(no_color=args.no_color))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
