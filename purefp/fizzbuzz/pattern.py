"""
FizzBuzz as overlaid periodic label patterns

fizz  = periodic([_, _, "fizz"])
buzz  = periodic([_, _, _, _, "buzz"])
label = zip_combine(fizz, buzz)            # position-wise monoid append
line  = overlay(label, "1", "2", "3", ...)  # number where no label fires

No modulo branching: divisibility falls out of the pattern periods.
"""

import itertools
from typing import Final, Iterator

from purefp.core.algebra import ABSENT, Label, overlay, present, zip_combine
from purefp.core.sequences import PeriodicSequence

DEFAULT_COUNT: Final[int] = 100

FIZZ_PATTERN: Final[tuple[Label, ...]] = (ABSENT, ABSENT, present("fizz"))
BUZZ_PATTERN: Final[tuple[Label, ...]] = (ABSENT, ABSENT, ABSENT, ABSENT, present("buzz"))

FIZZ: Final[PeriodicSequence[Label]] = PeriodicSequence(FIZZ_PATTERN)
BUZZ: Final[PeriodicSequence[Label]] = PeriodicSequence(BUZZ_PATTERN)


def fizzbuzz_labels() -> Iterator[Label]:
    """Infinite stream of combined labels, position 0 == number 1."""
    return zip_combine(FIZZ, BUZZ)


def numerals(start: int = 1) -> Iterator[str]:
    """Infinite stream of decimal numerals start, start + 1, ..."""
    return map(str, itertools.count(start))


def fizzbuzz(count: int) -> list[str]:
    """
    First `count` FizzBuzz lines.

    Raises:
        ValueError: if count is negative

    Examples:
        >>> fizzbuzz(5)
        ['1', '2', 'fizz', '4', 'buzz']
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return list(itertools.islice(overlay(fizzbuzz_labels(), numerals()), count))


def fizzbuzz_lines(count: int = DEFAULT_COUNT) -> list[str]:
    """First 100 lines by default, one element per output line."""
    return fizzbuzz(count)
