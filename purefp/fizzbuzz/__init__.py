"""FizzBuzz built from periodic option patterns."""

from purefp.fizzbuzz.pattern import (
    BUZZ,
    BUZZ_PATTERN,
    DEFAULT_COUNT,
    FIZZ,
    FIZZ_PATTERN,
    fizzbuzz,
    fizzbuzz_labels,
    fizzbuzz_lines,
    numerals,
)

__all__ = [
    "DEFAULT_COUNT",
    "FIZZ_PATTERN",
    "BUZZ_PATTERN",
    "FIZZ",
    "BUZZ",
    "fizzbuzz_labels",
    "numerals",
    "fizzbuzz",
    "fizzbuzz_lines",
]
