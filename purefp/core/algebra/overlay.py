"""
Overlay: fill absent options from a fallback stream

from_option(fallback, Present(x)) == x
from_option(fallback, ABSENT)     == fallback

Polymorphic over the payload type: nothing here assumes text.
"""

from typing import Iterable, Iterator, TypeVar

from purefp.core.algebra.option import Absent, Option, Present

T = TypeVar("T")


def from_option(fallback: T, option: Option[T]) -> T:
    """
    Payload of the option, or the fallback when it is absent.

    Raises:
        TypeError: if option is not Present or Absent
    """
    if isinstance(option, Present):
        return option.value
    if isinstance(option, Absent):
        return fallback
    raise TypeError(f"option must be Present or Absent, got {type(option).__name__}")


def overlay(options: Iterable[Option[T]], fallbacks: Iterable[T]) -> Iterator[T]:
    """
    Lazily apply from_option position-wise.

    Stops at the shorter input; either side may be infinite.
    """
    for option, fallback in zip(options, fallbacks):
        yield from_option(fallback, option)
