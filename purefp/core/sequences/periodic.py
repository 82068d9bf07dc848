"""
PeriodicSequence: infinite, restartable repetition of a finite pattern

Element i of periodic(base) is base[i mod k], k = len(base).

CRITICAL INVARIANTS:
1. Base pattern is finite and non-empty (checked at construction)
2. Lazy: take(m) performs exactly m generation steps
3. Restartable: every iteration starts from position 0, independent of others
4. No __len__: the sequence is unbounded and must not be treated as Sized
"""

from itertools import islice
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class PeriodicSequence(Generic[T]):
    """
    Cyclic sequence over an immutable base pattern.

    Unlike itertools.cycle, the object itself is not an iterator:
    iter() hands out a fresh traversal every time.
    """

    __slots__ = ("_base",)

    def __init__(self, base: Iterable[T]):
        """
        Args:
            base: Finite pattern to repeat (materialized once as a tuple)

        Raises:
            ValueError: if the pattern is empty
        """
        pattern = tuple(base)
        if not pattern:
            raise ValueError("Periodic base pattern must be non-empty")
        self._base = pattern

    @property
    def base(self) -> tuple[T, ...]:
        return self._base

    @property
    def period(self) -> int:
        return len(self._base)

    def element_at(self, index: int) -> T:
        """
        Element at a 0-based position.

        Raises:
            IndexError: if index is negative
        """
        if index < 0:
            raise IndexError(f"Periodic index must be non-negative, got {index}")
        return self._base[index % len(self._base)]

    def __iter__(self) -> Iterator[T]:
        index = 0
        while True:
            yield self.element_at(index)
            index += 1

    def take(self, count: int) -> list[T]:
        """
        First `count` elements.

        Raises:
            ValueError: if count is negative
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return list(islice(iter(self), count))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeriodicSequence):
            return NotImplemented
        return self._base == other._base

    def __hash__(self) -> int:
        return hash(("PeriodicSequence", self._base))

    def __repr__(self) -> str:
        return f"PeriodicSequence({list(self._base)!r})"


def periodic(base: Iterable[T]) -> PeriodicSequence[T]:
    """Build the infinite repetition of `base`."""
    return PeriodicSequence(base)
