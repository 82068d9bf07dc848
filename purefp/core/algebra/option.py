"""
Option: Tagged Optional Value & Append Monoid

An optional label is a two-case variant: Present(value) or Absent.
Options over a payload whose `+` is associative (str, tuple, list) form a
monoid under `combine`:

    combine(ABSENT, x)                  == x
    combine(x, ABSENT)                  == x
    combine(Present(a), Present(b))     == Present(a + b)

CRITICAL INVARIANTS:
1. combine associative: combine(combine(a, b), c) == combine(a, combine(b, c))
2. ABSENT is the two-sided identity: combine(ABSENT, ABSENT) == ABSENT
3. Left payload always precedes right payload in the concatenation
4. Operands are never mutated; every combine returns a value
"""

from dataclasses import dataclass
from functools import reduce
from typing import Final, Generic, Iterable, Iterator, Optional, TypeVar, Union

T = TypeVar("T")


# =============================================================================
# VARIANTS
# =============================================================================


@dataclass(frozen=True)
class Present(Generic[T]):
    """Option case carrying a payload."""

    value: T

    def __add__(self, other: "Option[T]") -> "Option[T]":
        return combine(self, other)


@dataclass(frozen=True)
class Absent:
    """Option case carrying nothing. Use the ABSENT singleton."""

    def __add__(self, other: "Option[T]") -> "Option[T]":
        return combine(self, other)

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final[Absent] = Absent()

Option = Union[Present[T], Absent]

# Text label used by the FizzBuzz patterns
Label = Union[Present[str], Absent]


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def present(value: T) -> Present[T]:
    """Wrap a payload as Present."""
    return Present(value)


def from_optional(value: Optional[T]) -> "Option[T]":
    """
    Convert a nullable value into an Option.

    Examples:
        >>> from_optional(None)
        ABSENT
        >>> from_optional("fizz")
        Present(value='fizz')
    """
    if value is None:
        return ABSENT
    return Present(value)


def is_present(option: "Option[T]") -> bool:
    return isinstance(option, Present)


def _check_option(option: object, name: str) -> None:
    if not isinstance(option, (Present, Absent)):
        raise TypeError(
            f"{name} must be Present or Absent, got {type(option).__name__}"
        )


# =============================================================================
# MONOID
# =============================================================================


def combine(left: "Option[T]", right: "Option[T]") -> "Option[T]":
    """
    Append two options.

    Args:
        left: Left operand
        right: Right operand

    Returns:
        right if left is absent, left if right is absent,
        otherwise Present(left.value + right.value)

    Raises:
        TypeError: if an operand is not Present or Absent

    Examples:
        >>> combine(present("a"), present("b"))
        Present(value='ab')
        >>> combine(ABSENT, present("b"))
        Present(value='b')
        >>> combine(ABSENT, ABSENT)
        ABSENT
    """
    _check_option(left, "left")
    _check_option(right, "right")

    if isinstance(left, Absent):
        return right
    if isinstance(right, Absent):
        return left
    return Present(left.value + right.value)


def mconcat(options: Iterable["Option[T]"]) -> "Option[T]":
    """Fold a finite iterable of options with combine, starting from ABSENT."""
    return reduce(combine, options, ABSENT)


def zip_combine(*sequences: Iterable["Option[T]"]) -> Iterator["Option[T]"]:
    """
    Combine several option streams position-wise.

    Lazy: pulls one element from every stream per output element and stops
    at the shortest stream, so infinite streams are fine.
    """
    for column in zip(*sequences):
        yield mconcat(column)
