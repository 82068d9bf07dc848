"""
Board evaluation: score a finite set of board states with a pure function

Boards are opaque: the scoring function owns every rule about them. This module
only pairs each board with its value and picks the best one, using the
parallel mapper so the strategy can be swapped without changing results.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar, Union

from purefp.parallel import MapperConfig, MapStrategy, map_pure, materialize

BoardT = TypeVar("BoardT")
ValueT = TypeVar("ValueT")


@dataclass(frozen=True)
class BoardValue(Generic[BoardT, ValueT]):
    """Board state paired with the value the scoring function produced for it."""

    board: BoardT
    value: ValueT


def square(x: int) -> int:
    """Reference scoring function (module-level, so process pools can pickle it)."""
    return x * x


def evaluate_boards(
    boards: Iterable[BoardT],
    score: Callable[[BoardT], ValueT],
    strategy: Union[MapStrategy, str] = MapStrategy.SEQUENTIAL,
    config: Optional[MapperConfig] = None,
) -> list[BoardValue[BoardT, ValueT]]:
    """
    Score every board, preserving input order.

    Args:
        boards: Finite Sized collection of board states
        score: Pure scoring function
        strategy: SEQUENTIAL or PARALLEL
        config: Mapper config for the parallel strategy

    Returns:
        [BoardValue(board, score(board)) for board in boards]

    Raises:
        UnboundedInputError: if boards has no length
        MappingFailure: if score fails for any board (index of that board)
    """
    snapshot = materialize(boards)
    values = map_pure(score, snapshot, strategy=strategy, config=config)
    return [BoardValue(board, value) for board, value in zip(snapshot, values)]


def best_board(pairs: Sequence[BoardValue[BoardT, ValueT]]) -> BoardValue[BoardT, ValueT]:
    """
    Highest-valued pair; the earliest one wins ties.

    Raises:
        ValueError: if pairs is empty
    """
    if not pairs:
        raise ValueError("best_board requires at least one evaluated board")
    # max() keeps the first maximal element
    return max(pairs, key=lambda pair: pair.value)
