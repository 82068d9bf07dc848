"""Board evaluation on top of the parallel mapper."""

from purefp.board.evaluation import BoardValue, best_board, evaluate_boards, square

__all__ = ["BoardValue", "evaluate_boards", "best_board", "square"]
