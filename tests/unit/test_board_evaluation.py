"""Tests for board evaluation over the mapper."""

from dataclasses import FrozenInstanceError

import pytest

from purefp.board import BoardValue, best_board, evaluate_boards, square
from purefp.parallel import MapperConfig, MappingFailure, MapStrategy, UnboundedInputError

# Opaque boards: tuples of cells, scored by a pure function of the board only
BOARDS = [(1, 0, 2), (2, 2, 0), (0, 0, 0), (1, 1, 1), (2, 0, 2)]


def occupied_cells(board):
    return sum(1 for cell in board if cell)


class RotatingBoards:
    """Sized collection whose iteration order shifts by one on every pass."""

    def __init__(self, boards):
        self.boards = list(boards)
        self.iterations = 0

    def __len__(self):
        return len(self.boards)

    def __iter__(self):
        shift = self.iterations % len(self.boards)
        self.iterations += 1
        return iter(self.boards[shift:] + self.boards[:shift])


class TestEvaluateBoards:
    def test_pairs_in_input_order(self):
        pairs = evaluate_boards(BOARDS, occupied_cells)
        assert [pair.board for pair in pairs] == BOARDS
        assert [pair.value for pair in pairs] == [2, 2, 0, 3, 2]

    @pytest.mark.parametrize("chunk_size", [None, 1, 2, 4])
    def test_strategies_agree(self, chunk_size):
        config = MapperConfig(max_workers=3, chunk_size=chunk_size)
        sequential = evaluate_boards(BOARDS, occupied_cells, strategy=MapStrategy.SEQUENTIAL)
        parallel = evaluate_boards(BOARDS, occupied_cells, strategy=MapStrategy.PARALLEL, config=config)
        assert parallel == sequential

    def test_square_reference_scorer(self):
        pairs = evaluate_boards(range(1, 6), square, strategy="parallel", config=MapperConfig(chunk_size=2))
        assert [pair.value for pair in pairs] == [1, 4, 9, 16, 25]

    def test_failure_reports_board_index(self):
        def reject_empty(board):
            if not any(board):
                raise ValueError("empty board")
            return occupied_cells(board)

        with pytest.raises(MappingFailure) as excinfo:
            evaluate_boards(BOARDS, reject_empty, strategy=MapStrategy.PARALLEL)
        assert excinfo.value.index == 2

    def test_unsized_boards_rejected(self):
        with pytest.raises(UnboundedInputError):
            evaluate_boards(iter(BOARDS), occupied_cells)

    @pytest.mark.parametrize("strategy", list(MapStrategy))
    def test_boards_iterated_once(self, strategy):
        boards = RotatingBoards([1, 2, 3, 4])
        pairs = evaluate_boards(boards, square, strategy=strategy, config=MapperConfig(chunk_size=1))
        assert boards.iterations == 1
        assert [pair.board for pair in pairs] == [1, 2, 3, 4]
        assert all(pair.value == pair.board * pair.board for pair in pairs)


class TestBoardValue:
    def test_structural_equality(self):
        assert BoardValue((1,), 3) == BoardValue((1,), 3)
        assert BoardValue((1,), 3) != BoardValue((1,), 4)

    def test_frozen(self):
        pair = BoardValue((1,), 3)
        with pytest.raises(FrozenInstanceError):
            pair.value = 4


class TestBestBoard:
    def test_highest_value(self):
        pairs = evaluate_boards(BOARDS, occupied_cells)
        assert best_board(pairs) == BoardValue((1, 1, 1), 3)

    def test_first_wins_ties(self):
        pairs = [BoardValue("a", 1), BoardValue("b", 5), BoardValue("c", 5)]
        assert best_board(pairs).board == "b"

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least one"):
            best_board([])
