"""Tests for the move decision engine."""

import numpy as np
import pytest
from tictactoe_bot.board import empty_cells, has_winner
from tictactoe_bot.config import BotConfig
from tictactoe_bot.engine import TicTacToeBot, decide_move
from tictactoe_bot.exceptions import InvalidBoardError
from tictactoe_bot.models import (
    EMPTY_BOARD,
    Marker,
    Move,
    MoveResult,
    Outcome,
    empty_board,
)


def copy_board(board):
    return [row[:] for row in board]


def changed_cells(before, after):
    return [
        (row, col)
        for row in range(3)
        for col in range(3)
        if before[row][col] != after[row][col]
    ]


class TestTerminalBoards:
    """Test calls on boards that are already finished."""

    def test_existing_winner(self) -> None:
        """Test that an already-won board is reported without a move."""
        # O holds column 1
        board = [["x", "o", "x"], ["x", "o", None], [None, "o", None]]
        before = copy_board(board)

        result = decide_move(board, "x", use_random=False)

        assert result.outcome == Outcome.O
        assert result.placement is None
        assert not result.moved
        assert result.board is board
        assert board == before

    def test_full_board_is_draw(self) -> None:
        """Test that a full board without a winner is a draw without a move."""
        board = [["x", "o", "x"], ["x", "o", "o"], ["o", "x", "x"]]
        before = copy_board(board)

        for use_random in (True, False):
            result = decide_move(board, Marker.O, use_random=use_random)
            assert result.outcome == Outcome.DRAW
            assert result.placement is None
            assert board == before

    def test_repeated_terminal_calls(self) -> None:
        """Test that terminal calls never change the board."""
        board = [["x", "x", "x"], ["o", "o", None], [None, None, None]]
        before = copy_board(board)

        for _ in range(3):
            result = decide_move(board, "o")
            assert result.outcome == Outcome.X
            assert result.placement is None

        assert board == before


class TestPerfectPlay:
    """Test decisions in minimax mode."""

    def test_empty_board_opening(self) -> None:
        """Test that the opening move is the first equally good cell."""
        board = empty_board()
        result = decide_move(board, "x", use_random=False)

        assert result.outcome == Outcome.CONTINUE
        assert result.placement == Move(0, 0)
        assert board[0][0] == Marker.X
        assert len(empty_cells(board)) == 8

    def test_block_and_set_up_win(self) -> None:
        """Test that the bot blocks the only cell that stops the opponent."""
        # . X O
        # X O X
        # X . .
        board = [[None, "x", "o"], ["x", "o", "x"], ["x", None, None]]
        result = decide_move(board, "o", use_random=False)

        assert result.placement == Move(0, 0)
        assert result.outcome == Outcome.CONTINUE
        assert board[0][0] == Marker.O

    def test_single_empty_cell_win(self) -> None:
        """Test that the last cell is taken and a win is reported with its placement."""
        # O X X
        # X O X
        # X O _
        board = [["o", "x", "x"], ["x", "o", "x"], ["x", "o", None]]
        result = decide_move(board, "o", use_random=False)

        assert result.placement == Move(2, 2)
        assert result.outcome == Outcome.O

    def test_single_empty_cell_draw(self) -> None:
        """Test that filling the last cell without a line is a draw with its placement."""
        # X O X
        # X O O
        # O X _
        board = [["x", "o", "x"], ["x", "o", "o"], ["o", "x", None]]
        result = decide_move(board, "o", use_random=False)

        assert result.placement == Move(2, 2)
        assert result.outcome == Outcome.DRAW

    def test_finishes_forced_win_fastest(self) -> None:
        """Test that an immediate win is taken over a slower forced win."""
        board = [["x", "o", "o"], [None, "x", None], [None, None, None]]
        result = decide_move(board, Marker.X, use_random=False)

        assert result.placement == Move(2, 2)
        assert result.outcome == Outcome.X

    def test_deterministic(self) -> None:
        """Test that the same board always gets the same move."""
        board = [["x", None, None], [None, "o", None], [None, None, "x"]]
        placements = {
            decide_move(copy_board(board), "o", use_random=False).placement
            for _ in range(5)
        }
        assert len(placements) == 1

    @pytest.mark.parametrize("opening", [Move(0, 0), Move(0, 1), Move(1, 1)])
    def test_never_loses_to_any_opponent(self, opening) -> None:
        """Test every opponent line of play after each kind of opening move."""
        board = empty_board()
        board[opening.row][opening.col] = Marker.X

        def explore(board):
            result = decide_move(board, Marker.O, use_random=False)
            assert result.outcome != Outcome.X
            if result.outcome != Outcome.CONTINUE:
                return

            for move in empty_cells(board):
                child = copy_board(board)
                child[move.row][move.col] = Marker.X
                assert has_winner(child) != Marker.X
                if empty_cells(child):
                    explore(child)

        explore(board)


class TestRandomPlay:
    """Test decisions in random mode."""

    def test_default_mode_is_random(self) -> None:
        """Test that random mode is used when no mode is given."""
        board = [["x", None, "o"], [None, "x", None], ["o", None, None]]
        seen = set()
        rng = np.random.default_rng(0)
        for _ in range(200):
            seen.add(decide_move(copy_board(board), "o", rng=rng).placement)

        assert seen == set(empty_cells(board))

    def test_places_exactly_one_marker(self) -> None:
        """Test that a move changes exactly one empty cell to the bot's marker."""
        board = [["x", None, None], [None, "o", None], [None, "x", None]]
        rng = np.random.default_rng(11)

        for _ in range(30):
            trial = copy_board(board)
            result = decide_move(trial, "o", rng=rng)

            changed = changed_cells(board, trial)
            assert changed == [(result.placement.row, result.placement.col)]
            assert board[result.placement.row][result.placement.col] is None
            assert trial[result.placement.row][result.placement.col] == Marker.O

    def test_seeded_generator_reproducible(self) -> None:
        """Test that equal seeds give equal moves."""
        first = decide_move(empty_board(), "x", rng=np.random.default_rng(5))
        second = decide_move(empty_board(), "x", rng=np.random.default_rng(5))
        assert first.placement == second.placement

    def test_random_win_carries_placement(self) -> None:
        """Test that a winning random move still reports where it was placed."""
        # X X _   (only cell left to the bot wins)
        # O O X
        # X O O
        board = [["x", "x", None], ["o", "o", "x"], ["x", "o", "o"]]
        result = decide_move(board, "x")

        assert result.outcome == Outcome.X
        assert result.placement == Move(0, 2)


class TestMarkers:
    """Test marker handling."""

    def test_invalid_marker(self) -> None:
        """Test that unknown markers are rejected."""
        with pytest.raises(ValueError):
            decide_move(empty_board(), "z")

    def test_empty_board_constant_is_immutable(self) -> None:
        """Test that the shared empty board cannot be mutated."""
        assert all(cell is None for row in EMPTY_BOARD for cell in row)
        with pytest.raises(TypeError):
            EMPTY_BOARD[0][0] = Marker.X

    def test_empty_board_constant_rejected_by_engine(self) -> None:
        """Test that the read-only template raises a clear error instead of crashing."""
        for use_random in (True, False):
            with pytest.raises(InvalidBoardError, match="read-only"):
                decide_move(EMPTY_BOARD, "x", use_random=use_random)

        assert all(cell is None for row in EMPTY_BOARD for cell in row)

    def test_tuple_rows_rejected_by_engine(self) -> None:
        """Test that a list of tuples is rejected before any search."""
        board = [(None, None, None), (None, "x", None), (None, None, None)]
        with pytest.raises(InvalidBoardError):
            decide_move(board, "o", use_random=False)

    def test_empty_board_factory_returns_fresh_boards(self) -> None:
        """Test that each empty board is independent."""
        first = empty_board()
        first[1][1] = Marker.X
        assert empty_board()[1][1] is None

    def test_continue_requires_placement(self) -> None:
        """Test that a continuing result must say where the move went."""
        with pytest.raises(ValueError, match="placement"):
            MoveResult(outcome=Outcome.CONTINUE, board=empty_board())


class TestTicTacToeBot:
    """Test the configured bot wrapper."""

    def test_defaults(self) -> None:
        """Test that a default bot plays O at random."""
        bot = TicTacToeBot()
        assert bot.marker == Marker.O
        assert bot.config.use_random
        assert bot.logger is None

    def test_perfect_strategy(self) -> None:
        """Test that a perfect bot blocks."""
        bot = TicTacToeBot(BotConfig(marker="x", strategy="perfect"))
        board = [["x", None, None], ["o", "o", None], [None, None, "x"]]

        result = bot.play(board)

        assert result.placement == Move(1, 2)

    def test_seeded_bot_reproducible(self) -> None:
        """Test that a seeded bot replays the same random moves after reset."""
        bot = TicTacToeBot(BotConfig(seed=123))
        first = [bot.play(empty_board()).placement for _ in range(5)]

        bot.reset()
        second = [bot.play(empty_board()).placement for _ in range(5)]

        assert first == second

    def test_validates_board(self) -> None:
        """Test that malformed boards are rejected before deciding."""
        bot = TicTacToeBot()
        with pytest.raises(InvalidBoardError):
            bot.play([[None, None], [None, None]])

    def test_rejects_empty_board_constant(self) -> None:
        """Test that the read-only template fails validation."""
        bot = TicTacToeBot()
        with pytest.raises(InvalidBoardError, match="3 rows"):
            bot.play(EMPTY_BOARD)

    def test_validation_can_be_disabled(self) -> None:
        """Test that validation is skipped when turned off."""
        bot = TicTacToeBot(BotConfig(validate_boards=False, strategy="perfect"))
        board = [["x", "x", "x"], ["o", "o", None], [None, None, None]]
        assert bot.play(board).outcome == Outcome.X

    def test_logs_decisions(self, tmp_path) -> None:
        """Test that a configured log file receives one event per call."""
        log_file = tmp_path / "logs" / "decisions.jsonl"
        bot = TicTacToeBot(BotConfig(log_file=str(log_file)))

        bot.play(empty_board())
        bot.play([["x", "x", "x"], ["o", "o", None], [None, None, None]])

        events = bot.logger.get_recent_events()
        assert [e.event_type.value for e in events] == ["decision", "terminal"]
