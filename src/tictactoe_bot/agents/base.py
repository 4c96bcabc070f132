"""Base protocol for move selection agents."""

from typing import Protocol

from tictactoe_bot.models import Board, Move


class Agent(Protocol):
    """Protocol for Tic-Tac-Toe move selection agents."""

    def select_move(self, board: Board) -> Move:
        """
        Select a move on the given board.

        Args:
            board: Current board (at least one empty cell)

        Returns:
            The empty cell to place on
        """
        ...
