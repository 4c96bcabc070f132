"""Random agent that picks uniformly among empty cells."""

import numpy as np

from tictactoe_bot.board import empty_cells
from tictactoe_bot.exceptions import NoMovesLeftError
from tictactoe_bot.models import Board, Move


def find_random_move(board: Board, rng: np.random.Generator | None = None) -> Move:
    """
    Pick an empty cell uniformly at random.

    Args:
        board: Current board
        rng: Generator to draw from (a fresh unseeded one if None)

    Returns:
        One of the empty cells, each with equal probability

    Raises:
        NoMovesLeftError: If the board is full
    """
    moves = empty_cells(board)
    if not moves:
        raise NoMovesLeftError("No empty cells available")
    if rng is None:
        rng = np.random.default_rng()
    return moves[int(rng.integers(len(moves)))]


class RandomAgent:
    """Agent that selects an empty cell uniformly at random."""

    def __init__(
        self, seed: int | None = None, rng: np.random.Generator | None = None
    ) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility (optional)
            rng: Existing generator to draw from; takes precedence over seed
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def select_move(self, board: Board) -> Move:
        """Select a random empty cell."""
        return find_random_move(board, self.rng)
