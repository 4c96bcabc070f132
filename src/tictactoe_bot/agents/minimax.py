"""
Minimax search for perfect play.

Terminal scores are adjusted by search depth so that faster wins and slower
losses are preferred. The search places and removes markers on the board it
is given instead of copying it; every trial placement is undone before a call
returns. There is no pruning or caching: the full tree from an empty board is
bounded by 9! leaves.
"""

from tictactoe_bot.board import WIN_SCORE, empty_cells, has_moves_left, score
from tictactoe_bot.exceptions import NoMovesLeftError
from tictactoe_bot.models import Board, Marker, Move


def minimax(
    board: Board,
    depth: int,
    is_maximizing: bool,
    bot_marker: Marker,
    user_marker: Marker,
) -> int:
    """
    Value a position by exhaustive search.

    Args:
        board: Current board (restored before returning)
        depth: Plies searched below the root move
        is_maximizing: True if the bot is to move, False for the user
        bot_marker: Marker of the maximizing player
        user_marker: Marker of the minimizing player

    Returns:
        Value of the position from the bot's perspective
    """
    value = score(board, bot_marker)
    if value == WIN_SCORE:
        return value - depth
    if value == -WIN_SCORE:
        return value + depth
    if not has_moves_left(board):
        return 0

    if is_maximizing:
        best = float("-inf")
        for move in empty_cells(board):
            board[move.row][move.col] = bot_marker
            best = max(best, minimax(board, depth + 1, False, bot_marker, user_marker))
            board[move.row][move.col] = None
    else:
        best = float("inf")
        for move in empty_cells(board):
            board[move.row][move.col] = user_marker
            best = min(best, minimax(board, depth + 1, True, bot_marker, user_marker))
            board[move.row][move.col] = None
    return int(best)


def find_best_move(board: Board, bot_marker: Marker, user_marker: Marker) -> Move:
    """
    Find the optimal move for the bot.

    Empty cells are tried in row-major order and a later cell replaces the
    current best only if it scores strictly higher, so the first of several
    equally good cells is returned.

    Args:
        board: Current board (mutated during search, restored on return)
        bot_marker: Marker to place
        user_marker: Opponent's marker

    Returns:
        Optimal move

    Raises:
        NoMovesLeftError: If the board is full
    """
    moves = empty_cells(board)
    if not moves:
        raise NoMovesLeftError("No empty cells available")

    best_move = moves[0]
    best_value = float("-inf")

    for move in moves:
        board[move.row][move.col] = bot_marker
        # Bot just moved, so the search starts on the user's turn
        value = minimax(board, 0, False, bot_marker, user_marker)
        board[move.row][move.col] = None

        if value > best_value:
            best_value = value
            best_move = move

    return best_move


class MinimaxAgent:
    """
    Agent that plays perfectly using minimax search.

    This agent never loses and wins whenever a forced win exists.
    """

    def __init__(self, marker: Marker = Marker.O) -> None:
        """
        Initialize the minimax agent.

        Args:
            marker: Which marker this agent plays
        """
        self.marker = Marker(marker)
        self.opponent = self.marker.opposite()

    def select_move(self, board: Board) -> Move:
        """Select the optimal move for this agent's marker."""
        return find_best_move(board, self.marker, self.opponent)
