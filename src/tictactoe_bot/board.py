"""
Board evaluation for Tic-Tac-Toe.

Pure functions that inspect a 3x3 board without mutating it:

    (0,0) (0,1) (0,2)
    (1,0) (1,1) (1,2)
    (2,0) (2,1) (2,2)

Cells hold ``"x"``, ``"o"`` (or the equivalent ``Marker``) or ``None``.
"""

from typing import Any, List, Optional, Tuple

from tictactoe_bot.exceptions import InvalidBoardError
from tictactoe_bot.models import Board, Marker, Move

WIN_SCORE = 10

Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

# Check order: rows, columns, main diagonal, anti-diagonal
WIN_LINES: List[Line] = [
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
]


def _line_owner(board: Board, line: Line) -> Optional[Marker]:
    (r0, c0), (r1, c1), (r2, c2) = line
    first = board[r0][c0]
    if first is not None and first == board[r1][c1] == board[r2][c2]:
        return Marker(first)
    return None


def has_winner(board: Board) -> Optional[Marker]:
    """
    Find the marker that owns a complete line.

    Args:
        board: Board to inspect

    Returns:
        Marker of the first winning line found, or None if nobody has won
    """
    for line in WIN_LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            return owner
    return None


def winning_line(board: Board) -> Optional[Line]:
    """Return the first complete line on the board, or None."""
    for line in WIN_LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def has_moves_left(board: Board) -> bool:
    """True if at least one cell is empty."""
    for row in board:
        if None in row:
            return True
    return False


def empty_cells(board: Board) -> List[Move]:
    """
    List the empty cells in row-major order.

    Args:
        board: Board to inspect

    Returns:
        Moves for every empty cell, (0,0) first and (2,2) last
    """
    return [
        Move(row, col)
        for row in range(3)
        for col in range(3)
        if board[row][col] is None
    ]


def score(board: Board, marker: Marker) -> int:
    """
    Score a board from one player's perspective.

    Returns +10 if ``marker`` has a complete line, -10 if the opponent has one,
    and 0 otherwise. A 0 does not tell a draw apart from a game in progress.

    Args:
        board: Board to score
        marker: Marker whose perspective is used

    Returns:
        +10, -10 or 0
    """
    winner = has_winner(board)
    if winner is None:
        return 0
    return WIN_SCORE if winner == marker else -WIN_SCORE


def validate_board(board: Any) -> None:
    """
    Check that a board is a mutable 3x3 grid (a list of 3 lists) of valid cells.

    Raises:
        InvalidBoardError: If the shape or a cell value is wrong
    """
    if not isinstance(board, list) or len(board) != 3:
        raise InvalidBoardError("Board must be a list of exactly 3 rows")

    valid_cells = [None, Marker.X.value, Marker.O.value]
    for row_index, row in enumerate(board):
        if not isinstance(row, list) or len(row) != 3:
            raise InvalidBoardError(f"Row {row_index} must be a list of exactly 3 cells")
        for col_index, cell in enumerate(row):
            if cell not in valid_cells:
                raise InvalidBoardError(
                    f"Invalid cell value {cell!r} at ({row_index}, {col_index})"
                )


def render_board(board: Board) -> str:
    """
    Render a board as text.

    Returns:
        Multi-line string with row/column indices
    """
    symbols = {None: ".", Marker.X: "X", Marker.O: "O"}

    lines = ["  0 1 2"]
    for i, row in enumerate(board):
        cells = " ".join(symbols[None if cell is None else Marker(cell)] for cell in row)
        lines.append(f"{i} {cells}")

    return "\n".join(lines)
