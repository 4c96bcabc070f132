"""Next-move engine for 3x3 Tic-Tac-Toe with random and perfect play."""

from tictactoe_bot.board import (
    WIN_LINES,
    empty_cells,
    has_moves_left,
    has_winner,
    render_board,
    score,
    validate_board,
    winning_line,
)
from tictactoe_bot.config import BotConfig, create_config
from tictactoe_bot.engine import TicTacToeBot, decide_move
from tictactoe_bot.exceptions import (
    ConfigurationError,
    DecisionLogError,
    InvalidBoardError,
    NoMovesLeftError,
    TicTacToeError,
)
from tictactoe_bot.models import (
    EMPTY_BOARD,
    Board,
    Cell,
    Marker,
    Move,
    MoveResult,
    Outcome,
    empty_board,
)
from tictactoe_bot.tracking import DecisionEvent, DecisionLogger, EventType

__version__ = "0.1.0"
__all__ = [
    # Engine
    "decide_move",
    "TicTacToeBot",
    # Board evaluation
    "WIN_LINES",
    "has_winner",
    "winning_line",
    "has_moves_left",
    "empty_cells",
    "score",
    "validate_board",
    "render_board",
    # Data types
    "Marker",
    "Cell",
    "Board",
    "Outcome",
    "Move",
    "MoveResult",
    "EMPTY_BOARD",
    "empty_board",
    # Configuration and logging
    "BotConfig",
    "create_config",
    "DecisionEvent",
    "DecisionLogger",
    "EventType",
    # Exceptions
    "TicTacToeError",
    "InvalidBoardError",
    "NoMovesLeftError",
    "ConfigurationError",
    "DecisionLogError",
]
