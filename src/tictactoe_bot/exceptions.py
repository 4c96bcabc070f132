"""Tic-Tac-Toe bot exception classes."""


class TicTacToeError(Exception):
    """Base exception for all bot errors."""

    pass


class InvalidBoardError(TicTacToeError):
    """Raised when a board is not a 3x3 grid of valid cells."""

    pass


class NoMovesLeftError(TicTacToeError):
    """Raised when a move is requested on a full board."""

    pass


class ConfigurationError(TicTacToeError):
    """Raised when bot configuration is invalid."""

    pass


class DecisionLogError(TicTacToeError):
    """Raised when a decision event cannot be written."""

    pass
