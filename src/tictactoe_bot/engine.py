"""Next-move decisions for a Tic-Tac-Toe bot."""

import time
from typing import Optional

import numpy as np

from tictactoe_bot.agents import Agent, MinimaxAgent, RandomAgent
from tictactoe_bot.board import has_moves_left, has_winner, render_board, validate_board
from tictactoe_bot.config import BotConfig
from tictactoe_bot.exceptions import InvalidBoardError
from tictactoe_bot.models import Board, Marker, MoveResult, Outcome
from tictactoe_bot.tracking import DecisionLogger, EventType


def decide_move(
    board: Board,
    bot_marker: Marker,
    use_random: bool = True,
    rng: np.random.Generator | None = None,
    logger: Optional[DecisionLogger] = None,
) -> MoveResult:
    """
    Decide the bot's next move and apply it to the board.

    If the board is already won or drawn, nothing is placed and the result has
    no placement. Otherwise ``bot_marker`` is placed on the chosen cell (the
    caller's board is mutated and returned) and the result always carries the
    placement, whether the game continues, is drawn or is won by that move.

    Args:
        board: Current board, owned by the caller
        bot_marker: Marker the bot plays ("x" or "o")
        use_random: Pick uniformly among empty cells instead of searching
        rng: Generator for random play (a fresh unseeded one if None)
        logger: Optional decision logger

    Returns:
        Outcome, the board and the placement (if one was made)

    Raises:
        InvalidBoardError: If a move is needed but the board is not a list of
            lists (for example the read-only EMPTY_BOARD)
    """
    bot_marker = Marker(bot_marker)
    strategy = "random" if use_random else "perfect"
    start = time.perf_counter()

    winner = has_winner(board)
    if winner is not None:
        result = MoveResult(outcome=Outcome.for_marker(winner), board=board)
    elif not has_moves_left(board):
        result = MoveResult(outcome=Outcome.DRAW, board=board)
    else:
        if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
            raise InvalidBoardError(
                "Board is read-only; use empty_board() for a mutable board"
            )

        agent: Agent = (
            RandomAgent(rng=rng) if use_random else MinimaxAgent(bot_marker)
        )
        move = agent.select_move(board)
        board[move.row][move.col] = bot_marker

        winner = has_winner(board)
        if winner is not None:
            outcome = Outcome.for_marker(winner)
        elif not has_moves_left(board):
            outcome = Outcome.DRAW
        else:
            outcome = Outcome.CONTINUE
        result = MoveResult(outcome=outcome, board=board, placement=move)

    if logger is not None:
        _log_decision(logger, result, bot_marker, strategy, start)

    return result


def _log_decision(
    logger: DecisionLogger,
    result: MoveResult,
    bot_marker: Marker,
    strategy: str,
    start: float,
) -> None:
    duration_ms = (time.perf_counter() - start) * 1000
    if result.placement is None:
        event_type = EventType.TERMINAL
        message = f"Board already finished: {result.outcome.value}"
        placement = None
    else:
        event_type = EventType.DECISION
        placement = [result.placement.row, result.placement.col]
        message = f"Placed {bot_marker.value} at ({placement[0]}, {placement[1]})"

    logger.log_event(
        event_type,
        message,
        marker=bot_marker.value,
        strategy=strategy,
        outcome=result.outcome.value,
        placement=placement,
        duration_ms=duration_ms,
        board=render_board(result.board),
    )


class TicTacToeBot:
    """
    A configured bot that plays one side of a game.

    Holds the random generator across calls so a seeded bot replays the same
    sequence of random moves.
    """

    def __init__(self, config: Optional[BotConfig] = None) -> None:
        """
        Initialize the bot.

        Args:
            config: Bot configuration (defaults if None)
        """
        self.config = config or BotConfig()
        self.rng = np.random.default_rng(self.config.seed)

        log_file = self.config.get_log_file()
        self.logger = DecisionLogger(log_file) if log_file is not None else None

    @property
    def marker(self) -> Marker:
        return self.config.bot_marker

    def play(self, board: Board) -> MoveResult:
        """
        Decide and apply the bot's next move.

        Raises:
            InvalidBoardError: If board validation is enabled and the board
                is malformed
        """
        if self.config.validate_boards:
            validate_board(board)

        return decide_move(
            board,
            self.marker,
            use_random=self.config.use_random,
            rng=self.rng,
            logger=self.logger,
        )

    def reset(self) -> None:
        """Restart the random sequence from the configured seed."""
        self.rng = np.random.default_rng(self.config.seed)
