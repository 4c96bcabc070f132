"""Move selection agents for Tic-Tac-Toe."""

from tictactoe_bot.agents.base import Agent
from tictactoe_bot.agents.random import RandomAgent
from tictactoe_bot.agents.minimax import MinimaxAgent

__all__ = ["Agent", "RandomAgent", "MinimaxAgent"]
