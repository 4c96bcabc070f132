"""Core data types for the Tic-Tac-Toe decision engine."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Marker(str, Enum):
    """The two symbols a player can place."""

    X = "x"
    O = "o"

    def opposite(self) -> "Marker":
        """Get the opposing marker."""
        return Marker.O if self == Marker.X else Marker.X


Cell = Optional[Marker]
Board = List[List[Cell]]


class Outcome(str, Enum):
    """Game status after a decision."""

    CONTINUE = "continue"
    DRAW = "draw"
    X = "x"
    O = "o"

    @classmethod
    def for_marker(cls, marker: Marker) -> "Outcome":
        """Map a winning marker to its outcome."""
        return cls.X if Marker(marker) == Marker.X else cls.O


@dataclass(frozen=True)
class Move:
    """A cell chosen for placement."""

    row: int
    col: int


@dataclass
class MoveResult:
    """
    Result of asking the engine for a move.

    ``board`` is the caller's board object (mutated in place when a move was
    made). ``placement`` is set only when this call placed a marker; a result
    for a board that was already won or drawn has no placement.
    """

    outcome: Outcome
    board: Board
    placement: Optional[Move] = None

    def __post_init__(self) -> None:
        if self.outcome == Outcome.CONTINUE and self.placement is None:
            raise ValueError("A continuing game must carry the placement that was made")

    @property
    def moved(self) -> bool:
        """True if a marker was placed during this call."""
        return self.placement is not None


# Read-only template; pass empty_board() to the engine, which mutates its input
EMPTY_BOARD: Tuple[Tuple[None, None, None], ...] = (
    (None, None, None),
    (None, None, None),
    (None, None, None),
)


def empty_board() -> Board:
    """Create a fresh, mutable all-empty board."""
    return [[None for _ in range(3)] for _ in range(3)]
