"""
Values the engine hands to its consumers: the report of a placement, the
final tally and the observability events.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, CellState, Position


@dataclass(frozen=True)
class CaptureReport:
    """Result of a successful placement."""
    placed: Position
    captured: Tuple[Position, ...]
    color: CellState


@dataclass(frozen=True)
class Tally:
    """Token counts at the end of a game."""
    black: int
    white: int

    @property
    def empty(self) -> int:
        return Board.BOARD_SIZE - self.black - self.white

    @property
    def winner(self) -> Optional[CellState]:
        """The color with more tokens, or None for a tie."""
        if self.black > self.white:
            return CellState.BLACK
        if self.white > self.black:
            return CellState.WHITE
        return None


@dataclass(frozen=True)
class ForcedPass:
    """``passed`` had no legal move, so ``mover`` plays again."""
    passed: CellState
    mover: CellState


@dataclass(frozen=True)
class GameEnded:
    tally: Tally
