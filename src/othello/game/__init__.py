"""
Othello game module.
This package contains the core rules engine for Othello.
"""

from .board import Board, CellState, Position
from .errors import (
    EngineBusyError,
    IllegalMoveError,
    MoveError,
    OccupiedCellError,
    OutOfBoundsError,
)
from .events import CaptureReport, ForcedPass, GameEnded, Tally
from .game import GameState, OthelloGame
from .gate import GateState, MoveGate

__all__ = [
    'Board', 'CellState', 'Position',
    'MoveError', 'OutOfBoundsError', 'OccupiedCellError', 'IllegalMoveError', 'EngineBusyError',
    'CaptureReport', 'ForcedPass', 'GameEnded', 'Tally',
    'GameState', 'OthelloGame', 'GateState', 'MoveGate',
]
