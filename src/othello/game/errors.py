"""
Errors raised when a placement is rejected.
All of them leave the board and turn state untouched.
"""
from typing import Optional, Tuple


class MoveError(Exception):
    """Base class for rejected placements."""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.position = position


class OutOfBoundsError(MoveError, IndexError):
    """Position references a cell outside the 8x8 grid."""


class OccupiedCellError(MoveError):
    """Target cell already holds a token."""


class IllegalMoveError(MoveError):
    """Target cell is empty but the placement captures nothing."""


class EngineBusyError(MoveError):
    """A previous placement is still being presented."""
