"""
Board module for Othello.
Holds the 8x8 grid of cell states. The board is a trusted low-level store:
it bounds-checks coordinates but enforces no game rules.
"""
from enum import IntEnum
from typing import Iterator, Tuple
import numpy as np

from .errors import OutOfBoundsError

Position = Tuple[int, int]


class CellState(IntEnum):
    """State of a single cell."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


class Board:
    """
    Represents the Othello board as a numpy array indexed ``[x, y]``.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Starting layout
    INITIAL_LAYOUT = {
        (3, 3): CellState.WHITE,
        (4, 4): CellState.WHITE,
        (3, 4): CellState.BLACK,
        (4, 3): CellState.BLACK,
    }

    def __init__(self):
        """Initialize a new board in the starting layout."""
        self._cells = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self.reset()

    def reset(self) -> None:
        """Put the board back into the starting layout."""
        self.clear()
        for (x, y), color in self.INITIAL_LAYOUT.items():
            self._cells[x, y] = color

    def clear(self) -> None:
        """Empty every cell."""
        self._cells.fill(CellState.EMPTY)

    @classmethod
    def in_bounds(cls, x: int, y: int) -> bool:
        return 0 <= x < cls.SIZE and 0 <= y < cls.SIZE

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Position ({x}, {y}) is outside the board", (x, y))

    def get(self, x: int, y: int) -> CellState:
        """
        Get the state of a cell.

        Args:
            x: Column (0-based)
            y: Row (0-based)

        Returns:
            The CellState at (x, y)

        Raises:
            OutOfBoundsError: if (x, y) is not on the board
        """
        self._check_bounds(x, y)
        return CellState(int(self._cells[x, y]))

    def set(self, x: int, y: int, color: CellState) -> None:
        """Overwrite the state of a cell."""
        self._check_bounds(x, y)
        self._cells[x, y] = CellState(color)

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not np.any(self._cells == CellState.EMPTY)

    def count_color(self, color: CellState) -> int:
        """Count the cells holding the given state."""
        return int(np.count_nonzero(self._cells == CellState(color)))

    def positions(self) -> Iterator[Position]:
        """Iterate over every position, row by row."""
        for y in range(self.SIZE):
            for x in range(self.SIZE):
                yield (x, y)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._cells = self._cells.copy()
        return new_board

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array indexed [x, y] holding CellState values
        """
        return self._cells.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {CellState.EMPTY: '.', CellState.BLACK: 'B', CellState.WHITE: 'W'}
        rows = []
        for y in range(self.SIZE):
            row = [symbols[CellState(int(self._cells[x, y]))] for x in range(self.SIZE)]
            rows.append(' '.join(row))
        return "\n".join(rows)
