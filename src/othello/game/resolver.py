"""
Move resolution for Othello.
Computes which opponent tokens a placement captures and scans the board
for legal moves.
"""
from typing import List

from .board import Board, CellState, Position

# Directions: E, W, S, N, SE, NW, SW, NE
DIRECTIONS = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
)


def opponent(color: CellState) -> CellState:
    """Return the other player's color."""
    return CellState.WHITE if color == CellState.BLACK else CellState.BLACK


def flippable_tiles(board: Board, position: Position, mover: CellState) -> List[Position]:
    """
    Get the opponent tokens captured by placing ``mover`` at ``position``.

    The caller is responsible for checking that ``position`` is empty.

    Args:
        board: Board to inspect (not modified)
        position: (x, y) of the candidate placement
        mover: Color of the player placing the token

    Returns:
        List of (x, y) positions, grouped by direction in DIRECTIONS order.
        An empty list means the placement is not a legal move.
    """
    x0, y0 = position
    flips: List[Position] = []

    for dx, dy in DIRECTIONS:
        line = []
        x, y = x0 + dx, y0 + dy
        while Board.in_bounds(x, y):
            cell = board.get(x, y)
            if cell == CellState.EMPTY or cell == mover:
                break
            line.append((x, y))
            x += dx
            y += dy

        # Only a line closed by one of our own tokens is captured
        if Board.in_bounds(x, y) and board.get(x, y) == mover:
            flips.extend(line)

    return flips


def valid_moves(board: Board, color: CellState) -> List[Position]:
    """List every empty position where ``color`` captures at least one token."""
    return [
        (x, y) for x, y in board.positions()
        if board.get(x, y) == CellState.EMPTY and flippable_tiles(board, (x, y), color)
    ]


def has_valid_move(board: Board, color: CellState) -> bool:
    """Check if ``color`` has any legal placement."""
    for x, y in board.positions():
        if board.get(x, y) == CellState.EMPTY and flippable_tiles(board, (x, y), color):
            return True
    return False
