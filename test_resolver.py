"""
Test script for capture resolution and legal-move scans.
"""
import random
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.game import Board, CellState
from othello.game.resolver import DIRECTIONS, flippable_tiles, has_valid_move, opponent, valid_moves

B, W = CellState.BLACK, CellState.WHITE


def make_board(cells):
    """Build an otherwise empty board from a {(x, y): color} mapping."""
    board = Board()
    board.clear()
    for (x, y), color in cells.items():
        board.set(x, y, color)
    return board


def test_opponent():
    assert opponent(B) == W
    assert opponent(W) == B


def test_initial_valid_moves():
    """Black's valid moves in the initial position."""
    board = Board()
    expected_moves = [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert set(valid_moves(board, B)) == set(expected_moves)
    assert set(valid_moves(board, W)) == {(4, 2), (5, 3), (2, 4), (3, 5)}


def test_single_capture():
    board = Board()
    assert flippable_tiles(board, (2, 3), B) == [(3, 3)]


def test_line_needs_bracketing_token():
    # Line runs into the edge
    board = make_board({(1, 0): W, (2, 0): W})
    assert flippable_tiles(board, (3, 0), B) == []

    # Line runs into an empty cell
    board = make_board({(1, 0): W, (2, 0): W, (4, 0): B})
    assert flippable_tiles(board, (0, 0), B) == []

    # Adjacent own token captures nothing
    board = make_board({(1, 0): B})
    assert flippable_tiles(board, (0, 0), B) == []


def test_multiple_directions():
    board = make_board({
        (1, 0): W, (2, 0): W, (3, 0): B,  # east
        (0, 1): W, (0, 2): B,  # south
        (1, 1): W, (2, 2): W, (3, 3): W, (4, 4): B,  # south-east
    })
    flips = flippable_tiles(board, (0, 0), B)
    assert flips == [(1, 0), (2, 0), (0, 1), (1, 1), (2, 2), (3, 3)], \
        f"Captures should follow direction order, got {flips}"


def test_resolver_does_not_modify_board():
    board = Board()
    before = board.copy()
    flippable_tiles(board, (2, 3), B)
    valid_moves(board, W)
    assert board == before


def test_has_valid_move():
    assert has_valid_move(Board(), B)
    assert has_valid_move(Board(), W)

    board = make_board({(0, 0): B, (7, 7): B})
    assert not has_valid_move(board, B)
    assert not has_valid_move(board, W)


def _bracketed(board, origin, pos, color):
    """Check pos lies on a run of opponent tokens from origin closed by color."""
    ox, oy = origin
    px, py = pos
    for dx, dy in DIRECTIONS:
        x, y = ox + dx, oy + dy
        hit = False
        while Board.in_bounds(x, y) and board.get(x, y) == opponent(color):
            hit = hit or (x, y) == (px, py)
            x += dx
            y += dy
        if hit and Board.in_bounds(x, y) and board.get(x, y) == color:
            return True
    return False


def test_flippable_tiles_properties():
    """Every captured position is in bounds, opponent-colored and bracketed."""
    rng = random.Random(1234)
    states = [CellState.EMPTY, B, W]
    for _ in range(200):
        board = Board()
        for x, y in board.positions():
            board.set(x, y, rng.choice(states))
        for x, y in board.positions():
            if board.get(x, y) != CellState.EMPTY:
                continue
            for color in (B, W):
                flips = flippable_tiles(board, (x, y), color)
                assert len(flips) == len(set(flips))
                for pos in flips:
                    assert Board.in_bounds(*pos)
                    assert board.get(*pos) == opponent(color)
                    assert _bracketed(board, (x, y), pos, color)


if __name__ == "__main__":
    print("Running resolver tests...\n")

    test_opponent()
    test_initial_valid_moves()
    test_single_capture()
    test_line_needs_bracketing_token()
    test_multiple_directions()
    test_resolver_does_not_modify_board()
    test_has_valid_move()
    test_flippable_tiles_properties()

    print("\nAll tests passed successfully!")
