"""
Othello game module.
Handles turn progression, placement and terminal-state detection.
"""
import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple
import numpy as np

from .board import Board, CellState, Position
from .errors import IllegalMoveError, OccupiedCellError
from .events import CaptureReport, ForcedPass, GameEnded, Tally
from .gate import MoveGate
from . import resolver

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class OthelloGame:
    """
    Main game class for Othello that owns the board and the turn state.

    ``apply_move`` is the only entry point that changes the board. After a
    successful placement the engine stays busy until ``release`` is called,
    so a consumer can finish presenting the capture report first.
    """

    def __init__(self, board: Optional[Board] = None, first: CellState = CellState.BLACK):
        """
        Initialize a new Othello game.

        Args:
            board: Starting position (default: the standard layout)
            first: Color to move first
        """
        self.board = board if board is not None else Board()
        self.current_player = CellState(first)
        self.state = GameState.IN_PROGRESS
        self.tally: Optional[Tally] = None
        self.move_history: List[CaptureReport] = []
        self.gate = MoveGate()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Register a callback for ForcedPass and GameEnded events."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, events: List[Any]) -> None:
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception:
                    logger.exception("Listener %r failed on %s", listener, type(event).__name__)

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board.reset()
        self.current_player = CellState.BLACK
        self.state = GameState.IN_PROGRESS
        self.tally = None
        self.move_history = []
        self.gate.release()
        logger.info("Game reset")

    def apply_move(self, x: int, y: int) -> CaptureReport:
        """
        Place the current player's token at (x, y).

        Args:
            x: Column of the move (0-based)
            y: Row of the move (0-based)

        Returns:
            CaptureReport with the placed position and every captured position

        Raises:
            EngineBusyError: the previous report has not been released
            OutOfBoundsError: (x, y) is not on the board
            OccupiedCellError: the cell already holds a token
            IllegalMoveError: the placement captures nothing
        """
        self.gate.check()
        if self.board.get(x, y) != CellState.EMPTY:
            raise OccupiedCellError(f"Cell ({x}, {y}) is occupied", (x, y))

        mover = self.current_player
        flips = resolver.flippable_tiles(self.board, (x, y), mover)
        if not flips:
            raise IllegalMoveError(f"{mover} captures nothing at ({x}, {y})", (x, y))

        self.board.set(x, y, mover)
        for fx, fy in flips:
            self.board.set(fx, fy, mover)

        report = CaptureReport(placed=(x, y), captured=tuple(flips), color=mover)
        self.move_history.append(report)
        self.gate.acquire()
        logger.debug("%s played (%d, %d) capturing %d", mover, x, y, len(flips))

        events = self._advance_turn()
        self._emit(events)
        return report

    def _advance_turn(self) -> List[Any]:
        """Pick the next mover or end the game, returning the events to emit."""
        if self.board.is_full():
            return [self._end_game()]

        mover = self.current_player
        next_player = resolver.opponent(mover)
        if resolver.has_valid_move(self.board, next_player):
            self.current_player = next_player
            return []
        if not resolver.has_valid_move(self.board, mover):
            return [self._end_game()]
        logger.debug("%s has no valid moves! %s plays again", next_player, mover)
        return [ForcedPass(passed=next_player, mover=mover)]

    def _end_game(self) -> GameEnded:
        self.state = GameState.GAME_OVER
        black, white = self.get_score()
        self.tally = Tally(black=black, white=white)
        logger.debug("Game over - Black: %d, White: %d", black, white)
        return GameEnded(tally=self.tally)

    def release(self) -> None:
        """Mark the last capture report as consumed so the next move is accepted."""
        self.gate.release()

    def is_busy(self) -> bool:
        return self.gate.busy

    def cell_at(self, x: int, y: int) -> CellState:
        return self.board.get(x, y)

    def current_mover(self) -> CellState:
        return self.current_player

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.state is GameState.GAME_OVER

    def final_tally(self) -> Optional[Tally]:
        """Final counts, or None while the game is in progress."""
        return self.tally

    def get_winner(self) -> Optional[CellState]:
        """
        Get the winner of the game.

        Returns:
            CellState.BLACK or CellState.WHITE, None for a draw or a game in progress
        """
        return self.tally.winner if self.tally is not None else None

    def has_valid_move(self, color: CellState) -> bool:
        return resolver.has_valid_move(self.board, color)

    def get_valid_moves(self, color: Optional[CellState] = None) -> List[Position]:
        """
        Get all valid moves for a player.

        Args:
            color: Player to check (default: the current player)

        Returns:
            List of (x, y) tuples, empty once the game is over
        """
        if self.is_game_over():
            return []
        if color is None:
            color = self.current_player
        return resolver.valid_moves(self.board, color)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return (self.board.count_color(CellState.BLACK), self.board.count_color(CellState.WHITE))

    def get_board_state(self) -> np.ndarray:
        return self.board.get_board_state()

    def get_move_history(self) -> List[CaptureReport]:
        """Get the placements made since the last reset."""
        return self.move_history.copy()

    def __str__(self) -> str:
        """String representation of the game state."""
        status = [str(self.board)]
        black, white = self.get_score()
        if self.tally is None:
            status.append(f"Current player: {self.current_player}")
        status.append(f"Score - Black: {black}, White: {white}")

        if self.tally is not None:
            if self.tally.winner is None:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {self.tally.winner} wins!")

        return "\n".join(status)
