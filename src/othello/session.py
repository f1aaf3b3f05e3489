"""
Game session: owns the engine and paces the presentation of each move.
"""
import logging
from typing import List, Optional

from .animation import CascadeSchedule, CascadeTicker, FlipBatch
from .config import Config
from .game import CaptureReport, CellState, OthelloGame, Tally
from .logger import Logger

logger = logging.getLogger(__name__)


def result_text(tally: Tally) -> str:
    """Banner shown once the game is over."""
    if tally.winner is CellState.BLACK:
        return f"BLACK WINS!\n{tally.black}-{tally.white}"
    if tally.winner is CellState.WHITE:
        return f"WHITE WINS!\n{tally.white}-{tally.black}"
    return f"TIE GAME!\n{tally.black}-{tally.white}"


class GameSession:
    """
    Top-level owner of a single OthelloGame.

    Consumers get the engine from the session instead of a global. Each
    successful ``place`` starts a CascadeTicker; ``tick`` feeds it elapsed
    time and releases the engine once the cascade has settled.
    """

    def __init__(self, config: Optional[Config] = None, game: Optional[OthelloGame] = None,
                 log: Optional[Logger] = None):
        self.config = config or Config()
        self.game = game or OthelloGame()
        self.log = log
        if self.log is not None:
            self.game.subscribe(self.log.log_event)
        self.ticker: Optional[CascadeTicker] = None
        self._since_end = 0.0

    def place(self, x: int, y: int) -> CaptureReport:
        """
        Play the current player's token at (x, y) and start its cascade.

        Raises whatever OthelloGame.apply_move raises; the session is left
        unchanged in that case.
        """
        report = self.game.apply_move(x, y)
        anim = self.config.animation
        self.ticker = CascadeTicker(
            CascadeSchedule(report),
            group_delay=anim.group_delay,
            settle_delay=anim.settle_delay,
        )
        self._since_end = 0.0
        return report

    def tick(self, dt: float) -> List[FlipBatch]:
        """
        Advance presentation time.

        Args:
            dt: Seconds since the previous tick

        Returns:
            Flip batches that became due during this tick
        """
        if self.ticker is None:
            if self.game.is_game_over():
                self._since_end += dt
            return []

        batches = self.ticker.advance(dt)
        if self.ticker.done:
            overshoot = max(self.ticker.elapsed - self.ticker.duration, 0.0)
            self.ticker = None
            self.game.release()
            if self.game.is_game_over():
                self._since_end = overshoot
        return batches

    def finish(self) -> List[FlipBatch]:
        """Skip the rest of the current cascade."""
        if self.ticker is None:
            return []
        batches = self.ticker.drain()
        self.ticker = None
        self.game.release()
        return batches

    @property
    def animating(self) -> bool:
        return self.ticker is not None

    def restart(self) -> None:
        """Drop any running cascade and start a new game."""
        self.ticker = None
        self._since_end = 0.0
        self.game.reset()
        logger.info("Session restarted")

    def result_text(self) -> Optional[str]:
        """
        Result banner, or None until the game is over and the end screen
        delay has passed after the final cascade.
        """
        tally = self.game.final_tally()
        if tally is None or self.animating:
            return None
        if self._since_end < self.config.animation.end_screen_delay:
            return None
        return result_text(tally)

    def close(self) -> None:
        if self.log is not None:
            self.game.unsubscribe(self.log.log_event)
            self.log.close()
