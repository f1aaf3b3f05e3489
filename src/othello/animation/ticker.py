"""
Externally driven timer that releases cascade batches.
The caller feeds elapsed time; nothing here sleeps.
"""
import logging
from typing import List

from .scheduler import CascadeSchedule, FlipBatch

logger = logging.getLogger(__name__)

# Tolerance for comparing summed frame times against due times
EPSILON = 1e-9


class CascadeTicker:
    """
    Paces a CascadeSchedule.

    The first batch is due immediately, each following batch ``group_delay``
    seconds after the previous one. The last batch is also followed by
    ``group_delay``, and the ticker is done once that has passed and the
    last batch has had ``settle_delay`` seconds to finish flipping.
    """

    def __init__(self, schedule: CascadeSchedule, group_delay: float = 0.1, settle_delay: float = 0.0):
        if group_delay < 0 or settle_delay < 0:
            raise ValueError("Delays must be non-negative")
        self.schedule = schedule
        self.group_delay = group_delay
        self.settle_delay = settle_delay
        self.elapsed = 0.0
        self._pending = list(schedule)
        self._released = 0

    @property
    def duration(self) -> float:
        """Time from start until ``done`` becomes true."""
        count = self._released + len(self._pending)
        if count == 0:
            return 0.0
        return max(count * self.group_delay, (count - 1) * self.group_delay + self.settle_delay)

    @property
    def remaining(self) -> int:
        return len(self._pending)

    @property
    def done(self) -> bool:
        return not self._pending and self.elapsed + EPSILON >= self.duration

    def _due_time(self, index: int) -> float:
        return index * self.group_delay

    def advance(self, dt: float) -> List[FlipBatch]:
        """
        Move the clock forward.

        Args:
            dt: Seconds elapsed since the previous call

        Returns:
            Batches that became due, in distance order
        """
        if dt < 0:
            raise ValueError("Elapsed time must be non-negative")
        self.elapsed += dt

        due = []
        while self._pending and self._due_time(self._released) <= self.elapsed + EPSILON:
            batch = self._pending.pop(0)
            self._released += 1
            due.append(batch)
            logger.debug("Released batch at distance %d (%d tokens)", batch.distance, len(batch.positions))
        return due

    def drain(self) -> List[FlipBatch]:
        """Release everything at once and finish the ticker."""
        due = self._pending
        self._released += len(due)
        self._pending = []
        self.elapsed = max(self.elapsed, self.duration)
        return due
