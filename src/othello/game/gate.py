"""
Ready/Busy gate guarding placements while a previous one is presented.
"""
import logging
from enum import Enum

from .errors import EngineBusyError

logger = logging.getLogger(__name__)


class GateState(Enum):
    READY = "ready"
    BUSY = "busy"


class MoveGate:
    """
    Two-state machine: a placement moves it from READY to BUSY and only an
    explicit release moves it back.
    """

    def __init__(self):
        self.state = GateState.READY

    @property
    def busy(self) -> bool:
        return self.state is GateState.BUSY

    def check(self) -> None:
        """Raise EngineBusyError unless the gate is ready."""
        if self.busy:
            raise EngineBusyError("A previous move is still being presented")

    def acquire(self) -> None:
        self.check()
        self.state = GateState.BUSY

    def release(self) -> None:
        if self.busy:
            logger.debug("Move gate released")
        self.state = GateState.READY
