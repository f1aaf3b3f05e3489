"""
Cascade scheduling for flip animations.
Groups the tokens captured by a placement by their Chebyshev distance from
the placed token so a presentation layer can reveal them ring by ring.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from ..game import CaptureReport, CellState, Position


@dataclass(frozen=True)
class FlipBatch:
    """Positions that flip together, ``distance`` cells away from the placement."""
    distance: int
    positions: Tuple[Position, ...]
    color: CellState


def chebyshev_distance(a: Position, b: Position) -> int:
    """Number of king steps between two positions."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def group_by_distance(report: CaptureReport) -> Dict[int, List[Position]]:
    """
    Group the captured positions of a report by distance from the placement.

    Args:
        report: CaptureReport returned by OthelloGame.apply_move

    Returns:
        Dictionary mapping distance to positions, keys in ascending order.
        Positions keep their capture order inside a group.
    """
    groups: Dict[int, List[Position]] = {}
    for pos in report.captured:
        groups.setdefault(chebyshev_distance(pos, report.placed), []).append(pos)
    return {dist: groups[dist] for dist in sorted(groups)}


class CascadeSchedule:
    """
    Ordered, restartable sequence of FlipBatch values for one placement.

    Iterating never touches the engine: the schedule works on the report
    snapshot it was built from, and every ``iter()`` starts from the first
    batch again.
    """

    def __init__(self, report: CaptureReport):
        self.report = report
        self._groups = group_by_distance(report)

    @property
    def placed(self) -> Position:
        return self.report.placed

    @property
    def distances(self) -> List[int]:
        return list(self._groups)

    def __iter__(self) -> Iterator[FlipBatch]:
        for dist, positions in self._groups.items():
            yield FlipBatch(distance=dist, positions=tuple(positions), color=self.report.color)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"CascadeSchedule(placed={self.placed}, distances={self.distances})"
