"""
Animation sequencing for capture cascades.
"""
from .scheduler import CascadeSchedule, FlipBatch, chebyshev_distance, group_by_distance
from .ticker import CascadeTicker

__all__ = ['CascadeSchedule', 'FlipBatch', 'chebyshev_distance', 'group_by_distance', 'CascadeTicker']
