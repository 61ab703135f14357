"""Point-to-cluster lookup strategies."""

from .hard import HardAssignment
from .neighbour import NeighbourAssignment

__all__ = [
    'HardAssignment',
    'NeighbourAssignment'
]
