"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster center.
"""

from typing import List, Sequence
import torch
from torch import Tensor

from ..base.interfaces import Observation
from ..errors import InvalidInputError
from ..utils.validation import DTYPE


class HardAssignment:
    """Hard (discrete) assignment to the nearest cluster center.

    Distances come from the observation itself, so observations with their
    own metric are honoured. Ties go to the lowest cluster index.
    """

    def distances(self, point: Observation, centers: Sequence) -> Tensor:
        """Distance from ``point`` to every center.

        Args:
            point: Observation to place
            centers: K center Coordinates

        Returns:
            (K,) tensor of distances
        """
        return torch.tensor([point.distance(c) for c in centers], dtype=DTYPE)

    def nearest(self, point: Observation, centers: Sequence) -> int:
        """Index of the center nearest to ``point``.

        Raises:
            InvalidInputError: If there are no centers
        """
        if len(centers) == 0:
            raise InvalidInputError("Cannot find the nearest of zero clusters")

        # argmin returns the first index among equal minima
        return int(torch.argmin(self.distances(point, centers)).item())

    def compute_assignments(self, dataset: Sequence[Observation],
                            centers: Sequence) -> Tensor:
        """Assign each observation to its nearest center.

        Centers are only read, so observations may be processed in any
        order or in parallel.

        Args:
            dataset: n observations
            centers: K center Coordinates

        Returns:
            (n,) long tensor of cluster indices
        """
        labels: List[int] = [self.nearest(obs, centers) for obs in dataset]
        return torch.tensor(labels, dtype=torch.long)
