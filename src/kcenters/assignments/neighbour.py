"""
Neighbour cluster lookup.

The neighbour of a point is the cluster, other than its own, whose members
are on average closest to it. It provides the ``b`` term of the silhouette
coefficient.
"""

from typing import Sequence, Tuple

from ..base.interfaces import Observation
from ..base.observations import average_distance
from ..errors import InvalidInputError
from ..utils.validation import check_cluster_index


class NeighbourAssignment:
    """Finds the closest other cluster by average member distance."""

    def neighbour(self, point: Observation, clusters: Sequence,
                  exclude: int) -> Tuple[int, float]:
        """Neighbouring cluster of ``point``.

        Args:
            point: Observation to look around
            clusters: K clusters with their current members
            exclude: Index of the point's own cluster

        Returns:
            (index, average distance) of the closest other cluster. Ties go
            to the first cluster in scan order.

        Raises:
            InvalidInputError: If there are fewer than two clusters
            IndexOutOfRangeError: If ``exclude`` is not a cluster index
        """
        if len(clusters) < 2:
            raise InvalidInputError(f"Need at least 2 clusters for a neighbour, "
                                    f"got {len(clusters)}")
        check_cluster_index(exclude, len(clusters))

        best_index = -1
        best_distance = 0.0

        for i, cluster in enumerate(clusters):
            if i == exclude:
                continue

            d = average_distance(point, cluster.observations)
            if best_index < 0 or d < best_distance:
                best_index = i
                best_distance = d

        return best_index, best_distance
