"""
Core data structures for the kcenters clustering primitives.

A ``Cluster`` pairs a center with the observations currently assigned to
it; a ``ClusterSet`` is the fixed, ordered collection of K clusters the
outer loop works on each iteration.
"""

from typing import Iterator, List, Optional, Sequence
import torch
from torch import Tensor

from .interfaces import Observation, ParameterUpdater, RandomSource
from .observations import Coordinates
from ..assignments.hard import HardAssignment
from ..assignments.neighbour import NeighbourAssignment
from ..updates.mean import MeanUpdater
from ..utils.validation import DTYPE, check_dim_index


class Cluster:
    """A center and the observations that gravitate around it.

    Membership holds references to the caller's observations; they are
    never copied or modified.
    """

    def __init__(self, center: Coordinates,
                 observations: Optional[List[Observation]] = None):
        self.center = center
        self.observations: List[Observation] = list(observations) if observations else []

    def append(self, observation: Observation) -> None:
        """Add an observation to the cluster."""
        self.observations.append(observation)

    def recenter(self, updater: Optional[ParameterUpdater] = None) -> None:
        """Move the center to the mean of the members.

        Without members the center is left unchanged unless ``updater``
        says otherwise.
        """
        if updater is None:
            updater = MeanUpdater()
        updater.update(self)

    def points_in_dimension(self, n: int) -> Tensor:
        """The n-th coordinate of every member, in member order."""
        check_dim_index(n, len(self.center))
        values = []
        for obs in self.observations:
            coords = obs.coordinates()
            check_dim_index(n, len(coords))
            values.append(coords[n])
        return torch.tensor(values, dtype=DTYPE)

    def __len__(self) -> int:
        return len(self.observations)

    def __repr__(self) -> str:
        return f"Cluster(center={self.center!r}, n_observations={len(self.observations)})"


class ClusterSet:
    """Ordered set of K clusters.

    Build one with ``ClusterSet.random`` or ``ClusterSet.from_centers``.
    Each iteration the caller runs ``reset``, places every observation with
    ``nearest`` and ``Cluster.append`` (or ``assign``), then ``recenter``.
    None of these methods are safe to call concurrently on the same set.
    """

    def __init__(self, centers: Sequence[Coordinates],
                 updater: Optional[ParameterUpdater] = None,
                 verbose: int = 0):
        """
        Args:
            centers: Initial center of each cluster
            updater: Strategy used by ``recenter`` (default: ``MeanUpdater()``)
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
        """
        self.clusters: List[Cluster] = [Cluster(c) for c in centers]
        self.updater = updater if updater is not None else MeanUpdater()
        self.verbose = verbose

        self.assignment_strategy = HardAssignment()
        self.neighbour_strategy = NeighbourAssignment()

    @classmethod
    def random(cls, n_clusters: int, dataset: Sequence[Observation],
               random_source: Optional[RandomSource] = None,
               random_state: Optional[int] = None,
               updater: Optional[ParameterUpdater] = None,
               verbose: int = 0) -> 'ClusterSet':
        """Create K clusters with centers drawn uniformly from [0, 1)^D.

        Args:
            n_clusters: Number of clusters K
            dataset: Observations; the first one fixes D
            random_source: Uniform generator (default: ``TorchRandomSource``)
            random_state: Seed for the default generator
            updater: Strategy used by ``recenter``
            verbose: Verbosity level

        Raises:
            InvalidInputError: If the dataset is empty, zero-dimensional,
                               or K < 1
        """
        from ..initialization.random import RandomInit

        init = RandomInit(random_source, random_state=random_state)
        centers = init.initialize(dataset, n_clusters)
        if verbose:
            print(f"Initialized {n_clusters} random clusters in {len(centers[0])} dimensions")
        return cls(centers, updater=updater, verbose=verbose)

    @classmethod
    def from_centers(cls, n_clusters: int, dataset: Sequence[Observation],
                     initial_centers: Sequence,
                     updater: Optional[ParameterUpdater] = None,
                     verbose: int = 0) -> 'ClusterSet':
        """Create K clusters with caller-supplied centers.

        Raises:
            InvalidInputError: If the dataset is empty, zero-dimensional,
                               K < 1, or the center count differs from K
            DimensionMismatchError: If a center's dimensionality differs
                                    from the dataset's
        """
        from ..initialization.from_centers import FromCentersInit

        init = FromCentersInit(initial_centers)
        centers = init.initialize(dataset, n_clusters)
        if verbose:
            print(f"Initialized {n_clusters} clusters from given centers")
        return cls(centers, updater=updater, verbose=verbose)

    def nearest(self, point: Observation) -> int:
        """Index of the cluster whose center is nearest to ``point``."""
        return self.assignment_strategy.nearest(point, self.centers_list())

    def neighbour(self, point: Observation, exclude: int) -> tuple:
        """(index, average distance) of the closest cluster other than ``exclude``."""
        return self.neighbour_strategy.neighbour(point, self.clusters, exclude)

    def assign(self, dataset: Sequence[Observation]) -> Tensor:
        """Reset membership and append every observation to its nearest cluster.

        Returns:
            (n,) long tensor of cluster indices, in dataset order
        """
        labels = self.assignment_strategy.compute_assignments(dataset, self.centers_list())
        self.reset()
        for obs, k in zip(dataset, labels.tolist()):
            self.clusters[k].append(obs)

        if self.verbose >= 2:
            sizes = [len(c) for c in self.clusters]
            print(f"Assigned {len(dataset)} observations, cluster sizes = {sizes}")
        return labels

    def recenter(self) -> None:
        """Recenter every cluster from its current members.

        All new centers are computed before any is assigned, so an error
        leaves every cluster as it was.
        """
        new_centers = [self.updater.compute(cluster) for cluster in self.clusters]
        for cluster, new_center in zip(self.clusters, new_centers):
            if new_center is not None:
                cluster.center = new_center

    def reset(self) -> None:
        """Clear all observation assignments."""
        for cluster in self.clusters:
            cluster.observations = []

    def centers_list(self) -> List[Coordinates]:
        return [cluster.center for cluster in self.clusters]

    def centers(self) -> Tensor:
        """(K, D) tensor of cluster centers."""
        return torch.stack([cluster.center.values for cluster in self.clusters])

    def centers_in_dimension(self, n: int) -> Tensor:
        """The n-th coordinate of every cluster center, in cluster order."""
        values = []
        for cluster in self.clusters:
            check_dim_index(n, len(cluster.center))
            values.append(cluster.center[n])
        return torch.tensor(values, dtype=DTYPE)

    def __len__(self) -> int:
        return len(self.clusters)

    def __getitem__(self, index: int) -> Cluster:
        return self.clusters[index]

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self.clusters)

    def __repr__(self) -> str:
        return f"ClusterSet(n_clusters={len(self.clusters)})"


new_random = ClusterSet.random
new_seeded = ClusterSet.from_centers
