"""
Core interfaces for the kcenters clustering primitives.

This module defines the abstract base classes that data points, random
sources and cluster strategies implement, so the cluster set can work with
any of them interchangeably.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .observations import Coordinates
    from .data_structures import Cluster


class Observation(ABC):
    """Anything that can be clustered.

    An observation reports its position as ``Coordinates`` and knows how far
    it is from a given ``Coordinates`` value. Plain ``Coordinates`` is the
    trivial implementation; richer records hold a ``Coordinates`` and
    delegate to it.
    """

    @abstractmethod
    def coordinates(self) -> 'Coordinates':
        """Position of this observation."""
        pass

    @abstractmethod
    def distance(self, point: 'Coordinates') -> float:
        """Distance from this observation to ``point``.

        Args:
            point: Coordinates with the same dimensionality

        Returns:
            Non-negative distance (squared Euclidean for ``Coordinates``)
        """
        pass


class RandomSource(ABC):
    """Uniform random number generator injected into random construction."""

    @abstractmethod
    def uniform(self) -> float:
        """Return the next real number drawn uniformly from [0, 1)."""
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster center initialization strategies."""

    @abstractmethod
    def initialize(self, dataset: Sequence[Observation], n_clusters: int,
                   **kwargs) -> List['Coordinates']:
        """Produce initial cluster centers.

        Args:
            dataset: Observations to be clustered
            n_clusters: Number of centers to produce
            **kwargs: Strategy-specific parameters

        Returns:
            List of ``n_clusters`` initial centers
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster center update strategies."""

    @abstractmethod
    def compute(self, cluster: 'Cluster', **kwargs) -> Optional['Coordinates']:
        """New center for ``cluster`` from its current members.

        Returns:
            The new center, or None to leave the current one in place
        """
        pass

    def update(self, cluster: 'Cluster', **kwargs) -> None:
        """Update the cluster's center from its current members in place."""
        new_center = self.compute(cluster, **kwargs)
        if new_center is not None:
            cluster.center = new_center
