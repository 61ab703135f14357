"""
kcenters: building blocks for centroid-based clustering.

This package provides the primitives an iterative K-means style loop calls
each iteration:
- Coordinates and the Observation interface
- Squared Euclidean distance and per-dimension means
- Random and seeded cluster construction
- Nearest-cluster assignment and recentering
- Neighbour lookup and silhouette diagnostics

The loop itself (stopping rule, iteration cap) is left to the caller.

Example usage:
    >>> from kcenters import Coordinates, ClusterSet
    >>>
    >>> data = [Coordinates([0, 0]), Coordinates([0, 1]),
    ...         Coordinates([10, 10]), Coordinates([10, 11])]
    >>> clusters = ClusterSet.from_centers(2, data, [[0, 0], [10, 10]])
    >>>
    >>> clusters.reset()
    >>> for point in data:
    ...     clusters[clusters.nearest(point)].append(point)
    >>> clusters.recenter()
    >>> clusters[0].center
    Coordinates([0.0, 0.5])
"""

__version__ = '0.1.0'

from .errors import (
    ClusteringError,
    InvalidInputError,
    EmptyInputError,
    DimensionMismatchError,
    IndexOutOfRangeError
)

from .base import (
    Observation,
    RandomSource,
    Coordinates,
    center,
    average_distance,
    Cluster,
    ClusterSet,
    new_random,
    new_seeded
)

from .distances import squared_euclidean, EuclideanDistance
from .initialization import RandomInit, TorchRandomSource, FromCentersInit
from .assignments import HardAssignment, NeighbourAssignment
from .updates import MeanUpdater
from .utils.metrics import inertia, silhouette_samples, silhouette_score

__all__ = [
    # Points
    'Observation',
    'Coordinates',
    'center',
    'average_distance',
    'squared_euclidean',
    'EuclideanDistance',

    # Clusters
    'Cluster',
    'ClusterSet',
    'new_random',
    'new_seeded',

    # Strategies
    'RandomSource',
    'TorchRandomSource',
    'RandomInit',
    'FromCentersInit',
    'HardAssignment',
    'NeighbourAssignment',
    'MeanUpdater',

    # Metrics
    'inertia',
    'silhouette_samples',
    'silhouette_score',

    # Errors
    'ClusteringError',
    'InvalidInputError',
    'EmptyInputError',
    'DimensionMismatchError',
    'IndexOutOfRangeError',

    # Version
    '__version__'
]
