"""Distance metrics for clustering."""

from .euclidean import squared_euclidean, EuclideanDistance

__all__ = [
    'squared_euclidean',
    'EuclideanDistance'
]
