"""Base classes, point representation and cluster containers."""

from .interfaces import (
    Observation,
    RandomSource,
    InitializationStrategy,
    ParameterUpdater
)

from .observations import (
    Coordinates,
    center,
    average_distance
)

from .data_structures import (
    Cluster,
    ClusterSet,
    new_random,
    new_seeded
)

__all__ = [
    # Interfaces
    'Observation',
    'RandomSource',
    'InitializationStrategy',
    'ParameterUpdater',

    # Points
    'Coordinates',
    'center',
    'average_distance',

    # Clusters
    'Cluster',
    'ClusterSet',
    'new_random',
    'new_seeded'
]
