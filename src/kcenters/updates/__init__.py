"""Center update strategies."""

from .mean import MeanUpdater, EMPTY_CLUSTER_POLICIES

__all__ = [
    'MeanUpdater',
    'EMPTY_CLUSTER_POLICIES'
]
