"""Utility functions for the kcenters primitives."""

from .validation import (
    to_values,
    as_observations,
    check_n_clusters,
    check_dataset,
    check_same_dimension,
    check_dim_index,
    check_cluster_index
)

__all__ = [
    'to_values',
    'as_observations',
    'check_n_clusters',
    'check_dataset',
    'check_same_dimension',
    'check_dim_index',
    'check_cluster_index'
]
