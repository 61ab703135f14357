"""
Cluster quality metrics.

Internal metrics (no ground truth needed) computed from a populated
``ClusterSet``. Distances are squared Euclidean, like everywhere else in
the package, so values are not directly comparable to metrics computed on
plain Euclidean distances.
"""

import warnings
import torch
from torch import Tensor

from ..base.observations import average_distance
from ..errors import EmptyInputError
from .validation import DTYPE


def inertia(clusters) -> float:
    """Sum of squared distances from each member to its cluster center.

    Args:
        clusters: ClusterSet with assigned members

    Returns:
        Within-cluster sum of squares
    """
    total = 0.0
    for cluster in clusters:
        for obs in cluster.observations:
            total += obs.distance(cluster.center)
    return total


def silhouette_samples(clusters) -> Tensor:
    """Silhouette coefficient of every member.

    For a member of cluster i, ``a`` is its average distance to the other
    members of cluster i and ``b`` the average distance to its neighbour
    cluster. The coefficient is (b - a) / max(a, b). Members of singleton
    clusters, and members with a = b = 0, score 0.

    Args:
        clusters: ClusterSet with at least two clusters

    Returns:
        Tensor of coefficients, ordered by cluster then member order
    """
    values = []

    for i, cluster in enumerate(clusters):
        for obs in cluster.observations:
            if len(cluster.observations) == 1:
                values.append(0.0)
                continue

            a = average_distance(obs, cluster.observations)
            _, b = clusters.neighbour(obs, i)

            denom = max(a, b)
            values.append((b - a) / denom if denom > 0 else 0.0)

    return torch.tensor(values, dtype=DTYPE)


def silhouette_score(clusters) -> float:
    """Mean silhouette coefficient over all members.

    Args:
        clusters: ClusterSet with assigned members

    Returns:
        Mean silhouette coefficient in [-1, 1]

    Raises:
        EmptyInputError: If no cluster has any members
    """
    if sum(len(cluster.observations) for cluster in clusters) == 0:
        raise EmptyInputError("Silhouette is undefined for clusters without members")

    if len(clusters) == 1:
        warnings.warn("Silhouette is undefined for a single cluster; returning 0.0")
        return 0.0

    return silhouette_samples(clusters).mean().item()
