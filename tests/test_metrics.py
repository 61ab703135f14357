"""
Inertia and silhouette diagnostics built on the neighbour lookup.
"""

from __future__ import annotations

import pytest

from kcenters import (
    ClusterSet, Coordinates, EmptyInputError,
    inertia, silhouette_samples, silhouette_score,
)
from utils import one_pass


@pytest.fixture
def fitted(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    one_pass(clusters, two_blobs)
    return clusters


def test_inertia(fitted):
    # every point sits 0.5 from its center: 4 * 0.25
    assert inertia(fitted) == pytest.approx(1.0)


def test_silhouette_samples(fitted):
    s = silhouette_samples(fitted)
    assert s.shape == (4,)

    # (0, 0): a = 1, b = (200 + 221) / 2
    b = 210.5
    assert s[0].item() == pytest.approx((b - 1.0) / b)
    assert bool((s > 0.9).all())


def test_silhouette_score_well_separated(fitted):
    assert silhouette_score(fitted) > 0.9


def test_silhouette_singleton_scores_zero(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    clusters[0].append(Coordinates([0, 0]))
    clusters[1].append(Coordinates([10, 10]))
    clusters[1].append(Coordinates([10, 11]))

    s = silhouette_samples(clusters)
    assert s[0].item() == 0.0
    assert s[1].item() > 0


def test_silhouette_single_cluster_warns(two_blobs):
    clusters = ClusterSet.from_centers(1, two_blobs, [[5, 5]])
    clusters.assign(two_blobs)
    with pytest.warns(UserWarning, match="single cluster"):
        assert silhouette_score(clusters) == 0.0


def test_silhouette_requires_members(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    with pytest.raises(EmptyInputError):
        silhouette_score(clusters)
