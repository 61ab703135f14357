"""
Full assignment passes over a ClusterSet and the projection helpers.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from kcenters import ClusterSet, Coordinates, IndexOutOfRangeError
from kcenters.utils.validation import as_observations
from utils import Tagged, one_pass


def test_one_pass_concrete_scenario(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    labels = one_pass(clusters, two_blobs)

    assert labels == [0, 0, 1, 1]
    assert [p.label for p in clusters[0].observations] == ["a", "b"]
    assert [p.label for p in clusters[1].observations] == ["c", "d"]
    assert clusters[0].center == Coordinates([0, 0.5])
    assert clusters[1].center == Coordinates([10, 10.5])


def test_assign_matches_manual_pass(two_blobs):
    manual = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    one_pass(manual, two_blobs)

    bundled = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    labels = bundled.assign(two_blobs)
    bundled.recenter()

    assert labels.tolist() == [0, 0, 1, 1]
    assert torch.equal(bundled.centers(), manual.centers())


def test_assign_replaces_previous_membership(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    clusters.assign(two_blobs)
    clusters.assign(two_blobs)
    assert [len(c) for c in clusters] == [2, 2]


def test_assign_prints_sizes_when_verbose(two_blobs, capsys):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]], verbose=2)
    clusters.assign(two_blobs)
    out = capsys.readouterr().out
    assert "Initialized 2 clusters" in out
    assert "cluster sizes = [2, 2]" in out


def test_pass_assigns_to_closest_old_center(rng):
    X = np.vstack([
        rng.normal(loc=0.0, scale=0.5, size=(25, 2)),
        rng.normal(loc=4.0, scale=0.5, size=(25, 2)),
        rng.normal(loc=(0.0, 4.0), scale=0.5, size=(25, 2)),
    ])
    data = as_observations(X)
    clusters = ClusterSet.random(3, data, random_state=11)

    for _ in range(3):
        old_centers = [c.center for c in clusters]
        one_pass(clusters, data)
        for k, cluster in enumerate(clusters):
            for p in cluster.observations:
                d = p.distance(old_centers[k])
                assert all(d <= p.distance(c) for c in old_centers)


def test_heterogeneous_observations(two_blobs):
    data = [Tagged([0, 0], "x"), Coordinates([0, 2]), Tagged([8, 8], "y")]
    clusters = ClusterSet.from_centers(2, data, [[0, 0], [10, 10]])
    one_pass(clusters, data)

    assert clusters[0].center.tolist() == [0.0, 1.0]
    assert clusters[1].observations[0].tag == "y"


def test_points_in_dimension(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    clusters.assign(two_blobs)

    assert clusters[0].points_in_dimension(1).tolist() == [0.0, 1.0]
    assert clusters[1].points_in_dimension(0).tolist() == [10.0, 10.0]
    assert clusters[1].points_in_dimension(1).dtype == torch.float64


def test_points_in_dimension_empty_cluster(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    assert clusters[0].points_in_dimension(0).numel() == 0


@pytest.mark.parametrize("n", [2, 7, -1])
def test_points_in_dimension_empty_cluster_out_of_range(two_blobs, n):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    with pytest.raises(IndexOutOfRangeError):
        clusters[0].points_in_dimension(n)


def test_centers_in_dimension(two_blobs):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    clusters.assign(two_blobs)
    clusters.recenter()
    assert clusters.centers_in_dimension(0).tolist() == [0.0, 10.0]
    assert clusters.centers_in_dimension(1).tolist() == [0.5, 10.5]


@pytest.mark.parametrize("n", [2, -1])
def test_projection_out_of_range(two_blobs, n):
    clusters = ClusterSet.from_centers(2, two_blobs, [[0, 0], [10, 10]])
    clusters.assign(two_blobs)
    with pytest.raises(IndexOutOfRangeError):
        clusters[0].points_in_dimension(n)
    with pytest.raises(IndexOutOfRangeError):
        clusters.centers_in_dimension(n)
    with pytest.raises(IndexError):
        clusters.centers_in_dimension(n)


def test_as_observations_from_tensor_and_rows():
    from_tensor = as_observations(torch.tensor([[1.0, 2.0], [3.0, 4.0]]))
    from_rows = as_observations([[1, 2], [3, 4]])
    assert from_tensor == from_rows
    assert len(from_rows) == 2
