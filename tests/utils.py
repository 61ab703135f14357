# tests/utils.py
"""
Small, reusable helpers used across the kcenters test suite.

- ScriptedSource: RandomSource replaying a fixed list of draws.
- Tagged: an Observation that wraps Coordinates with an extra payload.
- one_pass(clusters, dataset): reset, assign one by one, recenter.
"""

from __future__ import annotations

from typing import Iterable, List

from kcenters import Coordinates, Observation, RandomSource


class ScriptedSource(RandomSource):
    """Returns the given values in order, then raises."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.calls = 0

    def uniform(self) -> float:
        value = self.values[self.calls]
        self.calls += 1
        return value


class Tagged(Observation):
    """Domain record carrying coordinates and an arbitrary tag."""

    def __init__(self, values, tag: str):
        self._coords = Coordinates(values)
        self.tag = tag

    def coordinates(self) -> Coordinates:
        return self._coords

    def distance(self, point: Coordinates) -> float:
        return self._coords.distance(point)


def one_pass(clusters, dataset) -> List[int]:
    """Run a single reset / assign / recenter pass and return the labels."""
    clusters.reset()
    labels = []
    for obs in dataset:
        k = clusters.nearest(obs)
        clusters[k].append(obs)
        labels.append(k)
    clusters.recenter()
    return labels
