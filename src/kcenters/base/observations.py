"""
Point representation for the kcenters clustering primitives.

``Coordinates`` is the fundamental data point: an ordered vector of real
values plus an optional label. It is also the default ``Observation``.
"""

from typing import List, Sequence, Union
import torch
from torch import Tensor
import numpy as np

from .interfaces import Observation
from ..distances.euclidean import squared_euclidean
from ..errors import EmptyInputError, DimensionMismatchError
from ..utils.validation import to_values


class Coordinates(Observation):
    """A point in D-dimensional space.

    The label is metadata only and never takes part in distances or means.
    Values are treated as immutable; operations return new instances.
    """

    def __init__(self, values: Union[Tensor, np.ndarray, Sequence[float]],
                 label: str = ""):
        """
        Args:
            values: (d,) coordinate values
            label: Optional human-readable name
        """
        self.values = to_values(values)
        self.label = label

    @property
    def dimension(self) -> int:
        """Number of dimensions D."""
        return self.values.shape[0]

    def coordinates(self) -> 'Coordinates':
        """A point is its own observation."""
        return self

    def distance(self, point: 'Coordinates') -> float:
        """Squared Euclidean distance to ``point``."""
        return squared_euclidean(self.values, point.values)

    def tolist(self) -> List[float]:
        return self.values.tolist()

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: int) -> float:
        return self.values[index].item()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return self.label == other.label and torch.equal(self.values, other.values)

    def __repr__(self) -> str:
        if self.label:
            return f"Coordinates({self.tolist()}, label={self.label!r})"
        return f"Coordinates({self.tolist()})"


def center(observations: Sequence[Observation]) -> Coordinates:
    """Mean position of a set of observations.

    Args:
        observations: Non-empty sequence of observations sharing one dimensionality

    Returns:
        Unlabelled Coordinates holding the per-dimension arithmetic mean

    Raises:
        EmptyInputError: If there are no observations
        DimensionMismatchError: If a member's dimensionality differs from the first
    """
    if len(observations) == 0:
        raise EmptyInputError("There is no mean for an empty set of points")

    values = [obs.coordinates().values for obs in observations]
    dimension = values[0].shape[0]
    for i, v in enumerate(values):
        if v.shape[0] != dimension:
            raise DimensionMismatchError(
                f"Observation {i} has dimension {v.shape[0]}, expected {dimension}"
            )

    return Coordinates(torch.stack(values).mean(dim=0))


def average_distance(point: Observation, observations: Sequence[Observation]) -> float:
    """Average distance from ``point`` to a set of observations.

    Members at distance exactly zero (the point itself, or duplicates of it)
    are left out of both the sum and the count. Returns 0.0 when nothing
    remains.
    """
    total = 0.0
    count = 0

    for observation in observations:
        d = point.distance(observation.coordinates())
        if d == 0:
            continue

        count += 1
        total += d

    if count == 0:
        return 0.0
    return total / count
