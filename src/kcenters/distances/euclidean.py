"""
Euclidean distance metric for clustering.

Squared distances are used throughout: nearest-center and neighbour
decisions only depend on the ordering of distances, which the square root
does not change.
"""

import torch
from torch import Tensor

from ..utils.validation import check_same_dimension


def squared_euclidean(a: Tensor, b: Tensor) -> float:
    """Squared Euclidean distance ||a - b||² between two value vectors.

    Args:
        a: (d,) tensor
        b: (d,) tensor

    Returns:
        Sum over dimensions of (a[i] - b[i])²

    Raises:
        DimensionMismatchError: If the vectors differ in length
    """
    check_same_dimension(a, b)
    diff = a - b
    return torch.sum(diff * diff).item()


class EuclideanDistance:
    """Euclidean distance between two ``Coordinates``.

    Computes ||a - b||², or ||a - b|| when ``squared`` is False.
    """

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, a, b) -> float:
        """Compute the distance between two Coordinates."""
        squared_distance = squared_euclidean(a.values, b.values)

        if self.squared:
            return squared_distance
        else:
            return squared_distance ** 0.5
