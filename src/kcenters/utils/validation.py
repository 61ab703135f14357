"""
Input validation and conversion utilities.

Provides the boundary checks shared by cluster construction, distance
computation and the projection helpers, plus conversion of raw arrays into
the tensors and ``Coordinates`` the rest of the package works with.
"""

from typing import Sequence, Union
import torch
from torch import Tensor
import numpy as np

from ..errors import (
    InvalidInputError, DimensionMismatchError, IndexOutOfRangeError
)

DTYPE = torch.float64


def to_values(values: Union[Tensor, np.ndarray, Sequence[float]]) -> Tensor:
    """Convert coordinate values to a 1-D float64 tensor on the CPU.

    Args:
        values: Tensor, numpy array, list or tuple of numbers

    Returns:
        1-D float64 tensor (a copy, never a view of the input)

    Raises:
        TypeError: If the input type cannot be converted
        InvalidInputError: If the input is not one-dimensional
    """
    if isinstance(values, Tensor):
        X = values.detach().to(dtype=DTYPE, device='cpu').clone()
    elif isinstance(values, np.ndarray):
        X = torch.from_numpy(np.array(values, dtype=np.float64))
    elif isinstance(values, (list, tuple)):
        X = torch.tensor([float(v) for v in values], dtype=DTYPE)
    else:
        raise TypeError(f"Cannot convert {type(values)} to coordinate values")

    if X.dim() != 1:
        raise InvalidInputError(f"Expected 1D values, got {X.dim()}D")

    return X


def as_observations(X: Union[Tensor, np.ndarray, Sequence[Sequence[float]]]) -> list:
    """Split an (n, d) array into a list of ``Coordinates``, one per row.

    Args:
        X: Tensor, numpy array, or list of rows

    Returns:
        List of ``n`` Coordinates
    """
    from ..base.observations import Coordinates

    if isinstance(X, (Tensor, np.ndarray)):
        if X.ndim != 2:
            raise InvalidInputError(f"Expected 2D array, got {X.ndim}D")
        return [Coordinates(row) for row in X]
    elif isinstance(X, (list, tuple)):
        return [Coordinates(row) for row in X]
    else:
        raise TypeError(f"Cannot convert {type(X)} to observations")


def check_n_clusters(n_clusters: int) -> int:
    """Validate the requested number of clusters."""
    if not isinstance(n_clusters, (int, np.integer)) or isinstance(n_clusters, bool):
        raise TypeError(f"k must be an integer, got {type(n_clusters)}")
    if n_clusters <= 0:
        raise InvalidInputError(f"k must be greater than 0, got {n_clusters}")
    return int(n_clusters)


def check_dataset(dataset: Sequence) -> int:
    """Validate a dataset and return its dimensionality.

    The dimensionality is taken from the first observation.
    """
    if len(dataset) == 0:
        raise InvalidInputError("Dataset is empty, need at least one observation")

    dimension = len(dataset[0].coordinates())
    if dimension == 0:
        raise InvalidInputError("There must be at least one dimension in the data set")

    return dimension


def check_same_dimension(a: Tensor, b: Tensor) -> None:
    """Raise if two value vectors have different lengths."""
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(
            f"Dimension mismatch: {a.shape[0]} vs {b.shape[0]}"
        )


def check_dim_index(index: int, dimension: int) -> int:
    """Validate a dimension index against a dimensionality."""
    if not 0 <= index < dimension:
        raise IndexOutOfRangeError(
            f"Dimension index {index} out of range for dimension {dimension}"
        )
    return index


def check_cluster_index(index: int, n_clusters: int) -> int:
    """Validate a cluster index against the number of clusters."""
    if not 0 <= index < n_clusters:
        raise IndexOutOfRangeError(
            f"Cluster index {index} out of range for {n_clusters} clusters"
        )
    return index
