"""
Exceptions raised by the kcenters primitives.

All errors derive from ``ClusteringError`` which is itself a ``ValueError``,
so callers that only care about bad input can keep catching ``ValueError``.
"""


class ClusteringError(ValueError):
    """Base class for every error raised by this package."""


class InvalidInputError(ClusteringError):
    """Bad construction arguments: k, dataset shape, center count, options."""


class EmptyInputError(ClusteringError):
    """An operation that needs at least one observation received none."""


class DimensionMismatchError(ClusteringError):
    """Two coordinate vectors that must share a length do not."""


class IndexOutOfRangeError(ClusteringError, IndexError):
    """A dimension or cluster index lies outside the valid range."""
