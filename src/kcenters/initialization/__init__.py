"""Initialization strategies for cluster centers."""

from .random import RandomInit, TorchRandomSource
from .from_centers import FromCentersInit

__all__ = [
    'RandomInit',
    'TorchRandomSource',
    'FromCentersInit'
]
