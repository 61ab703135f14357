"""
Random initialization strategy for clustering algorithms.

Draws every component of every initial center uniformly from [0, 1) using
an injected ``RandomSource``.
"""

from typing import List, Optional, Sequence
import torch

from ..base.interfaces import InitializationStrategy, Observation, RandomSource
from ..base.observations import Coordinates
from ..utils.validation import DTYPE, check_dataset, check_n_clusters


class TorchRandomSource(RandomSource):
    """Uniform [0, 1) source backed by a private ``torch.Generator``.

    Using a private generator keeps draws reproducible for a given seed
    without touching torch's global RNG state.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Random seed for reproducibility. If None, a
                  non-deterministic seed is used.
        """
        self.generator = torch.Generator()
        if seed is None:
            self.generator.seed()
        else:
            self.generator.manual_seed(seed)

    def uniform(self) -> float:
        return torch.rand(1, generator=self.generator, dtype=DTYPE).item()


class RandomInit(InitializationStrategy):
    """Random initialization with centers drawn from the unit hypercube.

    Centers do not depend on the data values, only on its dimensionality.
    """

    def __init__(self, random_source: Optional[RandomSource] = None,
                 random_state: Optional[int] = None):
        """
        Args:
            random_source: Uniform generator to draw from
            random_state: Seed for a default ``TorchRandomSource`` when
                          no source is given
        """
        if random_source is None:
            random_source = TorchRandomSource(random_state)
        self.random_source = random_source

    def initialize(self, dataset: Sequence[Observation], n_clusters: int,
                   **kwargs) -> List[Coordinates]:
        """Initialize cluster centers with uniform random values.

        Args:
            dataset: Observations; the first one fixes the dimensionality
            n_clusters: Number of clusters

        Returns:
            List of ``n_clusters`` random Coordinates
        """
        dimension = check_dataset(dataset)
        n_clusters = check_n_clusters(n_clusters)

        centers = []
        for _ in range(n_clusters):
            values = [self.random_source.uniform() for _ in range(dimension)]
            centers.append(Coordinates(values))

        return centers
