"""
Initialization from caller-supplied centers.

Useful for warm starts, reproducible runs, or when you have good initial
guesses.
"""

from typing import List, Sequence
import warnings

from ..base.interfaces import InitializationStrategy, Observation
from ..base.observations import Coordinates
from ..errors import InvalidInputError, DimensionMismatchError
from ..utils.validation import check_dataset, check_n_clusters


class FromCentersInit(InitializationStrategy):
    """Initialize from explicit starting centers.

    Accepts ``Coordinates`` or anything ``Coordinates`` can be built from
    (lists, numpy rows, 1-D tensors).
    """

    def __init__(self, initial_centers: Sequence):
        """
        Args:
            initial_centers: One starting center per cluster
        """
        self.initial_centers = initial_centers

    def initialize(self, dataset: Sequence[Observation], n_clusters: int,
                   **kwargs) -> List[Coordinates]:
        """Initialize from the stored centers.

        Args:
            dataset: Observations (used for validation)
            n_clusters: Expected number of clusters

        Returns:
            List of initial centers, in the order given
        """
        dimension = check_dataset(dataset)
        n_clusters = check_n_clusters(n_clusters)

        if len(self.initial_centers) != n_clusters:
            raise InvalidInputError(f"Initial centers has {len(self.initial_centers)} "
                                    f"clusters, but k={n_clusters}")

        centers = []
        for i, c in enumerate(self.initial_centers):
            if not isinstance(c, Coordinates):
                c = Coordinates(c)
            if len(c) != dimension:
                raise DimensionMismatchError(f"Initial center {i} has dimension {len(c)}, "
                                             f"but data has dimension {dimension}")
            centers.append(c)

        for i in range(len(centers)):
            for j in range(i + 1, len(centers)):
                if centers[i].distance(centers[j]) == 0:
                    warnings.warn(f"Initial centers {i} and {j} coincide; "
                                  f"ties resolve to the lowest index")

        return centers
