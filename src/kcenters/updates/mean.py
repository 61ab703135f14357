"""
Mean update strategy for centroid-based clustering.
"""

from typing import Optional, Sequence, TYPE_CHECKING

from ..base.interfaces import ParameterUpdater, Observation, RandomSource
from ..base.observations import Coordinates, center
from ..errors import InvalidInputError

if TYPE_CHECKING:
    from ..base.data_structures import Cluster

EMPTY_CLUSTER_POLICIES = ('keep', 'reseed')


class MeanUpdater(ParameterUpdater):
    """Moves a cluster's center to the mean of its members.

    A cluster without members cannot be averaged. With the default
    ``empty_cluster='keep'`` its center stays where it is, which matches
    classic behaviour but means the cluster may never win members again.
    ``empty_cluster='reseed'`` instead moves the center onto a randomly
    chosen dataset observation; this changes results for a given seed, so it
    must be asked for explicitly.
    """

    def __init__(self,
                 empty_cluster: str = 'keep',
                 dataset: Optional[Sequence[Observation]] = None,
                 random_source: Optional[RandomSource] = None,
                 verbose: int = 0):
        """
        Args:
            empty_cluster: 'keep' or 'reseed'
            dataset: Observations to reseed from (required for 'reseed')
            random_source: Uniform generator used to pick the reseed
                           observation (required for 'reseed')
            verbose: Verbosity level (0=silent, 1=reseed events)
        """
        if empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise InvalidInputError(f"Unknown empty cluster policy: {empty_cluster}")
        if empty_cluster == 'reseed':
            if dataset is None or len(dataset) == 0:
                raise InvalidInputError("Reseeding empty clusters requires a non-empty dataset")
            if random_source is None:
                raise InvalidInputError("Reseeding empty clusters requires a random source")

        self.empty_cluster = empty_cluster
        self.dataset = dataset
        self.random_source = random_source
        self.verbose = verbose

    def compute(self, cluster: 'Cluster', **kwargs) -> Optional[Coordinates]:
        """New center for ``cluster`` from its current members.

        Args:
            cluster: Cluster to read; it is not modified
            **kwargs: Ignored

        Returns:
            Mean of the members, a reseeded center, or None to keep the
            current center of an empty cluster
        """
        if len(cluster.observations) > 0:
            return center(cluster.observations)

        if self.empty_cluster == 'reseed':
            n = len(self.dataset)
            index = min(int(self.random_source.uniform() * n), n - 1)
            if self.verbose:
                print(f"Reseeded empty cluster from observation {index}")
            return Coordinates(self.dataset[index].coordinates().values)

        return None
