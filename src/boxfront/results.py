"""Result types returned by survivor selection.

Survivors bundles the selected solutions with the rank and crowding metadata
computed while selecting them, so drivers never need to stash that data on
the solutions themselves. The class is immutable (frozen dataclass) and
copies its arrays on construction.
"""

from dataclasses import dataclass

import numpy as np

from boxfront.population import Population


@dataclass(frozen=True)
class Survivors:
    """Outcome of rank-and-crowding truncation.

    Attributes:
        population: The selected solutions, in selection order.
        indices: Position of each survivor in the original pool, shape (k,).
        rank: Front rank of each survivor within the pool, shape (k,).
            Rank 0 indicates non-dominated survivors.
        crowding_distance: Crowding distance of each survivor, recomputed
            among the survivors of its front, shape (k,). Boundary members
            are infinite.

    Example:
        >>> pop = Population.from_objectives([[0.5, 0.5], [0.3, 0.7], [0.6, 0.6]])
        >>> result = Survivors(
        ...     population=pop,
        ...     indices=np.array([0, 1, 2]),
        ...     rank=np.array([0, 0, 1]),
        ...     crowding_distance=np.array([np.inf, np.inf, np.inf]),
        ... )
        >>> len(result.pareto_front)
        2
    """

    population: Population
    indices: np.ndarray
    rank: np.ndarray
    crowding_distance: np.ndarray

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If an array field is not a numpy array.
            ValueError: If array shapes or dtypes are inconsistent.
        """
        n = len(self.population)

        for name in ("indices", "rank", "crowding_distance"):
            value = getattr(self, name)
            if not isinstance(value, np.ndarray):
                raise TypeError(f"{name} must be a numpy array, got {type(value).__name__}")
            if value.ndim != 1:
                raise ValueError(f"{name} must be 1D, got shape {value.shape}")
            if value.shape[0] != n:
                raise ValueError(f"{name} has {value.shape[0]} elements, expected {n} to match population size")
            object.__setattr__(self, name, value.copy())

        if n and not np.issubdtype(self.rank.dtype, np.integer):
            raise ValueError(f"rank must have integer dtype, got {self.rank.dtype}")

    def __len__(self) -> int:
        return len(self.population)

    @property
    def pareto_front(self) -> Population:
        """Survivors with rank 0, as a new Population."""
        return self.population.subset(np.flatnonzero(self.rank == 0))

    def state(self) -> dict[str, np.ndarray]:
        """Return rank and crowding arrays keyed the way selectors report state."""
        return {"rank": self.rank.copy(), "crowding_distance": self.crowding_distance.copy()}
