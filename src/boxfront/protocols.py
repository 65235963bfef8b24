"""Protocol definitions for the pluggable parts of the engine.

Two seams are pluggable:

1. **Dominance comparison**: how two solutions are ordered. Pareto,
   constraint-aware, epsilon-box and lexicographic variants all implement
   DominanceComparator and can be swapped wherever a comparator is accepted
   (non-dominated sorting, truncation, archives).

2. **Survivor selection**: which members of a combined parent+offspring pool
   survive to the next generation. The engine ships rank-and-crowding
   truncation; drivers may register their own.

Example usage:
    ```python
    def my_driver(comparator: DominanceComparator, survive: SurvivorSelector, ...):
        fronts = nondominated_sort(pool, comparator)
        indices, state = survive(pool, n_survivors=100)
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np

from boxfront.population import Population
from boxfront.solution import Solution


@runtime_checkable
class DominanceComparator(Protocol):
    """Protocol for three-way dominance comparison between two solutions.

    The outcome is one of:

    - ``-1``: a is better than (dominates) b
    - ``0``: neither dominates the other; this is *not* equality
    - ``+1``: b is better than (dominates) a

    Implementations must be consistent with a strict partial order and must
    not mutate either argument.

    Example:
        ```python
        class FirstObjective:
            def compare(self, a: Solution, b: Solution) -> int:
                return int(np.sign(a.objectives[0] - b.objectives[0]))

            def __call__(self, a: Solution, b: Solution) -> int:
                return self.compare(a, b)
        ```
    """

    def compare(self, a: Solution, b: Solution) -> int:
        """Compare a against b.

        Args:
            a: First solution.
            b: Second solution.

        Returns:
            -1 if a dominates b, +1 if b dominates a, 0 otherwise.
        """
        ...

    def __call__(self, a: Solution, b: Solution) -> int:
        """Alias for compare."""
        ...


@runtime_checkable
class SurvivorSelector(Protocol):
    """Protocol for survivor selection strategies.

    Survivor selectors determine which individuals survive to the next
    generation from a combined parent+offspring pool.

    Parameters:
        pop: The combined pool to select survivors from.
        n_survivors: Number of individuals to keep.
        **kwargs: Strategy-specific input data.

    Returns:
        A tuple of:
        - indices: Array of indices into ``pop`` for the selected survivors,
          shape (n_survivors,), unique values in range [0, len(pop)).
        - state: Dictionary of arrays aligned with the survivors, e.g.
          ``{'rank': ..., 'crowding_distance': ...}`` for rank-and-crowding.

    Example:
        ```python
        def first_objective_selector(pop, n_survivors, **kwargs):
            order = np.argsort(pop.objectives[:, 0], kind="stable")[:n_survivors]
            return order, {}
        ```
    """

    def __call__(
        self,
        pop: Population,
        n_survivors: int,
        **kwargs: np.ndarray,
    ) -> tuple[np.ndarray, dict[str, np.ndarray]]:
        """Select survivor indices from the pool.

        Args:
            pop: The combined pool to select survivors from.
            n_survivors: Number of survivors to select.
            **kwargs: Strategy-specific input data.

        Returns:
            Tuple of (indices, state).
        """
        ...
