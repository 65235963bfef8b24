"""Non-dominated sorting of solutions into ranked fronts.

This module lifts the array primitives to the solution level:

- Front: one ranked front, holding its members and their input positions
- nondominated_sort: partition solutions into fronts with any comparator
- rank_array: flatten fronts back into a per-solution rank vector
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from boxfront.population import Population
from boxfront.primitives import non_dominated_sort
from boxfront.protocols import DominanceComparator
from boxfront.solution import Solution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Front:
    """A ranked front of mutually non-dominated solutions.

    Attributes:
        rank: Front index, 0 for the non-dominated front.
        indices: Positions of the members in the sorted input, ascending.
        solutions: The members, in the same order as ``indices``.
    """

    rank: int
    indices: np.ndarray
    solutions: tuple[Solution, ...]

    def __post_init__(self) -> None:
        indices = np.asarray(self.indices, dtype=np.intp).copy()
        if indices.ndim != 1:
            raise ValueError(f"indices must be 1D, got shape {indices.shape}")
        if indices.shape[0] != len(self.solutions):
            raise ValueError(f"front has {indices.shape[0]} indices but {len(self.solutions)} solutions")
        indices.flags.writeable = False
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "solutions", tuple(self.solutions))

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self):
        return iter(self.solutions)

    @property
    def objectives(self) -> np.ndarray:
        """Objective matrix of the members, shape (len(front), n_obj)."""
        return Population(self.solutions).objectives


def _comparator_matrix(solutions: Sequence[Solution], comparator: DominanceComparator) -> np.ndarray:
    """Build the (n, n) domination graph by comparing every pair once."""
    n = len(solutions)
    dom = np.zeros((n, n), dtype=bool)
    for i in range(n):
        for j in range(i + 1, n):
            flag = comparator.compare(solutions[i], solutions[j])
            if flag < 0:
                dom[i, j] = True
            elif flag > 0:
                dom[j, i] = True
    return dom


def nondominated_sort(
    solutions: Population | Sequence[Solution],
    comparator: DominanceComparator | None = None,
) -> list[Front]:
    """Partition solutions into ranked fronts (Deb's fast non-dominated sort).

    Every solution is compared against every other once to build the
    domination graph, then fronts are peeled off: front 0 holds the solutions
    nobody dominates, front 1 those dominated only by front 0, and so on.

    Args:
        solutions: The solutions to sort.
        comparator: Dominance relation to sort by. None selects Pareto
            dominance on the objective values, computed vectorized.

    Returns:
        List of fronts ordered by rank. Every input solution appears in
        exactly one front. An empty input yields an empty list.

    Raises:
        DimensionMismatchError: If the solutions disagree on objective width.

    Example:
        >>> pop = Population.from_objectives([[1.0, 1.0], [2.0, 2.0], [1.0, 3.0]])
        >>> [f.indices.tolist() for f in nondominated_sort(pop)]
        [[0], [1, 2]]
    """
    pop = solutions if isinstance(solutions, Population) else Population(tuple(solutions))
    if len(pop) == 0:
        return []

    dom = None if comparator is None else _comparator_matrix(pop.solutions, comparator)
    ranks = non_dominated_sort(pop.objectives, dom_matrix=dom)

    fronts = []
    for r in range(int(ranks.max()) + 1):
        idx = np.flatnonzero(ranks == r)
        fronts.append(Front(rank=r, indices=idx, solutions=tuple(pop.solutions[i] for i in idx)))

    logger.debug("sorted %d solutions into %d fronts", len(pop), len(fronts))
    return fronts


def rank_array(fronts: Sequence[Front], n: int) -> np.ndarray:
    """Flatten fronts into a rank vector aligned with the sorted input.

    Args:
        fronts: Fronts returned by nondominated_sort.
        n: Size of the sorted input.

    Returns:
        Integer array of shape (n,) with rank[i] the front of solution i.

    Raises:
        ValueError: If the fronts do not cover every position exactly once.
    """
    ranks = np.full(n, -1, dtype=np.int64)
    for front in fronts:
        if np.any(ranks[front.indices] >= 0):
            raise ValueError(f"front {front.rank} repeats an already ranked index")
        ranks[front.indices] = front.rank
    if np.any(ranks < 0):
        raise ValueError(f"fronts cover {int(np.sum(ranks >= 0))} of {n} solutions")
    return ranks
