"""Rank-and-crowding survivor selection.

This module implements the elitist, diversity-preserving truncation used by
rank-and-crowding generational algorithms: fronts are taken whole in rank
order, and the one front that does not fit is cut by crowding distance.
"""

from collections.abc import Sequence

import numpy as np

from boxfront.crowding import assign_crowding_distance
from boxfront.population import Population
from boxfront.primitives import crowding_distance
from boxfront.protocols import DominanceComparator
from boxfront.registry import ComparatorRegistry
from boxfront.results import Survivors
from boxfront.solution import Solution
from boxfront.sorting import nondominated_sort, rank_array


def truncate(
    pool: Population | Sequence[Solution],
    k: int,
    comparator: DominanceComparator | None = None,
) -> Survivors:
    """Select exactly k survivors from a pool by rank, then crowding distance.

    1. Sort the pool into fronts.
    2. Add whole fronts in rank order while the total stays within k.
    3. For the front that would overflow, compute its crowding distance and
       take the most isolated members until exactly k are selected. Equal
       distances keep the members' original pool order.

    Args:
        pool: Combined parent+offspring solutions.
        k: Number of survivors.
        comparator: Dominance relation for sorting. None means Pareto.

    Returns:
        Survivors with pool indices, pool ranks, and crowding distances
        recomputed per front among the survivors.

    Raises:
        ValueError: If k is negative or exceeds the pool size.

    Example:
        >>> pool = Population.from_objectives([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0], [5.0, 5.0]])
        >>> survivors = truncate(pool, 3)
        >>> survivors.indices
        array([0, 3, 1])
    """
    pop = pool if isinstance(pool, Population) else Population(tuple(pool))
    n = len(pop)
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k > n:
        raise ValueError(f"k ({k}) cannot exceed pool size ({n})")

    if k == 0:
        return Survivors(
            population=Population(),
            indices=np.array([], dtype=np.intp),
            rank=np.array([], dtype=np.int64),
            crowding_distance=np.array([], dtype=np.float64),
        )

    fronts = nondominated_sort(pop, comparator)

    selected: list[int] = []
    for front in fronts:
        if len(selected) + len(front) <= k:
            selected.extend(front.indices.tolist())
        else:
            # Critical front - most isolated first, ties by pool order
            remaining = k - len(selected)
            cd = assign_crowding_distance(front)
            order = np.argsort(-cd, kind="stable")[:remaining]
            selected.extend(front.indices[order].tolist())
        if len(selected) == k:
            break

    selected_arr = np.array(selected, dtype=np.intp)
    survivors = pop.subset(selected_arr)
    selected_ranks = rank_array(fronts, n)[selected_arr]

    # Crowding among the survivors of each front
    survivor_objectives = survivors.objectives
    selected_cd = np.zeros(k, dtype=np.float64)
    for r in np.unique(selected_ranks):
        mask = selected_ranks == r
        selected_cd[mask] = crowding_distance(survivor_objectives[mask])

    return Survivors(
        population=survivors,
        indices=selected_arr,
        rank=selected_ranks,
        crowding_distance=selected_cd,
    )


def rank_crowding_survival(comparator: str | DominanceComparator | None = None, **comparator_kwargs):
    """Create a rank-and-crowding survivor selector.

    Args:
        comparator: Dominance relation used for sorting, either a comparator
            instance or a name registered in ComparatorRegistry. None means
            Pareto dominance.
        **comparator_kwargs: Passed to the registry factory when comparator
            is a name (e.g. ``epsilons=0.1`` for "epsilon").

    Returns:
        A SurvivorSelector callable that returns survivor indices and state
        with 'rank' and 'crowding_distance' arrays.

    Example:
        >>> selector = rank_crowding_survival()
        >>> indices, state = selector(combined_pop, n_survivors=100)
        >>> rank = state['rank']
    """
    if isinstance(comparator, str):
        comparator = ComparatorRegistry.get(comparator, **comparator_kwargs)

    def selector(
        pop: Population,
        n_survivors: int,
        **kwargs: np.ndarray,
    ) -> tuple[np.ndarray, dict[str, np.ndarray]]:
        """Select survivors by rank, then crowding distance.

        Args:
            pop: Combined pool to select from.
            n_survivors: Number of survivors to keep.
            **kwargs: Unused. Rank and crowding are computed internally.

        Returns:
            Tuple of (indices, state) where state holds 'rank' and
            'crowding_distance' arrays aligned with indices.

        Raises:
            ValueError: If n_survivors is negative or exceeds the pool size.
        """
        result = truncate(pop, n_survivors, comparator)
        return result.indices, result.state()

    return selector
