"""Crowding distance at the solution level.

Thin wrappers around ``primitives.crowding_distance`` that accept fronts,
populations, or plain sequences of solutions. Distances are returned as
arrays aligned with the input; nothing is written onto the solutions.
"""

from collections.abc import Sequence

import numpy as np

from boxfront.population import Population
from boxfront.primitives import crowding_distance
from boxfront.solution import Solution
from boxfront.sorting import Front


def assign_crowding_distance(front: Front | Population | Sequence[Solution]) -> np.ndarray:
    """Compute the crowding distance of every member of one front.

    Args:
        front: Members of a single front. They are assumed to be mutually
            non-dominated; the metric is still defined if they are not.

    Returns:
        Float array of shape (len(front),), aligned with the front's order.
        Boundary members of every objective are infinite.

    Example:
        >>> pop = Population.from_objectives([[0.0, 4.0], [1.0, 3.0], [4.0, 0.0]])
        >>> assign_crowding_distance(pop)
        array([inf,  2., inf])
    """
    if isinstance(front, Front):
        objectives = front.objectives
    elif isinstance(front, Population):
        objectives = front.objectives
    else:
        objectives = Population(tuple(front)).objectives
    return crowding_distance(objectives)


def crowding_for_fronts(fronts: Sequence[Front], n: int) -> np.ndarray:
    """Compute crowding distance within each front, for all fronts at once.

    Args:
        fronts: Fronts returned by nondominated_sort.
        n: Size of the sorted input.

    Returns:
        Float array of shape (n,) where entry i is the crowding distance of
        solution i measured within its own front.
    """
    cd = np.zeros(n, dtype=np.float64)
    for front in fronts:
        cd[front.indices] = assign_crowding_distance(front)
    return cd
