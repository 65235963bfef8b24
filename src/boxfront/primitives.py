"""Array-level primitives for Pareto ranking and diversity.

This module provides the vectorized building blocks the solution-level API is
built on. Every function works on plain objective arrays (minimization):

- dominance: three-way Pareto comparison of two objective vectors
- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- non_dominated_sort: Deb's fast non-dominated sorting algorithm
- crowding_distance: diversity metric for solutions in a Pareto front
"""

import numpy as np


def dominance(a: np.ndarray, b: np.ndarray) -> int:
    """Three-way Pareto comparison of two objective vectors.

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        -1 if a dominates b, +1 if b dominates a, 0 if neither dominates
        (which includes identical vectors).

    Examples:
        >>> dominance(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        -1
        >>> dominance(np.array([1.0, 2.0]), np.array([0.0, 3.0]))
        0
    """
    a_better = bool(np.any(a < b))
    b_better = bool(np.any(b < a))
    if a_better and not b_better:
        return -1
    if b_better and not a_better:
        return 1
    return 0


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (minimization).

    A solution a dominates b if and only if:
      - a[i] <= b[i] for ALL objectives (a is at least as good everywhere)
      - a[i] < b[i] for AT LEAST ONE objective (a is strictly better somewhere)

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([1.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
    """
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise Pareto dominance for all individuals.

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        individual i dominates individual j.

    Examples:
        >>> dom = dominates_matrix(np.array([[1.0, 1.0], [2.0, 2.0], [0.0, 3.0]]))
        >>> bool(dom[0, 1]), bool(dom[0, 2])
        (True, False)
    """
    a = objectives[:, np.newaxis, :]
    b = objectives[np.newaxis, :, :]
    return np.all(a <= b, axis=2) & np.any(a < b, axis=2)


def non_dominated_sort(objectives: np.ndarray, dom_matrix: np.ndarray | None = None) -> np.ndarray:
    """Assign each individual to a front using Deb's fast algorithm.

    Builds the full domination graph (O(N^2) memory) and peels fronts by
    decrementing domination counts. Time complexity is O(M * N^2) for M
    objectives and N individuals.

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).
        dom_matrix: Optional precomputed (n, n) boolean dominance matrix. When
            given, it replaces Pareto dominance on ``objectives``; this is how
            other dominance relations reuse the same peeling loop.

    Returns:
        Integer array of shape (n,) where rank[i] is the front index for
        individual i. Rank 0 = non-dominated (first front).

    Examples:
        >>> non_dominated_sort(np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 3.0]]))
        array([0, 1, 1])
    """
    n = objectives.shape[0]
    if n == 0:
        return np.array([], dtype=np.int64)

    if dom_matrix is None:
        dom_matrix = dominates_matrix(objectives)

    # domination_count[j] = number of individuals that dominate j
    domination_count = dom_matrix.sum(axis=0).astype(np.int64)
    ranks = np.full(n, -1, dtype=np.int64)

    front = np.flatnonzero(domination_count == 0)
    current_rank = 0
    while front.size > 0:
        ranks[front] = current_rank
        # Individuals dominated by the current front lose one count per dominator
        domination_count -= dom_matrix[front].sum(axis=0)
        domination_count[front] = -1
        front = np.flatnonzero(domination_count == 0)
        current_rank += 1

    if np.any(ranks < 0):
        raise ValueError("dominance relation contains a cycle; it is not a strict partial order")

    return ranks


def crowding_distance(front_objectives: np.ndarray) -> np.ndarray:
    """Compute crowding distance for individuals in a single front.

    For every objective the front is sorted (stable, so ties keep input
    order). The two boundary individuals get infinite distance; each interior
    individual accumulates the normalized gap between its neighbours. A
    dimension with zero range contributes nothing.

    Args:
        front_objectives: Objective values for individuals in ONE front only.
            Shape (n_front, n_obj).

    Returns:
        Array of shape (n_front,) with crowding distances. Higher values
        indicate more isolated (preferred) individuals.

    Examples:
        >>> cd = crowding_distance(np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]]))
        >>> bool(np.isinf(cd[0]) and np.isinf(cd[-1]))
        True
    """
    n_front = front_objectives.shape[0]

    if n_front == 0:
        return np.array([], dtype=np.float64)
    if n_front <= 2:
        # Every member is a boundary point
        return np.full(n_front, np.inf)

    n_obj = front_objectives.shape[1]
    distances = np.zeros(n_front, dtype=np.float64)

    for m in range(n_obj):
        order = np.argsort(front_objectives[:, m], kind="stable")
        values = front_objectives[order, m]
        obj_range = values[-1] - values[0]

        if np.isfinite(obj_range) and obj_range > 0:
            distances[order[1:-1]] += (values[2:] - values[:-2]) / obj_range

        distances[order[0]] = np.inf
        distances[order[-1]] = np.inf

    return distances
