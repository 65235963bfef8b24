"""Dominance comparators.

Every comparator implements the DominanceComparator protocol: ``compare(a, b)``
returns -1 when a is better, +1 when b is better, and 0 when neither is. They
are pure and can be shared between threads.

- ParetoDominance: plain Pareto dominance on objective values
- AggregateConstraintComparator: feasibility first, then total violation
- ConstrainedDominance: constraints first, then Pareto dominance
- EpsilonBoxDominance: Pareto dominance on epsilon-box indices
- LexicographicDominance: first differing objective decides
- ChainedComparator: first non-zero outcome of several comparators
"""

from collections.abc import Sequence

import numpy as np

from boxfront.epsilons import Epsilons
from boxfront.exceptions import DimensionMismatchError
from boxfront.primitives import dominance
from boxfront.protocols import DominanceComparator
from boxfront.solution import Solution


def _check_widths(a: Solution, b: Solution) -> None:
    if a.n_obj != b.n_obj:
        raise DimensionMismatchError("objectives", a.n_obj, b.n_obj)


class _Comparator:
    """Shared call/repr plumbing for the built-in comparators.

    Subclasses provide ``compare`` as required by DominanceComparator.
    """

    def __call__(self, a: Solution, b: Solution) -> int:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ParetoDominance(_Comparator):
    """Pareto dominance on raw objective values, ignoring constraints.

    Example:
        >>> a = Solution(objectives=[1.0, 2.0])
        >>> ParetoDominance().compare(a, Solution(objectives=[1.0, 3.0]))
        -1
        >>> ParetoDominance().compare(a, Solution(objectives=[0.0, 3.0]))
        0
    """

    def compare(self, a: Solution, b: Solution) -> int:
        _check_widths(a, b)
        return dominance(a.objectives, b.objectives)


class AggregateConstraintComparator(_Comparator):
    """Orders solutions by constraint satisfaction only.

    A feasible solution beats an infeasible one outright. Between two
    infeasible solutions the one with strictly smaller total violation wins.
    Two feasible solutions, or two with equal violation, compare as 0.
    """

    def compare(self, a: Solution, b: Solution) -> int:
        a_feasible = a.is_feasible
        b_feasible = b.is_feasible
        if a_feasible and b_feasible:
            return 0
        if a_feasible:
            return -1
        if b_feasible:
            return 1
        a_violation = a.total_violation
        b_violation = b.total_violation
        if a_violation < b_violation:
            return -1
        if b_violation < a_violation:
            return 1
        return 0


class ChainedComparator(_Comparator):
    """Applies comparators in order; the first non-zero outcome wins.

    Args:
        *comparators: Comparators to consult, highest priority first.

    Raises:
        ValueError: If no comparators are given.
    """

    def __init__(self, *comparators: DominanceComparator) -> None:
        if not comparators:
            raise ValueError("ChainedComparator requires at least one comparator")
        self.comparators: tuple[DominanceComparator, ...] = tuple(comparators)

    def compare(self, a: Solution, b: Solution) -> int:
        for comparator in self.comparators:
            flag = comparator.compare(a, b)
            if flag != 0:
                return flag
        return 0

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.comparators)
        return f"ChainedComparator({inner})"


class ConstrainedDominance(ChainedComparator):
    """Constraint-aware Pareto dominance.

    Feasibility and total violation decide first; ties fall back to
    feasibility-blind Pareto dominance.

    Example:
        >>> feasible = Solution(objectives=[5.0, 5.0], constraints=[0.0])
        >>> infeasible = Solution(objectives=[1.0, 1.0], constraints=[0.1])
        >>> ConstrainedDominance().compare(feasible, infeasible)
        -1
    """

    def __init__(self) -> None:
        super().__init__(AggregateConstraintComparator(), ParetoDominance())

    def __repr__(self) -> str:
        return "ConstrainedDominance()"


class EpsilonBoxDominance(_Comparator):
    """Pareto dominance computed on epsilon-box indices.

    Objective values are divided by the tolerances and floored, so solutions
    closer than one epsilon in every dimension land in the same box. Two
    solutions in the same box compare as 0: they are near-duplicates, and
    which one to keep is an archive decision (see EpsilonBoxArchive).

    Args:
        epsilons: Tolerances, as an Epsilons instance, a scalar, or a sequence.

    Example:
        >>> cmp = EpsilonBoxDominance(1.0)
        >>> cmp.compare(Solution(objectives=[0.9, 0.9]), Solution(objectives=[1.1, 1.1]))
        -1
        >>> cmp.compare(Solution(objectives=[0.0, 10.0]), Solution(objectives=[0.5, 10.5]))
        0
    """

    def __init__(self, epsilons: Epsilons | float | Sequence[float]) -> None:
        self.epsilons = epsilons if isinstance(epsilons, Epsilons) else Epsilons(epsilons)

    def __repr__(self) -> str:
        return f"EpsilonBoxDominance({self.epsilons!r})"

    def compare(self, a: Solution, b: Solution) -> int:
        _check_widths(a, b)
        return dominance(self.epsilons.box_index(a.objectives), self.epsilons.box_index(b.objectives))

    def same_box(self, a: Solution, b: Solution) -> bool:
        """Return True if a and b occupy the identical epsilon box.

        Raises:
            DimensionMismatchError: If a and b disagree on objective width,
                or the tolerances are wider than the objectives.
        """
        _check_widths(a, b)
        return bool(np.array_equal(self.epsilons.box_index(a.objectives), self.epsilons.box_index(b.objectives)))


class LexicographicDominance(_Comparator):
    """Compares objectives in index order; the first strict difference decides.

    This is a total preorder meant for explicitly priority-ordered use cases.
    It is never selected by default.

    Example:
        >>> cmp = LexicographicDominance()
        >>> cmp.compare(Solution(objectives=[0.0, 1.0]), Solution(objectives=[1.0, 0.0]))
        -1
    """

    def compare(self, a: Solution, b: Solution) -> int:
        _check_widths(a, b)
        diff = np.flatnonzero(a.objectives != b.objectives)
        if diff.size == 0:
            return 0
        i = diff[0]
        return -1 if a.objectives[i] < b.objectives[i] else 1


def default_comparator(n_constraints: int = 0) -> DominanceComparator:
    """Return the default comparator for a problem.

    Args:
        n_constraints: Number of constraints the problem declares.

    Returns:
        ConstrainedDominance when the problem has constraints, otherwise
        ParetoDominance.
    """
    if n_constraints < 0:
        raise ValueError(f"n_constraints must be non-negative, got {n_constraints}")
    return ConstrainedDominance() if n_constraints > 0 else ParetoDominance()
