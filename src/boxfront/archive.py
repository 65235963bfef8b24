"""Archives that track the best-known approximation of the Pareto front.

Two archives are provided:

- NondominatedArchive: keeps every solution not dominated by another entry,
  under any comparator (constrained Pareto by default). Its size is unbounded.
- EpsilonBoxArchive: keeps at most one solution per epsilon box and only
  boxes that are mutually non-dominated. Its size is bounded by the number
  of distinct non-dominated boxes, however many generations feed it.

Both are safe to feed from several evaluation workers: every mutation and
every read happens under the archive's lock.
"""

import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np

from boxfront.comparators import (
    AggregateConstraintComparator,
    ChainedComparator,
    ConstrainedDominance,
    EpsilonBoxDominance,
)
from boxfront.epsilons import Epsilons
from boxfront.exceptions import DimensionMismatchError
from boxfront.population import Population
from boxfront.protocols import DominanceComparator
from boxfront.solution import Solution

logger = logging.getLogger(__name__)

# Solutions closer than this (Euclidean, objective space) count as duplicates
DUPLICATE_TOLERANCE = 1e-10


@dataclass(frozen=True)
class ArchiveUpdate:
    """Outcome of a single ``add`` call.

    Attributes:
        added: Whether the candidate is now retained.
        replaced: Number of retained solutions the candidate displaced.
        same_box: Whether the decision was made by the same-box residual
            tie-break (epsilon archives only).
        size: Archive size after the call.

    The update is truthy exactly when the candidate was added.
    """

    added: bool
    replaced: int = 0
    same_box: bool = False
    size: int = 0

    def __bool__(self) -> bool:
        return self.added


class NondominatedArchive:
    """Unbounded archive of mutually non-dominated solutions.

    A candidate is rejected if any entry dominates it or if an entry has the
    same objective values (within DUPLICATE_TOLERANCE). Otherwise every entry
    it dominates is removed and the candidate is appended.

    The first accepted solution fixes the archive's objective and constraint
    widths. A later solution of a different width raises
    DimensionMismatchError before the archive is touched.

    Args:
        comparator: Dominance relation. Defaults to ConstrainedDominance,
            which is plain Pareto dominance for unconstrained solutions.

    Example:
        >>> archive = NondominatedArchive()
        >>> bool(archive.add(Solution(objectives=[1.0, 2.0])))
        True
        >>> archive.add(Solution(objectives=[0.5, 1.0])).replaced
        1
        >>> len(archive)
        1
    """

    def __init__(self, comparator: DominanceComparator | None = None) -> None:
        self.comparator = comparator if comparator is not None else ConstrainedDominance()
        self._solutions: list[Solution] = []
        self._n_obj: int | None = None
        self._n_constr: int | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, solution: Solution) -> ArchiveUpdate:
        """Offer a solution to the archive.

        Args:
            solution: A fully evaluated solution.

        Returns:
            ArchiveUpdate describing the decision.

        Raises:
            TypeError: If solution is not a Solution.
            DimensionMismatchError: If its objective or constraint width
                differs from the archive's.
        """
        with self._lock:
            return self._add_locked(solution)

    def add_all(self, solutions: Iterable[Solution]) -> int:
        """Offer several solutions in order under a single lock acquisition.

        Other threads never observe the archive between two of these adds.

        Returns:
            Number of solutions that were added.
        """
        with self._lock:
            return sum(1 for s in solutions if self._add_locked(s).added)

    def clear(self) -> None:
        """Remove every entry. The established widths are kept."""
        with self._lock:
            self._solutions.clear()
            self._reset_counters()

    def _add_locked(self, solution: Solution) -> ArchiveUpdate:
        if not isinstance(solution, Solution):
            raise TypeError(f"archive entries must be Solution, got {type(solution).__name__}")
        self._check_width(solution)
        update = self._offer(solution)
        if update.added and self._n_obj is None:
            self._n_obj = solution.n_obj
            self._n_constr = solution.n_constr
        logger.debug(
            "archive %s %s (replaced=%d, same_box=%s, size=%d)",
            "accepted" if update.added else "rejected",
            solution.objectives.tolist(),
            update.replaced,
            update.same_box,
            update.size,
        )
        return update

    def _check_width(self, solution: Solution) -> None:
        if self._n_obj is not None and solution.n_obj != self._n_obj:
            raise DimensionMismatchError("objectives", self._n_obj, solution.n_obj)
        if self._n_constr is not None and solution.n_constr != self._n_constr:
            raise DimensionMismatchError("constraints", self._n_constr, solution.n_constr)

    def _offer(self, solution: Solution) -> ArchiveUpdate:
        dominated: list[int] = []
        for i, member in enumerate(self._solutions):
            flag = self.comparator.compare(solution, member)
            if flag < 0:
                dominated.append(i)
            elif flag > 0 or self._is_duplicate(solution, member):
                return ArchiveUpdate(added=False, size=len(self._solutions))
        self._replace(dominated, solution)
        return ArchiveUpdate(added=True, replaced=len(dominated), size=len(self._solutions))

    def _replace(self, indices: list[int], solution: Solution) -> None:
        for i in reversed(indices):
            del self._solutions[i]
        self._solutions.append(solution.copy())

    def _reset_counters(self) -> None:
        """Hook for subclasses that keep progress counters."""

    @staticmethod
    def _is_duplicate(a: Solution, b: Solution) -> bool:
        return bool(np.linalg.norm(a.objectives - b.objectives) < DUPLICATE_TOLERANCE)

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    @property
    def n_obj(self) -> int | None:
        """Objective width fixed by the first accepted solution, or None."""
        return self._n_obj

    @property
    def n_constr(self) -> int | None:
        """Constraint width fixed by the first accepted solution, or None."""
        return self._n_constr

    def snapshot(self) -> tuple[Solution, ...]:
        """Return the current entries as an immutable tuple."""
        with self._lock:
            return tuple(self._solutions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._solutions)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self.snapshot())

    def __getitem__(self, idx: int) -> Solution:
        with self._lock:
            return self._solutions[idx]

    def __contains__(self, solution: object) -> bool:
        return solution in self.snapshot()

    @property
    def objectives(self) -> np.ndarray:
        """Objective matrix of the entries, shape (len, n_obj)."""
        entries = self.snapshot()
        if not entries:
            return np.zeros((0, self._n_obj or 0), dtype=np.float64)
        return np.stack([s.objectives for s in entries])

    @property
    def variables(self) -> list[tuple]:
        """Decision variables of the entries, in archive order."""
        return [s.variables for s in self.snapshot()]

    def to_population(self) -> Population:
        """Return the entries as a Population."""
        return Population(self.snapshot())

    def export(self) -> list[dict[str, Any]]:
        """Return the entries as plain records for an external writer.

        Each record holds ``variables`` and ``objectives`` lists, plus
        ``constraints`` when the solutions have any.

        Example:
            >>> archive = NondominatedArchive()
            >>> _ = archive.add(Solution(objectives=[1.0, 2.0], variables=(0.5,)))
            >>> archive.export()
            [{'variables': [0.5], 'objectives': [1.0, 2.0]}]
        """
        records = []
        for s in self.snapshot():
            record: dict[str, Any] = {
                "variables": [v.tolist() if isinstance(v, np.ndarray) else v for v in s.variables],
                "objectives": s.objectives.tolist(),
            }
            if s.n_constr:
                record["constraints"] = s.constraints.tolist()
            records.append(record)
        return records


class EpsilonBoxArchive(NondominatedArchive):
    """Archive keeping one solution per non-dominated epsilon box.

    A candidate is compared with every entry on constraints first, then by
    epsilon-box dominance:

    - a feasible entry rejects an infeasible candidate, and between two
      infeasible solutions the smaller total violation wins;
    - an entry whose box dominates the candidate's box rejects it;
    - an entry in the candidate's own box rejects it unless the candidate
      lies strictly closer to the box's lower corner (smaller residual sum),
      in which case the candidate replaces it;
    - entries the candidate beats are removed;
    - otherwise the candidate is appended.

    The archive also counts epsilon-progress: ``improvements`` is the number
    of accepted candidates that did not merely replace a same-box entry, and
    ``dominating_improvements`` the number that removed at least one entry
    from another box.

    Args:
        epsilons: Box tolerances, as Epsilons, a scalar, or a sequence.

    Raises:
        DimensionMismatchError: From ``add`` if a solution's objective or
            constraint width differs from the archive's, or the tolerances
            are wider than its objectives.

    Example:
        >>> archive = EpsilonBoxArchive(1.0)
        >>> archive.add_all(Solution(objectives=o) for o in [(0, 10), (1, 9), (5, 5), (10, 0)])
        4
        >>> bool(archive.add(Solution(objectives=[0.5, 10.5])))
        False
    """

    def __init__(self, epsilons: Epsilons | float | list[float] | tuple[float, ...]) -> None:
        self.box_comparator = EpsilonBoxDominance(epsilons)
        super().__init__(ChainedComparator(AggregateConstraintComparator(), self.box_comparator))
        self.epsilons: Epsilons = self.box_comparator.epsilons
        self.improvements = 0
        self.dominating_improvements = 0

    def __repr__(self) -> str:
        return f"EpsilonBoxArchive({self.epsilons!r}, size={len(self)})"

    def _check_width(self, solution: Solution) -> None:
        super()._check_width(solution)
        self.epsilons.expand(solution.n_obj)

    def _residual_sum(self, solution: Solution) -> float:
        return float(self.epsilons.residual(solution.objectives).sum())

    def _offer(self, solution: Solution) -> ArchiveUpdate:
        dominated: list[int] = []
        same_box = False
        for i, member in enumerate(self._solutions):
            flag = self.comparator.compare(solution, member)
            in_box = flag == 0 and self.box_comparator.same_box(solution, member)
            if in_box:
                # Nearer the box corner wins; the incumbent keeps exact ties
                flag = -1 if self._residual_sum(solution) < self._residual_sum(member) else 1
            if flag < 0:
                dominated.append(i)
                same_box = same_box or in_box
            elif flag > 0:
                return ArchiveUpdate(added=False, same_box=in_box, size=len(self._solutions))

        self._replace(dominated, solution)
        if not same_box:
            self.improvements += 1
            if dominated:
                self.dominating_improvements += 1
        return ArchiveUpdate(added=True, replaced=len(dominated), same_box=same_box, size=len(self._solutions))

    def _reset_counters(self) -> None:
        self.improvements = 0
        self.dominating_improvements = 0

    def box_indices(self) -> np.ndarray:
        """Return the box index of every entry, shape (len, n_obj)."""
        objectives = self.objectives
        if objectives.shape[0] == 0:
            return np.zeros(objectives.shape, dtype=np.int64)
        return self.epsilons.box_index(objectives)
