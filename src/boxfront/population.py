"""Population container for evaluated solutions.

A Population is an immutable, ordered collection of Solutions that share a
single run-wide objective width and constraint width. It exposes the
objective and constraint values as stacked matrices so that the vectorized
primitives can work on whole populations at once.

Both widths are fixed by the first solution; any later solution with a
different width is a contract violation and raises DimensionMismatchError.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from boxfront.exceptions import DimensionMismatchError
from boxfront.solution import Solution


@dataclass(frozen=True)
class Population:
    """Immutable ordered collection of solutions.

    Attributes:
        solutions: The member solutions, in order.

    Example:
        >>> pop = Population.from_objectives([[0.5, 0.5], [0.3, 0.7], [0.4, 0.6]])
        >>> len(pop)
        3
        >>> pop.n_obj
        2
        >>> pop.objectives.shape
        (3, 2)
    """

    solutions: tuple[Solution, ...] = ()

    def __post_init__(self) -> None:
        """Validate member types and widths.

        Raises:
            TypeError: If a member is not a Solution.
            DimensionMismatchError: If members disagree on objective or
                constraint width.
        """
        solutions = tuple(self.solutions)
        for s in solutions:
            if not isinstance(s, Solution):
                raise TypeError(f"population members must be Solution, got {type(s).__name__}")
        if solutions:
            n_obj = solutions[0].n_obj
            n_constr = solutions[0].n_constr
            for s in solutions[1:]:
                if s.n_obj != n_obj:
                    raise DimensionMismatchError("objectives", n_obj, s.n_obj)
                if s.n_constr != n_constr:
                    raise DimensionMismatchError("constraints", n_constr, s.n_constr)
        object.__setattr__(self, "solutions", solutions)

    @classmethod
    def from_objectives(
        cls,
        objectives: np.ndarray | Sequence[Sequence[float]],
        constraints: np.ndarray | Sequence[Sequence[float]] | None = None,
    ) -> "Population":
        """Build a population from an objective matrix (and optional constraints).

        Args:
            objectives: Objective values, shape (n, n_obj).
            constraints: Constraint magnitudes, shape (n, n_constr), or None
                for an unconstrained population.

        Returns:
            A Population of variable-less solutions.

        Raises:
            ValueError: If the matrices are not 2D or disagree on row count.
        """
        objectives = np.asarray(objectives, dtype=np.float64)
        if objectives.ndim != 2:
            raise ValueError(f"objectives must be 2D, got shape {objectives.shape}")
        n = objectives.shape[0]
        if constraints is None:
            constraints = np.zeros((n, 0))
        constraints = np.asarray(constraints, dtype=np.float64)
        if constraints.ndim != 2:
            raise ValueError(f"constraints must be 2D, got shape {constraints.shape}")
        if constraints.shape[0] != n:
            raise ValueError(f"constraints has {constraints.shape[0]} rows, expected {n} to match objectives")
        return cls(tuple(Solution(objectives=objectives[i], constraints=constraints[i]) for i in range(n)))

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self.solutions)

    def __getitem__(self, idx: int | slice) -> "Solution | Population":
        """Get one solution by integer index, or a sub-population by slice.

        Raises:
            TypeError: If idx is neither an integer nor a slice.
            IndexError: If an integer idx is out of bounds.
        """
        if isinstance(idx, slice):
            return Population(self.solutions[idx])
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers or slices, got {type(idx).__name__}")
        n = len(self)
        if idx < -n or idx >= n:
            raise IndexError(f"index {idx} is out of bounds for population with {n} solutions")
        return self.solutions[idx]

    @property
    def n_obj(self) -> int | None:
        """Number of objectives, or None for an empty population."""
        if not self.solutions:
            return None
        return self.solutions[0].n_obj

    @property
    def n_constr(self) -> int | None:
        """Number of constraints, or None for an empty population."""
        if not self.solutions:
            return None
        return self.solutions[0].n_constr

    @property
    def objectives(self) -> np.ndarray:
        """Objective matrix of shape (n, n_obj); (0, 0) when empty."""
        if not self.solutions:
            return np.zeros((0, 0), dtype=np.float64)
        return np.stack([s.objectives for s in self.solutions])

    @property
    def constraints(self) -> np.ndarray:
        """Constraint matrix of shape (n, n_constr); (0, 0) when empty."""
        if not self.solutions:
            return np.zeros((0, 0), dtype=np.float64)
        return np.stack([s.constraints for s in self.solutions])

    @property
    def feasible_mask(self) -> np.ndarray:
        """Boolean array of shape (n,), True where a solution is feasible."""
        return np.array([s.is_feasible for s in self.solutions], dtype=bool)

    def subset(self, indices: Iterable[int] | np.ndarray) -> "Population":
        """Return a new population with the solutions at the given indices, in that order."""
        return Population(tuple(self.solutions[int(i)] for i in indices))

    def concat(self, other: "Population | Iterable[Solution]") -> "Population":
        """Return a new population with other's solutions appended.

        Raises:
            DimensionMismatchError: If the widths of the two disagree.
        """
        return Population(self.solutions + tuple(other))
