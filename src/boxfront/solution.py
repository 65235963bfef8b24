"""Solution value type shared by every component of the engine.

A Solution bundles the decision variables an external evaluator assigned, the
objective values it computed (minimization-normalized), and the constraint
violation magnitudes (0 = satisfied). The engine never looks inside the
variables; only objectives and constraints drive dominance.

Objective and constraint arrays are copied on construction and marked
read-only, so a Solution retained by an archive cannot be changed behind its
back by the evaluator that produced it.
"""

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike


def _frozen_vector(values: ArrayLike, name: str) -> np.ndarray:
    """Copy values into a read-only 1D float64 array."""
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


def _values_equal(a: Any, b: Any) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


@dataclass(frozen=True, eq=False)
class Solution:
    """An evaluated candidate solution.

    Attributes:
        objectives: Objective values, shape (n_obj,). Lower is better.
        constraints: Constraint violation magnitudes, shape (n_constr,).
            A value of exactly 0 means the constraint is satisfied.
        variables: Decision variables, type-erased. Each entry may be a real,
            an integer, a permutation, a subset, a bit vector, or anything
            else the evaluator understands.
        attributes: Scratch mapping for algorithm drivers. Not part of
            equality and never read or written by the engine.

    Example:
        >>> s = Solution(objectives=[1.0, 2.0], constraints=[0.0], variables=(0.5, 3))
        >>> s.n_obj
        2
        >>> s.is_feasible
        True
    """

    objectives: np.ndarray
    constraints: np.ndarray = field(default_factory=lambda: np.zeros(0))
    variables: tuple = ()
    attributes: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate and freeze the objective and constraint vectors.

        Raises:
            TypeError: If variables is not a sequence.
            ValueError: If objectives is empty or either vector is not 1D.
        """
        objectives = _frozen_vector(self.objectives, "objectives")
        if objectives.shape[0] == 0:
            raise ValueError("objectives must contain at least one value")
        object.__setattr__(self, "objectives", objectives)
        object.__setattr__(self, "constraints", _frozen_vector(self.constraints, "constraints"))

        if isinstance(self.variables, (str, bytes)) or not isinstance(self.variables, Sequence):
            raise TypeError(f"variables must be a sequence, got {type(self.variables).__name__}")
        object.__setattr__(self, "variables", tuple(self.variables))

    @property
    def n_obj(self) -> int:
        """Number of objectives."""
        return self.objectives.shape[0]

    @property
    def n_constr(self) -> int:
        """Number of constraints."""
        return self.constraints.shape[0]

    @property
    def is_feasible(self) -> bool:
        """True iff every constraint magnitude is exactly zero."""
        return bool(np.all(self.constraints == 0.0))

    @property
    def total_violation(self) -> float:
        """Sum of absolute constraint magnitudes."""
        return float(np.abs(self.constraints).sum())

    def copy(self) -> "Solution":
        """Return an independent copy.

        Variables are deep-copied and the attribute mapping is duplicated, so
        mutating the copy's mutable variables or attributes leaves this
        solution untouched.
        """
        return Solution(
            objectives=self.objectives,
            constraints=self.constraints,
            variables=copy.deepcopy(self.variables),
            attributes=dict(self.attributes),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        if not np.array_equal(self.objectives, other.objectives):
            return False
        if not np.array_equal(self.constraints, other.constraints):
            return False
        if len(self.variables) != len(other.variables):
            return False
        return all(_values_equal(a, b) for a, b in zip(self.variables, other.variables))

    def __hash__(self) -> int:
        # Variables may be unhashable; equal solutions always share objectives.
        return hash(((self.objectives + 0.0).tobytes(), (self.constraints + 0.0).tobytes()))
