"""Epsilon tolerances used to discretize objective space into boxes."""

import math
import sys
from collections.abc import Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike

from boxfront.exceptions import DimensionMismatchError


class Epsilons:
    """Immutable vector of positive per-objective tolerances.

    When fewer tolerances than objectives are given, the last value is reused
    for every remaining objective. Indexing past the end therefore returns
    the last entry, for any index up to ``sys.maxsize``.

    Args:
        values: A single tolerance or a sequence of tolerances.

    Raises:
        ValueError: If no values are given or any value is not a finite
            positive number.

    Example:
        >>> eps = Epsilons([0.1, 0.2])
        >>> eps[0], eps[1], eps[5]
        (0.1, 0.2, 0.2)
        >>> Epsilons(0.1) == Epsilons([0.1])
        True
    """

    __slots__ = ("_values",)

    def __init__(self, values: float | Sequence[float]) -> None:
        if isinstance(values, (int, float, np.integer, np.floating)):
            values = [values]
        parsed = tuple(float(v) for v in values)
        if not parsed:
            raise ValueError("epsilons must contain at least one value")
        for v in parsed:
            if not math.isfinite(v) or v <= 0.0:
                raise ValueError(f"epsilons must be finite and positive, got {v}")
        object.__setattr__(self, "_values", parsed)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Epsilons is immutable")

    @property
    def values(self) -> tuple[float, ...]:
        """The tolerances exactly as supplied."""
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(index).__name__}")
        if index < 0:
            raise IndexError(f"index must be non-negative, got {index}")
        if index > sys.maxsize:
            raise IndexError(f"index {index} exceeds the maximum index {sys.maxsize}")
        return self._values[min(int(index), len(self._values) - 1)]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Epsilons):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Epsilons({list(self._values)!r})"

    def expand(self, n_obj: int) -> np.ndarray:
        """Return the tolerances extended to exactly n_obj entries.

        Args:
            n_obj: Number of objectives.

        Returns:
            Float array of shape (n_obj,).

        Raises:
            DimensionMismatchError: If more tolerances were supplied than
                there are objectives; such a vector cannot be extended and is
                never truncated.
        """
        if len(self._values) > n_obj:
            raise DimensionMismatchError("epsilons", n_obj, len(self._values))
        out = np.full(n_obj, self._values[-1], dtype=np.float64)
        out[: len(self._values)] = self._values
        return out

    def scaled(self, objectives: ArrayLike) -> np.ndarray:
        """Divide objectives by the tolerances, shape-preserving.

        Works on a single vector (n_obj,) or a matrix (n, n_obj).
        """
        objectives = np.asarray(objectives, dtype=np.float64)
        return objectives / self.expand(objectives.shape[-1])

    def box_index(self, objectives: ArrayLike) -> np.ndarray:
        """Return the epsilon-box index ``floor(objectives / eps)``.

        Example:
            >>> Epsilons(0.5).box_index([1.2, 0.4])
            array([2, 0])
        """
        return np.floor(self.scaled(objectives)).astype(np.int64)

    def residual(self, objectives: ArrayLike) -> np.ndarray:
        """Return how far objectives sit inside their box, per dimension.

        The residual is ``objectives / eps - floor(objectives / eps)`` and
        lies in [0, 1). Zero means the point is on the box's lower corner.
        """
        scaled = self.scaled(objectives)
        return scaled - np.floor(scaled)
