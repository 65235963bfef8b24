"""ZDT problems used to feed the archive growth benchmark.

The functions are vectorized over a batch of decision vectors so a whole
generation can be evaluated at once. All problems have n decision variables
in [0, 1] and 2 objectives to minimize.

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from collections.abc import Callable

import numpy as np

from boxfront import Solution

N_VARS: int = 30


def _g(x: np.ndarray) -> np.ndarray:
    return 1 + 9 * np.sum(x[:, 1:], axis=1) / (x.shape[1] - 1)


def zdt1(x: np.ndarray) -> np.ndarray:
    """ZDT1: convex front f2 = 1 - sqrt(f1). Shape (n, n_vars) -> (n, 2)."""
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - np.sqrt(f1 / g))])


def zdt2(x: np.ndarray) -> np.ndarray:
    """ZDT2: concave front f2 = 1 - f1^2. Shape (n, n_vars) -> (n, 2)."""
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - (f1 / g) ** 2)])


def zdt3(x: np.ndarray) -> np.ndarray:
    """ZDT3: disconnected front. Shape (n, n_vars) -> (n, 2)."""
    f1 = x[:, 0]
    g = _g(x)
    h = 1 - np.sqrt(f1 / g) - (f1 / g) * np.sin(10 * np.pi * f1)
    return np.column_stack([f1, g * h])


PROBLEMS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "zdt1": zdt1,
    "zdt2": zdt2,
    "zdt3": zdt3,
}


def sample_generation(
    problem: Callable[[np.ndarray], np.ndarray],
    n: int,
    spread: float,
    rng: np.random.Generator,
) -> list[Solution]:
    """Evaluate n random decision vectors as Solutions.

    The tail variables are drawn from [0, spread], so shrinking spread over
    the generations mimics a search converging onto the true front.

    Args:
        problem: Vectorized ZDT function.
        n: Number of solutions.
        spread: Upper bound for the tail variables, in (0, 1].
        rng: Random number generator.

    Returns:
        List of n evaluated, unconstrained solutions.
    """
    x = rng.uniform(0.0, 1.0, size=(n, N_VARS))
    x[:, 1:] *= spread
    objectives = problem(x)
    return [Solution(objectives=objectives[i], variables=(x[i],)) for i in range(n)]
