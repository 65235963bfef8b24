"""Quality metrics for archived front approximations.

The hypervolume indicator measures both convergence and spread of an archive
and is used to check that the bounded epsilon-box archive loses little
quality compared to an unbounded Pareto archive.
"""

import numpy as np
from pymoo.indicators.hv import HV


def hypervolume(objectives: np.ndarray, ref_point: np.ndarray | None = None) -> float:
    """Compute the hypervolume of an archive's objective matrix.

    Args:
        objectives: (n, n_obj) objective values of the archive entries.
        ref_point: Reference point. Defaults to 1.1 in every objective,
            slightly worse than the ZDT nadir point (1, 1).

    Returns:
        Hypervolume value (higher is better for minimization problems).
        An empty archive has hypervolume 0.

    Raises:
        ValueError: If objectives is not a 2D array.
    """
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")
    if objectives.shape[0] == 0:
        return 0.0

    if ref_point is None:
        ref_point = np.full(objectives.shape[1], 1.1)

    indicator = HV(ref_point=ref_point)
    return float(indicator(objectives))
