"""Shared test fixtures for boxfront tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- make_solution: Factory for solutions from plain lists
- front_population / layered_population: Small populations with known fronts
- random_population: Larger random population for property checks
"""

import numpy as np
import pytest

from boxfront import Population, Solution


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def make_solution():
    """Factory building a Solution from objective (and constraint) lists."""

    def make(objectives, constraints=(), variables=()) -> Solution:
        return Solution(objectives=list(objectives), constraints=list(constraints), variables=tuple(variables))

    return make


@pytest.fixture
def front_population() -> Population:
    """Four mutually non-dominated solutions on a straight front."""
    return Population.from_objectives([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]])


@pytest.fixture
def layered_population() -> Population:
    """Population with a known three-front structure.

    Front 0: [1,1]
    Front 1: [2,2], [1,3], [3,1]
    Front 2: [3,3]
    """
    return Population.from_objectives(
        [
            [1.0, 1.0],  # 0: front 0
            [2.0, 2.0],  # 1: front 1
            [3.0, 3.0],  # 2: front 2
            [1.0, 3.0],  # 3: front 1
            [3.0, 1.0],  # 4: front 1
        ]
    )


@pytest.fixture
def random_population(rng: np.random.Generator) -> Population:
    """Sixty random three-objective solutions, some sharing a coarse grid."""
    objectives = np.round(rng.uniform(0.0, 1.0, size=(60, 3)), 1)
    return Population.from_objectives(objectives)
