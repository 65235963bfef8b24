"""Tests for the array-level primitives.

Comprehensive test suite covering:
- TestDominance: three-way Pareto comparison
- TestDominates: Pareto dominance checks
- TestDominatesMatrix: Vectorized pairwise dominance
- TestNonDominatedSort: Deb's fast non-dominated sorting
- TestCrowdingDistance: Diversity metric computation
"""

import numpy as np
import pytest

from boxfront.primitives import (
    crowding_distance,
    dominance,
    dominates,
    dominates_matrix,
    non_dominated_sort,
)

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def simple_2d_objectives() -> np.ndarray:
    """Simple 2D objectives with clear dominance hierarchy.

    Resulting fronts:
        Front 0: [1,1]
        Front 1: [2,2], [1,3], [3,1]
        Front 2: [3,3]
    """
    return np.array(
        [
            [1.0, 1.0],
            [2.0, 2.0],
            [3.0, 3.0],
            [1.0, 3.0],
            [3.0, 1.0],
        ]
    )


@pytest.fixture
def pareto_front_2d() -> np.ndarray:
    """A front where no solution dominates another."""
    return np.array(
        [
            [1.0, 4.0],
            [2.0, 3.0],
            [3.0, 2.0],
            [4.0, 1.0],
        ]
    )


@pytest.fixture
def all_dominated_chain() -> np.ndarray:
    """Linear dominance chain where each dominates the next."""
    return np.array(
        [
            [1.0, 1.0],
            [2.0, 2.0],
            [3.0, 3.0],
            [4.0, 4.0],
        ]
    )


# =============================================================================
# TestDominance
# =============================================================================


class TestDominance:
    """Tests for the three-way dominance function."""

    def test_a_dominates(self) -> None:
        """Better in every objective returns -1."""
        assert dominance(np.array([1.0, 2.0]), np.array([2.0, 3.0])) == -1

    def test_b_dominates(self) -> None:
        """Worse in every objective returns +1."""
        assert dominance(np.array([2.0, 3.0]), np.array([1.0, 2.0])) == 1

    def test_equal_in_one_better_in_other(self) -> None:
        """A tie in one objective and a strict gain in the other is dominance."""
        assert dominance(np.array([1.0, 2.0]), np.array([1.0, 3.0])) == -1

    def test_tradeoff_is_nondominated(self) -> None:
        """A trade-off returns 0."""
        assert dominance(np.array([1.0, 2.0]), np.array([0.0, 3.0])) == 0

    def test_identical_is_nondominated(self) -> None:
        """Identical vectors return 0."""
        assert dominance(np.array([1.0, 2.0]), np.array([1.0, 2.0])) == 0

    def test_agrees_with_dominates(self, simple_2d_objectives: np.ndarray) -> None:
        """-1 exactly when dominates(a, b), +1 exactly when dominates(b, a)."""
        for a in simple_2d_objectives:
            for b in simple_2d_objectives:
                flag = dominance(a, b)
                assert (flag == -1) == dominates(a, b)
                assert (flag == 1) == dominates(b, a)


# =============================================================================
# TestDominates
# =============================================================================


class TestDominates:
    """Tests for the scalar dominates function."""

    def test_clear_dominance(self) -> None:
        """Solution with all better values dominates."""
        assert dominates(np.array([1.0, 1.0]), np.array([2.0, 2.0])) is True

    def test_identical_solutions_no_dominance(self) -> None:
        """Identical solutions do not dominate each other."""
        a = np.array([1.0, 2.0])
        assert dominates(a, a.copy()) is False

    def test_tradeoff_no_dominance(self) -> None:
        """Solutions with tradeoffs do not dominate each other."""
        a = np.array([1.0, 3.0])
        b = np.array([3.0, 1.0])
        assert dominates(a, b) is False
        assert dominates(b, a) is False

    def test_partial_tie_with_one_better(self) -> None:
        """One tie and one strictly better gives dominance."""
        assert dominates(np.array([1.0, 2.0]), np.array([1.0, 3.0])) is True

    def test_tiny_difference(self) -> None:
        """Very small differences still count as dominance."""
        assert dominates(np.array([1.0, 1.0]), np.array([1.0 + 1e-10, 1.0])) is True

    def test_negative_values(self) -> None:
        """Dominance works with negative values."""
        assert dominates(np.array([-2.0, -2.0]), np.array([-1.0, -1.0])) is True


# =============================================================================
# TestDominatesMatrix
# =============================================================================


class TestDominatesMatrix:
    """Tests for the vectorized dominates_matrix function."""

    def test_agrees_with_scalar_dominates(self, simple_2d_objectives: np.ndarray) -> None:
        """Matrix result agrees with scalar dominates for all pairs."""
        n = simple_2d_objectives.shape[0]
        matrix = dominates_matrix(simple_2d_objectives)
        for i in range(n):
            for j in range(n):
                expected = dominates(simple_2d_objectives[i], simple_2d_objectives[j])
                assert matrix[i, j] == expected, f"Mismatch at ({i}, {j})"

    def test_diagonal_is_false(self, simple_2d_objectives: np.ndarray) -> None:
        """No solution dominates itself."""
        assert not np.any(np.diag(dominates_matrix(simple_2d_objectives)))

    def test_pareto_front_no_dominance(self, pareto_front_2d: np.ndarray) -> None:
        """Pareto front has no pairwise dominance."""
        assert not np.any(dominates_matrix(pareto_front_2d))

    def test_empty_objectives(self) -> None:
        """Empty objectives returns empty matrix."""
        assert dominates_matrix(np.zeros((0, 2))).shape == (0, 0)


# =============================================================================
# TestNonDominatedSort
# =============================================================================


class TestNonDominatedSort:
    """Tests for non_dominated_sort function."""

    def test_clear_hierarchy(self, all_dominated_chain: np.ndarray) -> None:
        """Chain produces sequential ranks 0, 1, 2, 3."""
        np.testing.assert_array_equal(non_dominated_sort(all_dominated_chain), [0, 1, 2, 3])

    def test_all_pareto_optimal(self, pareto_front_2d: np.ndarray) -> None:
        """Pareto front all gets rank 0."""
        np.testing.assert_array_equal(non_dominated_sort(pareto_front_2d), [0, 0, 0, 0])

    def test_mixed_fronts(self, simple_2d_objectives: np.ndarray) -> None:
        """Mixed objectives produce correct front assignments."""
        np.testing.assert_array_equal(non_dominated_sort(simple_2d_objectives), [0, 1, 2, 1, 1])

    def test_ties_same_front(self) -> None:
        """Identical solutions are in the same front."""
        objectives = np.array([[1.0, 2.0], [1.0, 2.0], [1.0, 2.0]])
        np.testing.assert_array_equal(non_dominated_sort(objectives), [0, 0, 0])

    def test_empty_objectives(self) -> None:
        """Empty input returns empty ranks."""
        assert len(non_dominated_sort(np.zeros((0, 2)))) == 0

    def test_single_individual(self) -> None:
        """Single individual gets rank 0."""
        np.testing.assert_array_equal(non_dominated_sort(np.array([[1.0, 2.0]])), [0])

    def test_output_dtype(self, simple_2d_objectives: np.ndarray) -> None:
        """Output is integer array."""
        assert non_dominated_sort(simple_2d_objectives).dtype == np.int64

    def test_custom_dominance_matrix(self) -> None:
        """A supplied dominance matrix replaces Pareto dominance."""
        objectives = np.array([[1.0, 3.0], [3.0, 1.0]])
        dom = np.array([[False, True], [False, False]])
        np.testing.assert_array_equal(non_dominated_sort(objectives, dom_matrix=dom), [0, 1])

    def test_cyclic_relation_rejected(self) -> None:
        """A dominance matrix with a cycle cannot be sorted."""
        objectives = np.zeros((2, 2))
        dom = np.array([[False, True], [True, False]])
        with pytest.raises(ValueError, match="cycle"):
            non_dominated_sort(objectives, dom_matrix=dom)

    def test_large_population(self) -> None:
        """Every individual in a larger random population is ranked."""
        objectives = np.random.default_rng(42).random((100, 3))
        ranks = non_dominated_sort(objectives)
        assert len(ranks) == 100
        assert np.all(ranks >= 0)
        assert np.any(ranks == 0)


# =============================================================================
# TestCrowdingDistance
# =============================================================================


class TestCrowdingDistance:
    """Tests for crowding_distance function."""

    def test_boundary_points_infinite(self, pareto_front_2d: np.ndarray) -> None:
        """Boundary points (min/max per objective) get infinite distance."""
        cd = crowding_distance(pareto_front_2d)
        assert np.isinf(cd[0])
        assert np.isinf(cd[3])

    def test_interior_values(self, pareto_front_2d: np.ndarray) -> None:
        """Interior points accumulate normalized neighbour gaps over both objectives."""
        cd = crowding_distance(pareto_front_2d)
        np.testing.assert_allclose(cd[1:3], [4.0 / 3.0, 4.0 / 3.0])

    def test_single_individual_infinite(self) -> None:
        """Single individual gets infinite distance."""
        cd = crowding_distance(np.array([[1.0, 2.0]]))
        assert len(cd) == 1
        assert np.isinf(cd[0])

    def test_two_individuals_both_infinite(self) -> None:
        """Two individuals are both boundary points."""
        assert np.all(np.isinf(crowding_distance(np.array([[1.0, 3.0], [3.0, 1.0]]))))

    def test_empty_front(self) -> None:
        """Empty front returns empty distances."""
        assert len(crowding_distance(np.zeros((0, 2)))) == 0

    def test_zero_range_contributes_nothing(self) -> None:
        """Identical solutions: boundaries infinite, interior exactly zero, no NaN."""
        identical = np.array([[1.0, 2.0]] * 4)
        cd = crowding_distance(identical)
        assert not np.any(np.isnan(cd))
        assert np.isinf(cd[0]) and np.isinf(cd[3])
        np.testing.assert_array_equal(cd[1:3], [0.0, 0.0])

    def test_zero_range_in_one_dimension(self) -> None:
        """A constant objective adds nothing; the other objective still counts."""
        objectives = np.array([[0.0, 5.0], [1.0, 5.0], [3.0, 5.0], [4.0, 5.0]])
        cd = crowding_distance(objectives)
        np.testing.assert_allclose(cd[1:3], [3.0 / 4.0, 3.0 / 4.0])

    def test_evenly_spaced_solutions(self) -> None:
        """Evenly spaced solutions have equal interior distances."""
        evenly_spaced = np.array([[0.0, 4.0], [1.0, 3.0], [2.0, 2.0], [3.0, 1.0], [4.0, 0.0]])
        cd = crowding_distance(evenly_spaced)
        np.testing.assert_allclose(cd[1:4], [1.0, 1.0, 1.0])

    def test_output_non_negative(self, pareto_front_2d: np.ndarray) -> None:
        """All distances are non-negative."""
        assert np.all(crowding_distance(pareto_front_2d) >= 0)
