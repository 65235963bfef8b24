"""Tests for the Solution value type."""

import numpy as np
import pytest

from boxfront import Solution


class TestSolutionConstruction:
    """Tests for Solution construction and validation."""

    def test_accepts_lists(self) -> None:
        """Objectives and constraints may be given as plain lists."""
        s = Solution(objectives=[1.0, 2.0], constraints=[0.0, 0.5])
        assert s.n_obj == 2
        assert s.n_constr == 2
        assert s.objectives.dtype == np.float64

    def test_defaults_to_unconstrained(self) -> None:
        """Without constraints the solution has zero constraints and is feasible."""
        s = Solution(objectives=[1.0])
        assert s.n_constr == 0
        assert s.is_feasible

    def test_rejects_empty_objectives(self) -> None:
        """At least one objective is required."""
        with pytest.raises(ValueError, match="at least one value"):
            Solution(objectives=[])

    def test_rejects_2d_objectives(self) -> None:
        """Objectives must be a vector."""
        with pytest.raises(ValueError, match="objectives must be 1D"):
            Solution(objectives=[[1.0, 2.0]])

    def test_rejects_2d_constraints(self) -> None:
        """Constraints must be a vector."""
        with pytest.raises(ValueError, match="constraints must be 1D"):
            Solution(objectives=[1.0], constraints=[[0.0]])

    def test_rejects_string_variables(self) -> None:
        """A bare string is not a variable sequence."""
        with pytest.raises(TypeError, match="variables must be a sequence"):
            Solution(objectives=[1.0], variables="abc")

    def test_variables_are_stored_as_tuple(self) -> None:
        """Variables of any kind are kept in order as a tuple."""
        s = Solution(objectives=[1.0], variables=[0.5, 3, [2, 0, 1], np.array([True, False])])
        assert isinstance(s.variables, tuple)
        assert s.variables[1] == 3


class TestSolutionImmutability:
    """Objective and constraint vectors are write-once."""

    def test_objectives_read_only(self) -> None:
        """Writing to objectives raises."""
        s = Solution(objectives=[1.0, 2.0])
        with pytest.raises(ValueError):
            s.objectives[0] = 5.0

    def test_input_array_is_copied(self) -> None:
        """Mutating the source array does not affect the solution."""
        source = np.array([1.0, 2.0])
        s = Solution(objectives=source)
        source[0] = 99.0
        assert s.objectives[0] == 1.0

    def test_fields_cannot_be_reassigned(self) -> None:
        """The dataclass is frozen."""
        s = Solution(objectives=[1.0])
        with pytest.raises(AttributeError):
            s.objectives = np.array([2.0])


class TestFeasibility:
    """Tests for is_feasible and total_violation."""

    def test_all_zero_is_feasible(self) -> None:
        """All-zero constraints mean feasible."""
        assert Solution(objectives=[1.0], constraints=[0.0, 0.0]).is_feasible

    def test_any_nonzero_is_infeasible(self) -> None:
        """Any non-zero magnitude means infeasible."""
        assert not Solution(objectives=[1.0], constraints=[0.0, 1e-12]).is_feasible

    def test_negative_magnitude_is_infeasible(self) -> None:
        """A negative magnitude is still a violation."""
        assert not Solution(objectives=[1.0], constraints=[-0.5]).is_feasible

    def test_total_violation_sums_magnitudes(self) -> None:
        """Total violation sums absolute magnitudes."""
        s = Solution(objectives=[1.0], constraints=[0.5, -0.25, 0.0])
        assert s.total_violation == pytest.approx(0.75)


class TestEqualityAndCopy:
    """Tests for equality, hashing and copying."""

    def test_equal_solutions(self) -> None:
        """Same objectives, constraints and variables compare equal and hash equal."""
        a = Solution(objectives=[1.0, 2.0], variables=(np.array([1, 2]),))
        b = Solution(objectives=[1.0, 2.0], variables=(np.array([1, 2]),))
        assert a == b
        assert hash(a) == hash(b)

    def test_attributes_ignored_by_equality(self) -> None:
        """The scratch mapping is not part of identity."""
        a = Solution(objectives=[1.0], attributes={"rank": 0})
        b = Solution(objectives=[1.0], attributes={"rank": 3})
        assert a == b

    def test_different_variables_not_equal(self) -> None:
        """Different variables make solutions unequal."""
        assert Solution(objectives=[1.0], variables=(1,)) != Solution(objectives=[1.0], variables=(2,))

    def test_copy_is_independent(self) -> None:
        """Mutating a copy's variables and attributes leaves the original intact."""
        original = Solution(objectives=[1.0], variables=([1, 2, 3],), attributes={"tag": "a"})
        clone = original.copy()
        clone.variables[0].append(4)
        clone.attributes["tag"] = "b"

        assert original.variables[0] == [1, 2, 3]
        assert original.attributes["tag"] == "a"
        assert clone == Solution(objectives=[1.0], variables=([1, 2, 3, 4],))
