"""Unit tests for the Finite variant."""

import numpy as np
import pytest

from checkedfloat import Finite, InfiniteError, InvariantViolation, Real


INF = float('inf')


class TestFiniteCreation:

    def test_rejects_infinities(self):
        for value in (INF, -INF):
            with pytest.raises(InvariantViolation):
                Finite(value)
            with pytest.raises(InfiniteError):
                Finite.try_new(value)

    def test_rejects_nan(self):
        with pytest.raises(InfiniteError):
            Finite.try_new(float('nan'))

    def test_no_infinity_constructor(self):
        assert not hasattr(Finite, "infinity")


class TestFiniteArithmetic:

    def test_basic_operators(self):
        assert Finite(2.0) + 1.0 == Finite(3.0)
        assert Finite(2.0) - 1.0 == Finite(1.0)
        assert Finite(5.0) * 2.0 == Finite(10.0)
        assert Finite(8.0) / 2.0 == Finite(4.0)
        assert -Finite(1.0) == Finite(-1.0)

    def test_division_by_zero_is_rejected(self):
        with pytest.raises(InfiniteError):
            Finite(1.0).try_div(Finite(0.0))
        with pytest.raises(InfiniteError):
            Finite(0.0).try_div(0.0)
        with pytest.raises(InvariantViolation):
            Finite(1.0) / 0.0
        with pytest.raises(InvariantViolation):
            1.0 / Finite(0.0)

    def test_overflow_is_rejected(self):
        big = Finite.max_value()
        with pytest.raises(InfiniteError):
            big.try_add(big)
        with pytest.raises(InfiniteError):
            big.try_mul(2.0)
        with pytest.raises(InvariantViolation):
            big * 2.0
        with pytest.raises(InfiniteError):
            Finite.min_value().try_sub(big)

    def test_infinite_operand_is_rejected(self):
        with pytest.raises(InfiniteError):
            Finite(1.0).try_add(INF)
        with pytest.raises(InfiniteError):
            Finite(1.0).try_add(Real(INF))

    def test_division_of_finite_values_can_leave_finite(self):
        tiny = Finite(np.finfo(np.float64).tiny)
        with pytest.raises(InfiniteError):
            Finite(1e300).try_div(tiny)

    def test_dividing_by_infinity_gives_zero(self):
        """Only the result is checked, not the right operand."""
        assert Finite(1.0).try_div(INF) == 0.0

    def test_negation_always_valid(self):
        assert Finite.max_value().try_neg() == Finite.min_value()
        assert Finite(-3.0).neg() == 3.0

    def test_max_min(self):
        assert Finite(1.0).max(2.0) == 2.0
        assert Finite(1.0).min(2.0) == 1.0
        with pytest.raises(InfiniteError):
            Finite(1.0).try_max(INF)
        assert Finite(1.0).try_min(INF) == 1.0
        assert Finite(1.0).max(float('nan')) == 1.0
