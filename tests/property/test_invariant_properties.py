"""Property tests: every result either satisfies its invariant or is rejected."""

import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from checkedfloat import (
    Finite,
    Finite32,
    InvalidValueError,
    NonNeg,
    Real,
    Real32,
    is_finite,
    is_non_neg,
    is_real,
)
from checkedfloat.core import policy


any_floats = st.floats(allow_nan=True, allow_infinity=True)
finite_floats = st.floats(allow_nan=False, allow_infinity=False)
non_nan_floats = st.floats(allow_nan=False, allow_infinity=True)
non_neg_floats = st.floats(min_value=0.0, allow_nan=False, allow_infinity=False)


@pytest.mark.property
@given(any_floats)
def test_finite_implies_real(v: float):
    if is_finite(v):
        assert is_real(v)
    if is_non_neg(v):
        assert is_real(v)


@pytest.mark.property
@given(non_nan_floats)
def test_every_non_nan_is_real(x: float):
    assert Real.try_new(x).get() == x


@pytest.mark.property
@pytest.mark.parametrize("cls", [Real, Finite, NonNeg, Real32, Finite32])
@given(st.sampled_from([float('nan'), -float('nan'), np.float32('nan')]))
def test_nan_rejected_for_every_variant(cls, nan):
    with pytest.raises(InvalidValueError):
        cls.try_new(nan)


@pytest.mark.property
@given(st.floats(min_value=0.0, exclude_min=True))
def test_non_neg_rejects_every_negative(f: float):
    with pytest.raises(InvalidValueError):
        NonNeg.try_new(-f)


@pytest.mark.property
@given(any_floats)
def test_round_trip_preserves_bits(raw: float):
    for cls in (Real, Finite, NonNeg):
        if not cls.is_valid(raw):
            continue
        w = cls.try_new(raw)
        again = cls.try_new(w.get())
        assert again == w
        assert again.get().tobytes() == w.get().tobytes()


@pytest.mark.property
@given(finite_floats, finite_floats)
def test_finite_addition_closure(a: float, b: float):
    expected = a + b
    if math.isfinite(expected):
        assert Finite(a).try_add(Finite(b)).get() == expected
    else:
        with pytest.raises(InvalidValueError):
            Finite(a).try_add(Finite(b))


@pytest.mark.property
@given(finite_floats, finite_floats)
def test_finite_multiplication_closure(a: float, b: float):
    expected = a * b
    if math.isfinite(expected):
        assert Finite(a).try_mul(b).get() == expected
    else:
        with pytest.raises(InvalidValueError):
            Finite(a).try_mul(b)


@pytest.mark.property
@given(finite_floats, finite_floats)
def test_finite_division_closure(a: float, b: float):
    with np.errstate(all='ignore'):
        expected = np.float64(a) / np.float64(b)
    if math.isfinite(expected):
        assert Finite(a).try_div(b).get() == expected
    else:
        with pytest.raises(InvalidValueError):
            Finite(a).try_div(b)


@pytest.mark.property
@given(non_nan_floats, non_nan_floats)
def test_real_results_never_hold_nan(a: float, b: float):
    for op in ("try_add", "try_sub", "try_mul", "try_div"):
        try:
            result = getattr(Real(a), op)(b)
        except InvalidValueError:
            continue
        assert not math.isnan(result.get())


@pytest.mark.property
@given(non_neg_floats, non_neg_floats)
def test_non_neg_closed_under_add_and_mul(a: float, b: float):
    assert NonNeg(a).try_add(b) >= 0.0
    assert NonNeg(a).try_mul(b) >= 0.0


@pytest.mark.property
@given(non_nan_floats, non_nan_floats)
def test_ordering_matches_raw(a: float, b: float):
    x, y = Real(a), Real(b)
    assert (x < y) == (a < b)
    assert (x == y) == (a == b)
    assert (x >= y) == (a >= b)


@pytest.mark.property
@given(finite_floats, finite_floats)
def test_try_results_independent_of_policy(a: float, b: float):
    outcomes = []
    for enabled in (True, False):
        original = policy.CHECKS_ENABLED
        policy.CHECKS_ENABLED = enabled
        try:
            try:
                outcomes.append(Finite.try_new(a).try_div(b).get().tobytes())
            except InvalidValueError as exc:
                outcomes.append(type(exc))
        finally:
            policy.CHECKS_ENABLED = original
    assert outcomes[0] == outcomes[1]


@pytest.mark.property
@given(st.floats(allow_nan=False, width=32))
def test_float32_values_are_exact(x: float):
    assert Real32.try_new(x).get() == np.float32(x)
