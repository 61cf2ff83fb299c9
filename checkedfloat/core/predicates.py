"""Invariant predicates for the checked float variants."""

import math
from enum import Enum
from typing import Callable, Dict


class FloatKind(Enum):
    """The numeric subsets a checked float can guarantee."""
    REAL = "real"          # not NaN
    FINITE = "finite"      # not NaN, not +/-inf
    NON_NEG = "non_neg"    # not NaN, >= 0


def is_real(raw: float) -> bool:
    """Check that a raw float is not NaN."""
    return not math.isnan(raw)


def is_finite(raw: float) -> bool:
    """Check that a raw float is neither NaN nor infinite."""
    return not math.isnan(raw) and not math.isinf(raw)


def is_non_neg(raw: float) -> bool:
    """
    Check that a raw float is not NaN and not below zero.

    The comparison is IEEE ``>=`` against +0.0, so -0.0 is accepted.
    """
    return not math.isnan(raw) and raw >= 0


_PREDICATES: Dict[FloatKind, Callable[[float], bool]] = {
    FloatKind.REAL: is_real,
    FloatKind.FINITE: is_finite,
    FloatKind.NON_NEG: is_non_neg,
}


def predicate_for(kind: FloatKind) -> Callable[[float], bool]:
    """Return the predicate guarding the given kind."""
    return _PREDICATES[kind]
