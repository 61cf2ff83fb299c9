"""
Concrete checked float variants.

Each variant guards one property and exists once per precision:

==========  ===========  ===========  =========================
Kind        64-bit       32-bit       Invariant
==========  ===========  ===========  =========================
REAL        ``Real``     ``Real32``   not NaN
FINITE      ``Finite``   ``Finite32`` not NaN, not +/-infinity
NON_NEG     ``NonNeg``   ``NonNeg32`` not NaN, ``>= 0``
==========  ===========  ===========  =========================

The variants do not inherit from one another, across kinds or precisions,
so a ``Finite`` or a ``Real32`` is never accepted where a ``Real`` is
required without an explicit ``into()``.
"""

from typing import Type, Union

import numpy as np

from .checked_scalar import CheckedFloat, lookup_variant, register_variant
from .precision_config import PrecisionMode
from .predicates import FloatKind


class _PositiveInfinity:
    __slots__ = ()

    @classmethod
    def infinity(cls):
        return cls(np.inf)


class _NegativeInfinity:
    __slots__ = ()

    @classmethod
    def neg_infinity(cls):
        return cls(-np.inf)


class _NegativeRange:
    __slots__ = ()

    @classmethod
    def min_value(cls):
        """Most negative finite value of the precision."""
        return cls(-cls.precision.get_max())


class Real(_PositiveInfinity, _NegativeInfinity, _NegativeRange, CheckedFloat):
    """A float that is never NaN. Infinities are allowed."""

    __slots__ = ()
    kind = FloatKind.REAL
    precision = PrecisionMode.FLOAT64


class Finite(_NegativeRange, CheckedFloat):
    """A float that is neither NaN nor infinite."""

    __slots__ = ()
    kind = FloatKind.FINITE
    precision = PrecisionMode.FLOAT64


class NonNeg(_PositiveInfinity, CheckedFloat):
    """
    A float that is not NaN and not below zero.

    ``-0.0`` is accepted and ``+inf`` is allowed. Negating a nonzero
    ``NonNeg`` always fails the check.
    """

    __slots__ = ()
    kind = FloatKind.NON_NEG
    precision = PrecisionMode.FLOAT64


class Real32(_PositiveInfinity, _NegativeInfinity, _NegativeRange, CheckedFloat):
    """``Real`` stored as a 32-bit float."""
    __slots__ = ()
    kind = FloatKind.REAL
    precision = PrecisionMode.FLOAT32


class Finite32(_NegativeRange, CheckedFloat):
    """``Finite`` stored as a 32-bit float."""
    __slots__ = ()
    kind = FloatKind.FINITE
    precision = PrecisionMode.FLOAT32


class NonNeg32(_PositiveInfinity, CheckedFloat):
    """``NonNeg`` stored as a 32-bit float."""
    __slots__ = ()
    kind = FloatKind.NON_NEG
    precision = PrecisionMode.FLOAT32


for _cls in (Real, Finite, NonNeg, Real32, Finite32, NonNeg32):
    register_variant(_cls)
del _cls

Real64 = Real
Finite64 = Finite
NonNeg64 = NonNeg


def checked_type(
    kind: Union[FloatKind, str],
    precision: Union[PrecisionMode, str] = PrecisionMode.FLOAT64,
) -> Type[CheckedFloat]:
    """
    Get the checked float class for a kind and precision.

    Args:
        kind: FloatKind or its value ('real', 'finite', 'non_neg')
        precision: PrecisionMode or its dtype name ('float32', 'float64')

    Returns:
        The concrete class, e.g. ``checked_type('finite', 'float32')`` is
        ``Finite32``

    Raises:
        ValueError: If kind or precision is not supported
    """
    kind = FloatKind(kind)
    precision = PrecisionMode.from_name(precision)
    return lookup_variant(kind, precision)
