"""
Checked float scalar type.

A ``CheckedFloat`` holds exactly one raw numpy float whose value satisfies the
predicate of the class's ``FloatKind``. Every operation computes its raw result
with plain IEEE 754 semantics in the class's precision, then routes the result
through one of two channels:

* the checked channel (constructors, operators, plain methods) raises
  ``InvariantViolation`` while the panic-mode policy has checks enabled, and
  trusts its input otherwise;
* the fallible channel (``try_*`` methods) always checks and raises
  ``InvalidValueError``.

Concrete variants (``Real``, ``Finite``, ``NonNeg`` and their 32-bit
counterparts) live in :mod:`checkedfloat.core.variants`.
"""

import numbers
import operator
from typing import Callable, ClassVar, Dict, Optional, Tuple, Type, TypeVar, Union

import numpy as np

from . import policy as _policy
from .errors import InvalidValueError, InvariantViolation, error_for
from .precision_config import PrecisionMode
from .predicates import FloatKind, predicate_for

T = TypeVar("T", bound="CheckedFloat")

Operand = Union["CheckedFloat", numbers.Real]

# (kind, precision) -> concrete class, filled by register_variant
_VARIANTS: Dict[Tuple[FloatKind, PrecisionMode], Type["CheckedFloat"]] = {}


def register_variant(cls: Type[T]) -> Type[T]:
    """Record ``cls`` as the canonical class for its kind and precision."""
    key = (cls.kind, cls.precision)
    if key in _VARIANTS:
        raise ValueError(
            f"{_VARIANTS[key].__name__} is already registered for "
            f"{cls.kind.value}/{cls.precision.name}"
        )
    _VARIANTS[key] = cls
    return cls


def lookup_variant(kind: FloatKind, precision: PrecisionMode) -> Type["CheckedFloat"]:
    """Get the registered class for a kind and precision."""
    return _VARIANTS[(kind, precision)]


def _is_operand(value) -> bool:
    return isinstance(value, (CheckedFloat, numbers.Real))


def _comparable(value):
    """Turn a comparison operand into something Python compares exactly."""
    if isinstance(value, CheckedFloat):
        return float(value._value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, np.integer):
        return int(value)
    return value


def _rebuild(cls, raw):
    return cls.try_new(raw)


class CheckedFloat:
    """
    A float guaranteed to satisfy the predicate of ``kind``.

    Subclasses set ``kind`` and ``precision``. Instances are immutable; every
    operation returns a new instance of the left operand's class.
    """

    __slots__ = ("_value",)

    kind: ClassVar[FloatKind]
    precision: ClassVar[PrecisionMode] = PrecisionMode.FLOAT64

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __init__(self, value: numbers.Real):
        raw = self._from_number(value)
        if _policy.CHECKS_ENABLED:
            self._panic_check(raw)
        object.__setattr__(self, "_value", raw)

    @classmethod
    def new(cls: Type[T], value: numbers.Real) -> T:
        """
        Create a checked float.

        Raises:
            InvariantViolation: If the value fails the check and checks are
                enabled by the panic-mode policy
        """
        return cls(value)

    @classmethod
    def try_new(cls: Type[T], value: numbers.Real) -> T:
        """
        Create a checked float, always checking.

        Raises:
            InvalidValueError: If the value fails the check
        """
        return cls._try_wrap(cls._from_number(value))

    @classmethod
    def is_valid(cls, raw: float) -> bool:
        """Check a raw value against this class's predicate."""
        return predicate_for(cls.kind)(raw)

    @classmethod
    def _from_number(cls, value):
        if isinstance(value, CheckedFloat):
            raise TypeError(
                f"cannot build {cls.__name__} from {type(value).__name__}; "
                f"use into() or try_into() to convert between checked floats"
            )
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"{cls.__name__} requires a real number, got {type(value).__name__}"
            )
        return cls.precision.cast(value)

    @classmethod
    def _from_raw(cls: Type[T], raw) -> T:
        obj = object.__new__(cls)
        object.__setattr__(obj, "_value", raw)
        return obj

    @classmethod
    def _check(cls, raw):
        if not cls.is_valid(raw):
            raise error_for(cls.kind, raw)
        return raw

    @classmethod
    def _panic_check(cls, raw) -> None:
        try:
            cls._check(raw)
        except InvalidValueError as exc:
            raise InvariantViolation(f"{cls.__name__}: {exc}") from exc

    @classmethod
    def _wrap(cls: Type[T], raw) -> T:
        if _policy.CHECKS_ENABLED:
            cls._panic_check(raw)
        return cls._from_raw(raw)

    @classmethod
    def _try_wrap(cls: Type[T], raw) -> T:
        return cls._from_raw(cls._check(raw))

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def get(self):
        """Get the raw numpy float."""
        return self._value

    @property
    def value(self):
        """The raw numpy float."""
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __bool__(self) -> bool:
        return bool(self._value != 0)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_rebuild, (type(self), self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(float(self._value), format_spec)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _operand(self, other: Operand):
        if isinstance(other, CheckedFloat):
            other = other._value
        elif not isinstance(other, numbers.Real):
            raise TypeError(
                f"unsupported operand type for {type(self).__name__}: "
                f"{type(other).__name__}"
            )
        return self.precision.cast(other)

    def _compute(self, op: Callable, other: Operand, reflected: bool = False):
        rhs = self._operand(other)
        lhs = self._value
        if reflected:
            lhs, rhs = rhs, lhs
        # inf/nan results are handled by the caller's check
        with np.errstate(all='ignore'):
            return self.precision.numpy_dtype(op(lhs, rhs))

    def add(self: T, other: Operand) -> T:
        """Add ``other``; panics if the sum leaves the subset."""
        return self._wrap(self._compute(operator.add, other))

    def sub(self: T, other: Operand) -> T:
        """Subtract ``other``; panics if the difference leaves the subset."""
        return self._wrap(self._compute(operator.sub, other))

    def mul(self: T, other: Operand) -> T:
        """Multiply by ``other``; panics if the product leaves the subset."""
        return self._wrap(self._compute(operator.mul, other))

    def div(self: T, other: Operand) -> T:
        """
        Divide by ``other``; panics if the quotient leaves the subset.

        Division by zero follows IEEE 754: ``x/0`` is a signed infinity and
        ``0/0`` is NaN, and both are then checked like any other result.
        """
        return self._wrap(self._compute(operator.truediv, other))

    def neg(self: T) -> T:
        """Negate; panics if the negation leaves the subset."""
        return self._wrap(-self._value)

    def try_add(self: T, other: Operand) -> T:
        return self._try_wrap(self._compute(operator.add, other))

    def try_sub(self: T, other: Operand) -> T:
        return self._try_wrap(self._compute(operator.sub, other))

    def try_mul(self: T, other: Operand) -> T:
        return self._try_wrap(self._compute(operator.mul, other))

    def try_div(self: T, other: Operand) -> T:
        return self._try_wrap(self._compute(operator.truediv, other))

    def try_neg(self: T) -> T:
        return self._try_wrap(-self._value)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._wrap(self._compute(operator.add, other, reflected=True))

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._wrap(self._compute(operator.sub, other, reflected=True))

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._wrap(self._compute(operator.mul, other, reflected=True))

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._wrap(self._compute(operator.truediv, other, reflected=True))

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    # ------------------------------------------------------------------
    # Sign
    # ------------------------------------------------------------------

    def abs(self: T) -> T:
        """Absolute value (always valid for every variant)."""
        return self._wrap(np.abs(self._value))

    def try_abs(self: T) -> T:
        return self._try_wrap(np.abs(self._value))

    def signum(self: T) -> T:
        """
        Sign of the value.

        * ``1.0`` for positive numbers, ``+0.0`` and ``+inf``
        * ``-1.0`` for negative numbers, ``-0.0`` and ``-inf``
        """
        return self._wrap(self.precision.numpy_dtype(np.copysign(1.0, self._value)))

    def try_signum(self: T) -> T:
        return self._try_wrap(self.precision.numpy_dtype(np.copysign(1.0, self._value)))

    def is_sign_positive(self) -> bool:
        """True for a positive sign bit, including ``+0.0`` and ``+inf``."""
        return not bool(np.signbit(self._value))

    def is_sign_negative(self) -> bool:
        """True for a negative sign bit, including ``-0.0`` and ``-inf``."""
        return bool(np.signbit(self._value))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return float(self._value) == _comparable(other)

    def __ne__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return float(self._value) != _comparable(other)

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return float(self._value) < _comparable(other)

    def __le__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return float(self._value) <= _comparable(other)

    def __gt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return float(self._value) > _comparable(other)

    def __ge__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return float(self._value) >= _comparable(other)

    def __hash__(self) -> int:
        return hash(float(self._value))

    def _pick(self, other: Operand, prefer_other: Callable[[float, float], bool]):
        """Return ``None`` to keep self, else the raw value of ``other``."""
        raw = self._operand(other)
        if np.isnan(raw):
            return None
        if prefer_other(float(raw), float(self._value)):
            return raw
        return None

    def max(self: T, other: Operand) -> T:
        """
        The larger of self and ``other`` as this class.

        A NaN ``other`` is ignored. When ``other`` wins it is checked like
        any other result.
        """
        raw = self._pick(other, operator.gt)
        return self if raw is None else self._wrap(raw)

    def min(self: T, other: Operand) -> T:
        """The smaller of self and ``other`` as this class (see ``max``)."""
        raw = self._pick(other, operator.lt)
        return self if raw is None else self._wrap(raw)

    def try_max(self: T, other: Operand) -> T:
        raw = self._pick(other, operator.gt)
        return self if raw is None else self._try_wrap(raw)

    def try_min(self: T, other: Operand) -> T:
        raw = self._pick(other, operator.lt)
        return self if raw is None else self._try_wrap(raw)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @staticmethod
    def _require_target(target) -> None:
        if not (isinstance(target, type) and issubclass(target, CheckedFloat)
                and hasattr(target, "kind")):
            raise TypeError(f"conversion target must be a checked float class, got {target!r}")

    def into(self, target: Type[T]) -> T:
        """
        Convert to another checked float class.

        The raw value is cast to the target's precision and checked against
        the target's predicate through the checked channel.
        """
        self._require_target(target)
        return target._wrap(target.precision.cast(self._value))

    def try_into(self, target: Type[T]) -> T:
        """Convert to another checked float class, always checking."""
        self._require_target(target)
        return target._try_wrap(target.precision.cast(self._value))

    def _same_precision(self, kind: FloatKind) -> Type["CheckedFloat"]:
        return lookup_variant(kind, self.precision)

    def to_real(self):
        return self.into(self._same_precision(FloatKind.REAL))

    def try_to_real(self):
        return self.try_into(self._same_precision(FloatKind.REAL))

    def to_finite(self):
        return self.into(self._same_precision(FloatKind.FINITE))

    def try_to_finite(self):
        return self.try_into(self._same_precision(FloatKind.FINITE))

    def to_non_neg(self):
        return self.into(self._same_precision(FloatKind.NON_NEG))

    def try_to_non_neg(self):
        return self.try_into(self._same_precision(FloatKind.NON_NEG))

    # ------------------------------------------------------------------
    # Limits
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls: Type[T]) -> T:
        return cls(0.0)

    @classmethod
    def one(cls: Type[T]) -> T:
        return cls(1.0)

    @classmethod
    def max_value(cls: Type[T]) -> T:
        """Largest finite value of the precision."""
        return cls(cls.precision.get_max())

    @classmethod
    def min_positive(cls: Type[T]) -> T:
        """Smallest positive normal value of the precision."""
        return cls(cls.precision.get_min())

    @classmethod
    def epsilon(cls: Type[T]) -> T:
        """Machine epsilon of the precision."""
        return cls(cls.precision.get_epsilon())
