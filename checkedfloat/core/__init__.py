"""Core checked float types, predicates and policy."""

from .predicates import (
    FloatKind,
    is_real,
    is_finite,
    is_non_neg,
    predicate_for,
)

from .errors import (
    InvalidValueError,
    NanError,
    InfiniteError,
    NegativeError,
    InvariantViolation,
)

from .precision_config import PrecisionMode
from .policy import PanicMode, get_panic_mode, checks_enabled
from .checked_scalar import CheckedFloat

from .variants import (
    Real,
    Finite,
    NonNeg,
    Real32,
    Finite32,
    NonNeg32,
    Real64,
    Finite64,
    NonNeg64,
    checked_type,
)

__all__ = [
    # Types
    "CheckedFloat",
    "Real",
    "Finite",
    "NonNeg",
    "Real32",
    "Finite32",
    "NonNeg32",
    "Real64",
    "Finite64",
    "NonNeg64",
    "checked_type",

    # Predicates
    "FloatKind",
    "is_real",
    "is_finite",
    "is_non_neg",
    "predicate_for",

    # Errors
    "InvalidValueError",
    "NanError",
    "InfiniteError",
    "NegativeError",
    "InvariantViolation",

    # Precision and policy
    "PrecisionMode",
    "PanicMode",
    "get_panic_mode",
    "checks_enabled",
]
