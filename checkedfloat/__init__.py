# MIT License
# See LICENSE file in the project root for full license text.
"""
checkedfloat: floats that carry their numeric guarantees in their type.

``Real`` is never NaN, ``Finite`` is never NaN or infinite, and ``NonNeg`` is
never NaN or negative. Every constructor, operator and conversion re-checks
its result, so code receiving one of these types can skip its own
NaN/infinity/sign checks.
"""

__version__ = "0.1.0"

from .core import (
    CheckedFloat,
    Finite,
    Finite32,
    Finite64,
    FloatKind,
    InfiniteError,
    InvalidValueError,
    InvariantViolation,
    NanError,
    NegativeError,
    NonNeg,
    NonNeg32,
    NonNeg64,
    PanicMode,
    PrecisionMode,
    Real,
    Real32,
    Real64,
    checked_type,
    checks_enabled,
    get_panic_mode,
    is_finite,
    is_non_neg,
    is_real,
    predicate_for,
)

__all__ = [
    # Version info
    "__version__",
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
