"""
Errors raised when a value falls outside a checked float's subset.

Two channels exist and they never overlap:

* ``InvalidValueError`` (a ``ValueError``) is the recoverable channel, raised
  by every ``try_*`` operation regardless of the panic-mode policy.
* ``InvariantViolation`` (an ``AssertionError``) is the panic, raised by the
  plain constructors and operators only while checks are enabled.
"""

from typing import Dict, Type

from .predicates import FloatKind


class InvalidValueError(ValueError):
    """
    A raw value does not satisfy a checked float's invariant.

    Attributes:
        kind: The variant whose predicate rejected the value
        value: The offending raw value
    """

    message = "encountered an invalid value unexpectedly"

    def __init__(self, kind: FloatKind, value):
        self.kind = kind
        self.value = value
        super().__init__(f"{self.message}: {value!r} is not a valid {kind.value} float")

    def __reduce__(self):
        return (type(self), (self.kind, self.value))


class NanError(InvalidValueError):
    """NaN reached a ``Real``."""
    message = "encountered NaN unexpectedly"


class InfiniteError(InvalidValueError):
    """NaN or an infinity reached a ``Finite``."""
    message = "encountered infinity or NaN unexpectedly"


class NegativeError(InvalidValueError):
    """NaN or a negative number reached a ``NonNeg``."""
    message = "encountered a negative or NaN unexpectedly"


class InvariantViolation(AssertionError):
    """
    Panic raised by the checked (non-``try_``) API.

    The underlying ``InvalidValueError`` is chained as ``__cause__``.
    """


_ERRORS: Dict[FloatKind, Type[InvalidValueError]] = {
    FloatKind.REAL: NanError,
    FloatKind.FINITE: InfiniteError,
    FloatKind.NON_NEG: NegativeError,
}


def error_for(kind: FloatKind, value) -> InvalidValueError:
    """Build the error describing ``value`` failing the ``kind`` check."""
    return _ERRORS[kind](kind, value)
