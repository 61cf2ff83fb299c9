"""
Precision configuration for checked floats.

Every checked float class is instantiated for exactly one precision. The
precision decides which numpy scalar type stores the raw value, so arithmetic
overflows, rounds and divides by zero exactly the way that IEEE 754 format
does.
"""

import numpy as np
from typing import Type, Union
from enum import Enum


class PrecisionMode(Enum):
    """Supported precision modes."""
    FLOAT32 = np.float32
    FLOAT64 = np.float64

    @property
    def numpy_dtype(self) -> Type[np.floating]:
        """Get the numpy dtype for this precision."""
        return self.value

    @property
    def bits(self) -> int:
        """Get the number of bits for this precision."""
        return np.dtype(self.value).itemsize * 8

    @classmethod
    def from_name(cls, mode: Union["PrecisionMode", str]) -> "PrecisionMode":
        """
        Resolve a precision mode from an enum member or its dtype name.

        Args:
            mode: PrecisionMode enum or string ('float32', 'float64')

        Raises:
            ValueError: If mode is not supported
        """
        if isinstance(mode, str):
            mode_map = {
                'float32': cls.FLOAT32,
                'float64': cls.FLOAT64,
            }
            if mode not in mode_map:
                raise ValueError(f"Unsupported precision mode: {mode}")
            mode = mode_map[mode]

        if not isinstance(mode, cls):
            raise ValueError(f"Invalid precision mode: {mode}")

        return mode

    def cast(self, value) -> np.floating:
        """
        Convert a real number to this precision.

        Values outside the representable range become infinities, the same
        way a hardware conversion would; no warning is emitted for it.

        Args:
            value: Any real number (int, float, numpy scalar)

        Returns:
            numpy scalar of this precision
        """
        if isinstance(value, self.value):
            return value
        with np.errstate(over='ignore', invalid='ignore'):
            try:
                return self.value(value)
            except OverflowError:
                # Python ints too large for a C double
                return self.value(np.inf if value > 0 else -np.inf)

    def get_epsilon(self) -> float:
        """Get machine epsilon for this precision."""
        return np.finfo(self.value).eps

    def get_max(self) -> float:
        """Get maximum representable value for this precision."""
        return np.finfo(self.value).max

    def get_min(self) -> float:
        """Get minimum positive normal value for this precision."""
        return np.finfo(self.value).tiny
