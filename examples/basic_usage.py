"""Basic usage example of the checkedfloat library.

This example shows how the checked float types carry their guarantees through
arithmetic, and how the checked and fallible channels report violations.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import checkedfloat as cf


def demonstrate_checked_arithmetic():
    """Show arithmetic that stays inside each subset."""
    print("=== Checked Arithmetic ===\n")

    x = cf.Real(3.0)
    y = cf.Real(0.0)

    # Real tolerates infinity, so division by zero succeeds
    print(f"Real 3.0 / 0.0 = {x / y!r}")

    # Finite arithmetic behaves like plain floats while the result stays finite
    a = cf.Finite(1.5)
    b = cf.Finite(2.0)
    print(f"Finite 1.5 * 2.0 + 1.0 = {a * b + 1.0!r}")

    # NonNeg keeps its sign guarantee
    n = cf.NonNeg(4.0)
    print(f"NonNeg 4.0 - 1.0 = {n - 1.0!r}")


def demonstrate_fallible_operations():
    """Show the try_* surface reporting violations as exceptions."""
    print("\n=== Fallible Operations ===\n")

    try:
        cf.Real(0.0).try_div(0.0)
    except cf.InvalidValueError as exc:
        print(f"Real 0.0 / 0.0 -> {type(exc).__name__}: {exc}")

    try:
        cf.Finite(1.0).try_div(0.0)
    except cf.InvalidValueError as exc:
        print(f"Finite 1.0 / 0.0 -> {type(exc).__name__}: {exc}")

    try:
        cf.NonNeg(1.0).try_sub(2.0)
    except cf.NegativeError as exc:
        print(f"NonNeg 1.0 - 2.0 -> {type(exc).__name__} (value {exc.value})")


def demonstrate_conversions():
    """Show explicit conversions between variants and precisions."""
    print("\n=== Conversions ===\n")

    r = cf.Real(1e300)
    print(f"{r!r}.try_into(Finite) = {r.try_into(cf.Finite)!r}")
    print(f"{r!r}.into(Real32) = {r.into(cf.Real32)!r}")

    try:
        r.try_into(cf.Finite32)
    except cf.InfiniteError:
        print(f"{r!r} does not fit a Finite32")

    print(f"checked_type('non_neg', 'float32') is {cf.checked_type('non_neg', 'float32').__name__}")


def demonstrate_policy():
    """Show the panic-mode policy resolved at import."""
    print("\n=== Panic Mode ===\n")
    print(f"Mode: {cf.get_panic_mode().value}, checks enabled: {cf.checks_enabled()}")

    try:
        cf.Finite(float('inf'))
    except cf.InvariantViolation as exc:
        print(f"Finite(inf) panicked: {exc}")


def main():
    demonstrate_checked_arithmetic()
    demonstrate_fallible_operations()
    demonstrate_conversions()
    demonstrate_policy()


if __name__ == "__main__":
    main()
