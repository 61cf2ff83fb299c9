"""
Panic-mode policy for the checked (non-``try_``) API.

The mode is resolved once, when the package is first imported:

* ``CHECKED_IN_DEBUG`` (default): checks run only while ``__debug__`` is true,
  i.e. unless the interpreter was started with ``-O``. Under ``-O`` the plain
  constructors and operators trust their input and can store invalid values.
* ``STRICT``: checks always run. Selected by setting the environment variable
  ``CHECKEDFLOAT_STRICT`` to a truthy value before import.

The ``try_*`` API always checks and is unaffected by this module.
"""

import logging
import os
import warnings
from enum import Enum
from typing import Final, Mapping, Optional

logger = logging.getLogger(__name__)

STRICT_ENV_VAR: Final[str] = "CHECKEDFLOAT_STRICT"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


class PanicMode(Enum):
    """When the checked API verifies invariants."""
    CHECKED_IN_DEBUG = "checked_in_debug"
    STRICT = "strict"


def resolve_panic_mode(environ: Optional[Mapping[str, str]] = None) -> PanicMode:
    """
    Read the panic mode from the environment.

    Args:
        environ: Mapping to read from (default: ``os.environ``)

    Returns:
        STRICT if ``CHECKEDFLOAT_STRICT`` holds a truthy spelling,
        CHECKED_IN_DEBUG otherwise. Unrecognized spellings warn and fall
        back to CHECKED_IN_DEBUG.
    """
    if environ is None:
        environ = os.environ
    raw = environ.get(STRICT_ENV_VAR, "")
    flag = raw.strip().lower()

    if flag in _TRUTHY:
        return PanicMode.STRICT
    if flag not in _FALSY:
        warnings.warn(
            f"Unrecognized value {raw!r} for {STRICT_ENV_VAR}; "
            f"using {PanicMode.CHECKED_IN_DEBUG.value} mode",
            RuntimeWarning,
            stacklevel=2,
        )
    return PanicMode.CHECKED_IN_DEBUG


def resolve_checks_enabled(mode: PanicMode, debug: bool = __debug__) -> bool:
    """Whether the checked API verifies invariants under ``mode``."""
    return mode is PanicMode.STRICT or debug


PANIC_MODE: Final[PanicMode] = resolve_panic_mode()

# Read through the module at call time; never reassigned by the library.
CHECKS_ENABLED: bool = resolve_checks_enabled(PANIC_MODE)

logger.debug(
    "checkedfloat panic mode %s (checks %s)",
    PANIC_MODE.value,
    "enabled" if CHECKS_ENABLED else "disabled",
)


def get_panic_mode() -> PanicMode:
    """Get the panic mode resolved at import."""
    return PANIC_MODE


def checks_enabled() -> bool:
    """Check whether the checked API currently verifies invariants."""
    return CHECKS_ENABLED
