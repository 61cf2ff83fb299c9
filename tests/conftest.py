"""Global test configuration and shared fixtures.

Registers a hypothesis profile selected through ``CHECKEDFLOAT_HYPOTHESIS_PROFILE``
and provides fixtures that flip the checked API's policy flag for a single
test, standing in for running the suite under ``python -O``.
"""

import os

import pytest
from hypothesis import settings

from checkedfloat.core import policy


settings.register_profile("default", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.load_profile(os.environ.get("CHECKEDFLOAT_HYPOTHESIS_PROFILE", "default"))


@pytest.fixture
def checks_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run a test as if the interpreter were optimized (checks compiled out)."""
    monkeypatch.setattr(policy, "CHECKS_ENABLED", False)


@pytest.fixture
def checks_on(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run a test with checks forced on, as strict mode does."""
    monkeypatch.setattr(policy, "CHECKS_ENABLED", True)
