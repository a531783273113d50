"""Pytest configuration for the ocpp_validate test suite.

Hypothesis profiles:
- dev: local development, 200 examples per message class
- ci: CI runs, 50 examples, derandomized
- verbose: debug mode with progress output

Select one with HYPOTHESIS_PROFILE; CI=true selects "ci".
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from ocpp_validate.settings import get_settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=_PHASES,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
    deadline=None,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
    deadline=None,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
    deadline=None,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep environment based settings from leaking between tests."""
    for name in list(os.environ):
        if name.startswith("OCPP_VALIDATE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
