"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and ga_snippet/), so fixtures are
available to centralized tests AND colocated adapter tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables — must be set before any ga_snippet module import
# ---------------------------------------------------------------------------
os.environ.setdefault("GOOGLE_ANALYTICS__ACCOUNT", "UA-1234567-1")


ACCOUNT = "UA-1234567-1"


@pytest.fixture
def fake_script_registrar():
    """Fake ScriptRegistrar that records registrations."""
    from ga_snippet.adapters.script_registrar.fake import FakeScriptRegistrar

    return FakeScriptRegistrar()


@pytest.fixture
def analytics_settings():
    """Factory for AnalyticsSettings; explicit values win over env vars."""
    from ga_snippet.core.config.settings import AnalyticsSettings

    def _make(**overrides):
        values = {"account": ACCOUNT, **overrides}
        return AnalyticsSettings(**values)

    return _make
