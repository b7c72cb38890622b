"""
Root conftest.py: Shared fixtures for all tests.
"""

import pytest

from stubwright.config.settings import StubwrightConfig, get_config, set_config

pytest_plugins = ["stubwright.testing.fixtures"]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


@pytest.fixture(autouse=True)
def default_config():
    """Run every test with default configuration, whatever the environment says."""
    previous = get_config()
    set_config(StubwrightConfig())
    yield
    set_config(previous)


@pytest.fixture(autouse=True)
def isolated_session(default_config, stubwright_session):
    """Every test records into its own session."""
    return stubwright_session


@pytest.fixture
def stub_recorder():
    """A behaviour function that remembers the context and arguments it was called with."""

    class Recorder:
        def __init__(self):
            self.context = None
            self.args = None
            self.kwargs = None
            self.calls = 0

        def __call__(self, context, *args, **kwargs):
            self.context = context
            self.args = args
            self.kwargs = kwargs
            self.calls += 1
            return "stub result"

    return Recorder()
