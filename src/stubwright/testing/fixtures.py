"""
Pytest fixtures for Stubwright.

Use these fixtures in your test suite by registering the plugin in your
``conftest.py``:

    pytest_plugins = ["stubwright.testing.fixtures"]

Then in your tests you can use ``stubwright_session`` (a fresh Session,
installed as the default session for the duration of the test) and
``sequence_factory``.

Requires: pytest (optional dependency for tests).
"""

from __future__ import annotations

from typing import Iterator

import pytest

from stubwright.core.session import Session, set_session
from stubwright.core.verifiers import SequenceFactory


@pytest.fixture
def stubwright_session() -> Iterator[Session]:
    """
    Provide a fresh Session for each test.

    Module-level helpers (``mock()``, ``sequence()``, ...) record into it
    while the test runs; the previous default session is restored after.
    """
    session = Session()
    previous = set_session(session)
    try:
        yield session
    finally:
        set_session(previous)


@pytest.fixture
def sequence_factory(stubwright_session: Session) -> SequenceFactory:
    """Provide a sequence over the test's session, created before the test body runs."""
    return stubwright_session.sequence()
