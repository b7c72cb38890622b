"""
Unit tests for the pytest plugin fixtures.
"""

import pytest

from stubwright import Session, get_session, mock_function, verify
from stubwright.core.verifiers import SequenceFactory


@pytest.mark.unit
def test_session_fixture_is_the_default_session(stubwright_session):
    assert isinstance(stubwright_session, Session)
    assert get_session() is stubwright_session


@pytest.mark.unit
def test_session_fixture_starts_empty(stubwright_session):
    assert stubwright_session.interactions == []
    assert stubwright_session.last_order_id == 0


@pytest.mark.unit
def test_sequence_factory_uses_the_test_session(sequence_factory, stubwright_session):
    assert isinstance(sequence_factory, SequenceFactory)
    assert sequence_factory.state.session is stubwright_session
    f = mock_function()
    g = mock_function("g")
    f()
    g()
    verify(f, sequence_factory(1))()
    verify(g, sequence_factory(1))()
