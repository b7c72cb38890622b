"""
Core module for Stubwright.

Contains the interaction engine:
- Session: call ordering and the session-wide interaction list
- MockFunction / Mock: recording, stubbable doubles
- StubTable: last-registration-wins stub resolution
- Verifiers: count, aggregate and sequence verification
"""

from stubwright.core.interaction import Interaction
from stubwright.core.session import Session, get_session, set_session, reset_session
from stubwright.core.stubbing import StubAction, StubBuilder, StubRegistration, StubTable
from stubwright.core.mock_function import MockFunction
from stubwright.core.mock import Mock, mock, spy, mock_function, is_double
from stubwright.core.verifiers import (
    Verifier,
    AggregateVerifier,
    Times,
    AtLeast,
    AtMost,
    ZeroInteractions,
    NoMoreInteractions,
    SequenceState,
    SequenceVerifier,
    SequenceFactory,
    times,
    once,
    never,
    at_least,
    at_most,
    zero_interactions,
    no_more_interactions,
    sequence,
)
from stubwright.core.api import (
    when,
    verify,
    verify_zero_interactions,
    verify_no_more_interactions,
)

__all__ = [
    "Interaction",
    "Session",
    "get_session",
    "set_session",
    "reset_session",
    "StubAction",
    "StubBuilder",
    "StubRegistration",
    "StubTable",
    "MockFunction",
    "Mock",
    "mock",
    "spy",
    "mock_function",
    "is_double",
    "Verifier",
    "AggregateVerifier",
    "Times",
    "AtLeast",
    "AtMost",
    "ZeroInteractions",
    "NoMoreInteractions",
    "SequenceState",
    "SequenceVerifier",
    "SequenceFactory",
    "times",
    "once",
    "never",
    "at_least",
    "at_most",
    "zero_interactions",
    "no_more_interactions",
    "sequence",
    "when",
    "verify",
    "verify_zero_interactions",
    "verify_no_more_interactions",
]
