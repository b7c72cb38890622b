"""
Stubwright - a test-double engine for Python.

Build mocks that record every call, stub their behaviour per argument,
and verify afterwards what happened, how often, and in what order.

Example:
    from stubwright import mock, when, verify, times, sequence
    from stubwright.matchers import anything, less_than

    class Greeter:
        def greeting(self): ...
        def farewell(self, a, b, c): ...

    greeter = mock(Greeter)
    when(greeter).greeting().then_return("hello")

    assert greeter.greeting() == "hello"
    greeter.farewell("x", "y", 67)

    verify(greeter).greeting()
    verify(greeter).farewell("x", "y", less_than(100))
    verify(greeter, times(0)).farewell(anything(), "z")

    seq = sequence()
    verify(greeter, seq(1)).greeting()
    verify(greeter, seq(1)).farewell()
"""

__version__ = "0.1.0"

from stubwright.core import (
    Interaction,
    Session,
    get_session,
    set_session,
    reset_session,
    MockFunction,
    Mock,
    mock,
    spy,
    mock_function,
    is_double,
    times,
    once,
    never,
    at_least,
    at_most,
    zero_interactions,
    no_more_interactions,
    sequence,
    when,
    verify,
    verify_zero_interactions,
    verify_no_more_interactions,
)
from stubwright.config.settings import StubwrightConfig, get_config, set_config
from stubwright.exceptions import (
    StubwrightError,
    InvalidVerifierError,
    NotADoubleError,
    FailureKind,
    VerificationError,
    CountMismatchError,
    SequenceMismatchError,
    RemainingInteractionsError,
)

__all__ = [
    # Version
    "__version__",
    # Doubles
    "mock",
    "spy",
    "mock_function",
    "is_double",
    "Mock",
    "MockFunction",
    "Interaction",
    # Stubbing and verification
    "when",
    "verify",
    "verify_zero_interactions",
    "verify_no_more_interactions",
    "times",
    "once",
    "never",
    "at_least",
    "at_most",
    "zero_interactions",
    "no_more_interactions",
    "sequence",
    # Sessions
    "Session",
    "get_session",
    "set_session",
    "reset_session",
    # Config
    "StubwrightConfig",
    "get_config",
    "set_config",
    # Exceptions
    "StubwrightError",
    "InvalidVerifierError",
    "NotADoubleError",
    "FailureKind",
    "VerificationError",
    "CountMismatchError",
    "SequenceMismatchError",
    "RemainingInteractionsError",
]
