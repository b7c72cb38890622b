"""
Stubbing and verification entry points.

``when(double)`` and ``verify(double, verifier)`` return *views*: objects
shaped like the double whose members, instead of recording a call, turn
the call's arguments into a matcher set and either register a stub or run
the verifier.

    when(mock_obj).add(1, 2).then_return(3)
    mock_obj.add(1, 2)                        # 3
    verify(mock_obj).add(1, greater_than(1))  # ok
    verify(mock_obj, never()).add(1, 4)       # ok

The call context is matched too. Plain calls on a view expect the double
itself as context; ``call_with`` takes an explicit context (or context
matcher):

    when(mock_obj).add.call_with(anything(), 1, 2).then_return(3)
    verify(mock_obj).add.call_with(other_receiver, 1, 2)
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from stubwright.core.mock import Mock, is_double, members_of, state_of
from stubwright.core.mock_function import MockFunction
from stubwright.core.stubbing import StubBuilder
from stubwright.core.verifiers import (
    AggregateVerifier,
    SequenceVerifier,
    Verifier,
    no_more_interactions,
    once,
    zero_interactions,
)
from stubwright.exceptions import InvalidVerifierError, NotADoubleError
from stubwright.matchers import MatcherSet, wrap

# handler(member, matchers, describe_context)
Handler = Callable[[MockFunction, MatcherSet, bool], Any]


class MemberView:
    """Stand-in for one double member on a stubbing or verification view."""

    def __init__(self, member: MockFunction, handler: Handler) -> None:
        self._member = member
        self._handler = handler

    def __call__(self, /, *args: Any, **kwargs: Any) -> Any:
        matchers = MatcherSet(
            context_matcher=self._member.default_context_matcher,
            arg_matchers=tuple(wrap(a) for a in args),
            kwarg_matchers={k: wrap(v) for k, v in kwargs.items()},
        )
        return self._handler(self._member, matchers, False)

    def call_with(self, context: Any, /, *args: Any, **kwargs: Any) -> Any:
        return self._handler(self._member, MatcherSet.from_call(context, args, kwargs), True)

    def __repr__(self) -> str:
        return f"<MemberView {self._member.label}>"


class DoubleView:
    """A view shaped like a mock object; nested mocks get views of their own."""

    def __init__(self, double: Mock, handler: Handler) -> None:
        state = state_of(double)
        self._double = double
        self._handler = handler
        self._members: Dict[str, MemberView] = {
            name: MemberView(member, handler) for name, member in state.members.items()
        }

    @property  # type: ignore[misc]
    def __class__(self) -> type:
        template_class = state_of(self._double).template_class
        return template_class if template_class is not None else type(self)

    def __getattr__(self, name: str) -> Any:
        members = self.__dict__.get("_members", {})
        if name in members:
            return members[name]
        nested = state_of(self.__dict__["_double"]).nested
        if name in nested:
            return DoubleView(nested[name], self.__dict__["_handler"])
        raise AttributeError(f"{self.__dict__['_double']!r} has no mocked member {name!r}")

    def __repr__(self) -> str:
        return f"<DoubleView of {self._double!r}>"


def _view(double: Any, handler: Handler) -> Any:
    if isinstance(double, MockFunction):
        return MemberView(double, handler)
    if isinstance(double, Mock):
        return DoubleView(double, handler)
    raise NotADoubleError(double)


def _stub(member: MockFunction, matchers: MatcherSet, describe_context: bool) -> StubBuilder:
    return member.stub(matchers)


def when(double: Any) -> Any:
    """
    Start a stub declaration.

    Returns a view of *double*; calling a member on it registers a stub for
    matching calls and returns a ``StubBuilder``:

        when(mock_obj).greeting("bob").then_return("hi bob")
        when(mock_func)(1, anything()).then(lambda context, a, b: a + b)
    """
    return _view(double, _stub)


def verify(double: Any, verifier: Verifier | AggregateVerifier | None = None) -> Any:
    """
    Verify interactions with *double*.

    With a count or sequence verifier (``once()`` by default) this returns a
    view; calling a member on it runs the verification. Aggregate verifiers
    (``zero_interactions()``, ``no_more_interactions()``) check immediately
    and return None.
    """
    if not is_double(double):
        raise NotADoubleError(double)
    if verifier is None:
        verifier = once()
    if isinstance(verifier, AggregateVerifier):
        verifier.verify_members(members_of(double))
        return None

    def run(member: MockFunction, matchers: MatcherSet, describe_context: bool) -> None:
        if isinstance(verifier, SequenceVerifier) and member.session is not verifier.state.session:
            raise InvalidVerifierError(
                f"{member.label} belongs to another session than the sequence; "
                "order ids from different sessions cannot be compared"
            )
        verifier.verify_interactions(member.label, member.interactions, matchers, describe_context)

    return _view(double, run)


def verify_zero_interactions(*doubles: Any) -> None:
    """Test that no interactions were made on any of *doubles*."""
    for double in doubles:
        verify(double, zero_interactions())


def verify_no_more_interactions(*doubles: Any) -> None:
    """Test that no unverified interactions remain on any of *doubles*."""
    for double in doubles:
        verify(double, no_more_interactions())
