"""
Verifiers.

Count verifiers (``times``, ``once``, ``never``, ``at_least``,
``at_most``) count the interactions of one member that match a matcher
set and mark them verified. Aggregate verifiers (``zero_interactions``,
``no_more_interactions``) run over every member of a double. Sequence
verifiers assert relative call order across doubles:

    seq = sequence()
    verify(mock1, seq(1)).method1()  # method1 called at least once
    verify(mock2, seq(1)).method2()  # ... and method2 after that

How sequences work:
1. Every interaction gets an invocation order id from its session.
2. A sequence keeps a cursor: the last interaction it consumed, starting
   at a sentinel with order id 0.
3. ``seq(n)`` looks for the first matching interaction after the cursor,
   requires ``n`` matching interactions from there on, and moves the
   cursor to the ``n``-th one.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, NoReturn, Sequence

from stubwright.core.interaction import Interaction
from stubwright.core.session import Session, get_session
from stubwright.description import describe_call
from stubwright.exceptions import (
    CountMismatchError,
    FailureKind,
    InvalidVerifierError,
    RemainingInteractionsError,
    SequenceMismatchError,
)
from stubwright.matchers import MatcherSet

logger = logging.getLogger(__name__)


class Verifier(ABC):
    """Base class for verifiers used through ``verify(double, verifier)``."""

    @abstractmethod
    def verify_interactions(
        self,
        function_label: str,
        interactions: Sequence[Interaction],
        matchers: MatcherSet,
        describe_context: bool = False,
    ) -> None:
        """Check one member's log against *matchers*; raise on failure."""

    @staticmethod
    def mark_verified(interactions: Sequence[Interaction]) -> None:
        for interaction in interactions:
            interaction.verified = True

    @staticmethod
    def matching(interactions: Sequence[Interaction], matchers: MatcherSet) -> List[Interaction]:
        return [
            i for i in interactions
            if matchers.matches(i.context, i.args, i.kwargs)
        ]


class AggregateVerifier(ABC):
    """Verifier applied to all members of a double at once."""

    @abstractmethod
    def verify_members(self, members: Sequence[Any]) -> None:
        """Check every member (``MockFunction``) of a double; raise on failure."""


# ---------------------------------------------------------------------------
# Count verifiers
# ---------------------------------------------------------------------------

class CountVerifier(Verifier):
    """Filters a member's log by a matcher set and checks the count."""

    def __init__(self, wanted: int) -> None:
        if wanted < 0:
            raise InvalidVerifierError(f"Cannot verify a negative number of invocations: {wanted}")
        self.wanted = wanted

    @abstractmethod
    def accepts(self, count: int) -> bool:
        ...

    @abstractmethod
    def failure(self, count: int) -> tuple[FailureKind, str]:
        ...

    def verify_interactions(
        self,
        function_label: str,
        interactions: Sequence[Interaction],
        matchers: MatcherSet,
        describe_context: bool = False,
    ) -> None:
        matched = self.matching(interactions, matchers)
        if self.accepts(len(matched)):
            self.mark_verified(matched)
            logger.debug("Verified %s: %s", function_label, self)
            return

        kind, message = self.failure(len(matched))
        raise CountMismatchError(
            f"{message}: {describe_call(function_label, matchers)}",
            kind=kind,
            wanted=self.wanted,
            actual=len(matched),
            function_label=function_label,
            matchers=matchers,
            interactions=interactions,
            describe_context=describe_context,
        )


class Times(CountVerifier):
    """Exactly ``wanted`` matching invocations."""

    def accepts(self, count: int) -> bool:
        return count == self.wanted

    def failure(self, count: int) -> tuple[FailureKind, str]:
        if count == 0:
            return FailureKind.WANTED_BUT_NOT_INVOKED, "Wanted but not invoked"
        if self.wanted == 0:
            return FailureKind.NEVER_WANTED_BUT_INVOKED, "Never wanted but invoked"
        if self.wanted == 1:
            return FailureKind.WANTED_ONE_INVOCATION, f"Wanted 1 invocation but got {count}"
        return (
            FailureKind.WANTED_N_INVOCATIONS,
            f"Wanted {self.wanted} invocations but got {count}",
        )

    def __repr__(self) -> str:
        return f"times({self.wanted})"


class AtLeast(CountVerifier):
    def accepts(self, count: int) -> bool:
        return count >= self.wanted

    def failure(self, count: int) -> tuple[FailureKind, str]:
        if count == 0:
            return FailureKind.WANTED_BUT_NOT_INVOKED, "Wanted but not invoked"
        return (
            FailureKind.WANTED_AT_LEAST,
            f"Wanted at least {self.wanted} invocations but got {count}",
        )

    def __repr__(self) -> str:
        return f"at_least({self.wanted})"


class AtMost(CountVerifier):
    def accepts(self, count: int) -> bool:
        return count <= self.wanted

    def failure(self, count: int) -> tuple[FailureKind, str]:
        if self.wanted == 0:
            return FailureKind.NEVER_WANTED_BUT_INVOKED, "Never wanted but invoked"
        return (
            FailureKind.WANTED_AT_MOST,
            f"Wanted at most {self.wanted} invocations but got {count}",
        )

    def __repr__(self) -> str:
        return f"at_most({self.wanted})"


# ---------------------------------------------------------------------------
# Aggregate verifiers
# ---------------------------------------------------------------------------

class ZeroInteractions(AggregateVerifier):
    """No member of the double was called at all."""

    def verify_members(self, members: Sequence[Any]) -> None:
        never_called = Times(0)
        for member in members:
            never_called.verify_interactions(member.label, member.interactions, MatcherSet.any())


class NoMoreInteractions(AggregateVerifier):
    """Every interaction on the double has been verified by a count verifier."""

    def verify_members(self, members: Sequence[Any]) -> None:
        for member in members:
            interactions = member.interactions
            remaining = [i for i in interactions if not i.verified]
            if not remaining:
                continue
            matchers = MatcherSet.any()
            raise RemainingInteractionsError(
                f"No interactions wanted, but {len(remaining)} remains: "
                f"{describe_call(member.label, matchers)}",
                kind=FailureKind.INTERACTIONS_REMAIN,
                remaining=len(remaining),
                function_label=member.label,
                matchers=matchers,
                interactions=interactions,
            )


# ---------------------------------------------------------------------------
# Sequence verifier
# ---------------------------------------------------------------------------

@dataclass
class SequenceState:
    """
    Cursor shared by every verifier of one ``sequence()``.

    ``cursor`` is only ever replaced, never mutated in place: interactions
    are shared with member logs.
    """
    session: Session
    cursor: Interaction = field(default_factory=Interaction.origin)
    start_order_id: int = 0


class SequenceVerifier(Verifier):
    """At least ``count`` matching invocations after the sequence cursor."""

    def __init__(self, state: SequenceState, count: int) -> None:
        if count < 1:
            raise InvalidVerifierError(
                f"The sequence verifier cannot verify sequences of length {count}"
            )
        self.state = state
        self.count = count

    def verify_interactions(
        self,
        function_label: str,
        interactions: Sequence[Interaction],
        matchers: MatcherSet,
        describe_context: bool = False,
    ) -> None:
        candidates = self.matching(interactions, matchers)
        cursor = self.state.cursor
        index = next(
            (n for n, i in enumerate(candidates) if i.invocation_order_id > cursor.invocation_order_id),
            None,
        )

        call = describe_call(function_label, matchers)
        after = "" if cursor.is_origin else f" after invoking {cursor.function_label}()"
        if not candidates:
            self._fail(FailureKind.NEVER_INVOKED, f"Expected but never invoked: {call}",
                       0, function_label, matchers, describe_context)
        if index is None:
            self._fail(
                FailureKind.NOT_INVOKED_AFTER,
                f"Expected {call} to be invoked at least {self.count} times"
                f" after invoking {cursor.function_label}()",
                0, function_label, matchers, describe_context,
            )
        found = len(candidates) - index
        if found < self.count:
            self._fail(
                FailureKind.INSUFFICIENT_INVOCATIONS,
                f"Expected {call} to be invoked at least {self.count} times{after} but got {found}",
                found, function_label, matchers, describe_context,
            )

        self.state.cursor = candidates[index + self.count - 1]
        logger.debug(
            "Sequence advanced to %s (order id %d)",
            function_label, self.state.cursor.invocation_order_id,
        )

    def _fail(
        self,
        kind: FailureKind,
        headline: str,
        found: int,
        function_label: str,
        matchers: MatcherSet,
        describe_context: bool,
    ) -> NoReturn:
        raise SequenceMismatchError(
            headline,
            kind=kind,
            count=self.count,
            found=found,
            cursor_label=self.state.cursor.function_label,
            function_label=function_label,
            matchers=matchers,
            interactions=self.state.session.interactions_since(self.state.start_order_id),
            describe_context=describe_context,
        )

    def __repr__(self) -> str:
        return f"seq({self.count})"


class SequenceFactory:
    """
    Returned by ``sequence()``; call it with a count to get a verifier.

    Interactions recorded before the factory was created still take part
    in verification; they are only left out of failure messages.
    """

    def __init__(self, session: Session) -> None:
        self.state = SequenceState(session=session, start_order_id=session.last_order_id)

    def __call__(self, count: int = 1) -> SequenceVerifier:
        return SequenceVerifier(self.state, count)


# ---------------------------------------------------------------------------
# Factory functions
# ---------------------------------------------------------------------------

def times(wanted: int) -> Times:
    """
    Test that an invocation occurred a specific number of times:

        verify(mock_obj, times(2)).method()
    """
    return Times(wanted)


def once() -> Times:
    """Test that an invocation occurred exactly once. This is the default verifier."""
    return Times(1)


def never() -> Times:
    """Test that an invocation never occurred."""
    return Times(0)


def at_least(wanted: int) -> AtLeast:
    return AtLeast(wanted)


def at_most(wanted: int) -> AtMost:
    return AtMost(wanted)


def zero_interactions() -> ZeroInteractions:
    """Test that no interactions were made on the mock: ``verify(mock_obj, zero_interactions())``."""
    return ZeroInteractions()


def no_more_interactions() -> NoMoreInteractions:
    """Test that no interactions remain unverified on the mock."""
    return NoMoreInteractions()


def sequence(session: Session | None = None) -> SequenceFactory:
    """
    Create an in-order verifier factory over *session* (the default session).

        seq = sequence()
        verify(mock1, seq(1)).method1()
        verify(mock2, seq(1)).method2()
    """
    return SequenceFactory(session if session is not None else get_session())

