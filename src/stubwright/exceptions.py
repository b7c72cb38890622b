"""
Custom exception hierarchy for Stubwright.

Every verification failure derives from ``VerificationError``, which is
also an ``AssertionError`` so test runners report it as a failed assertion.
Failures carry structured data (function label, matcher set, interaction
log); the human-readable message is rendered by ``stubwright.description``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from stubwright.core.interaction import Interaction
    from stubwright.matchers import MatcherSet


class StubwrightError(Exception):
    """Base exception for all Stubwright errors."""
    pass


class InvalidVerifierError(StubwrightError, ValueError):
    """A verifier was constructed with an impossible expectation."""
    pass


class NotADoubleError(StubwrightError, TypeError):
    """``when()`` or ``verify()`` was given something that is not a double."""
    def __init__(self, obj: Any):
        self.obj = obj
        super().__init__(f"Expected a mock or mock function, got {obj!r}")


class FailureKind(str, Enum):
    """Distinguishes the verification failure messages."""
    WANTED_BUT_NOT_INVOKED = "wanted_but_not_invoked"
    NEVER_WANTED_BUT_INVOKED = "never_wanted_but_invoked"
    WANTED_ONE_INVOCATION = "wanted_one_invocation"
    WANTED_N_INVOCATIONS = "wanted_n_invocations"
    WANTED_AT_LEAST = "wanted_at_least"
    WANTED_AT_MOST = "wanted_at_most"
    NEVER_INVOKED = "never_invoked"
    NOT_INVOKED_AFTER = "not_invoked_after"
    INSUFFICIENT_INVOCATIONS = "insufficient_invocations"
    INTERACTIONS_REMAIN = "interactions_remain"


# === Verification Errors ===

class VerificationError(StubwrightError, AssertionError):
    """
    Base exception for verification failures.

    Attributes:
        headline: One-line summary, e.g. ``Wanted but not invoked: func()``
        kind: Which failure this is
        function_label: Label of the double member that was verified
        matchers: The matcher set the verification used
        interactions: Interactions to show for diagnostics
        describe_context: Whether the context matcher was given explicitly
    """
    hint: str = ""

    def __init__(
        self,
        headline: str,
        *,
        kind: FailureKind,
        function_label: str,
        matchers: MatcherSet,
        interactions: Sequence[Interaction] = (),
        describe_context: bool = False,
    ):
        self.headline = headline
        self.kind = kind
        self.function_label = function_label
        self.matchers = matchers
        self.interactions = list(interactions)
        self.describe_context = describe_context
        super().__init__(headline)

    def __str__(self) -> str:
        from stubwright.description import render_failure

        return render_failure(self)


class CountMismatchError(VerificationError):
    """The number of matching interactions differs from the wanted count."""
    def __init__(self, headline: str, *, wanted: int, actual: int, **kwargs: Any):
        self.wanted = wanted
        self.actual = actual
        super().__init__(headline, **kwargs)


class SequenceMismatchError(VerificationError):
    """A matching interaction did not happen after the sequence cursor."""
    def __init__(
        self,
        headline: str,
        *,
        count: int,
        found: int,
        cursor_label: str | None = None,
        **kwargs: Any,
    ):
        self.count = count
        self.found = found
        self.cursor_label = cursor_label
        super().__init__(headline, **kwargs)
        if not self.interactions:
            self.hint = (
                "No interactions were caught since the sequence was created. "
                "Create the sequence() before exercising the code under test "
                "so it can capture the interactions."
            )


class RemainingInteractionsError(VerificationError):
    """Unverified interactions remain on a double member."""
    def __init__(self, headline: str, *, remaining: int, **kwargs: Any):
        self.remaining = remaining
        super().__init__(headline, **kwargs)
