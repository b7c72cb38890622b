"""
Stub table and stub builder.

A stub registration pairs a matcher set with an action. Each double member
owns one ``StubTable``; when the member is called the table is searched
from the newest registration backwards, so a later, narrower stub overrides
an earlier, broader one:

    when(repo).find(anything()).then_return(None)
    when(repo).find(42).then_return(record)

    repo.find(42)   # record
    repo.find(7)    # None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from stubwright.matchers import MatcherSet

logger = logging.getLogger(__name__)


class ActionKind(str, Enum):
    RETURN = "return"
    CALL = "call"
    RAISE = "raise"


@dataclass(frozen=True)
class StubAction:
    """What a matching call does: return a value, call a function, or raise."""
    kind: ActionKind
    payload: Any = None

    def run(self, context: Any, args: Sequence[Any], kwargs: Dict[str, Any]) -> Any:
        if self.kind == ActionKind.RETURN:
            return self.payload
        if self.kind == ActionKind.RAISE:
            raise self.payload
        return self.payload(context, *args, **kwargs)


@dataclass
class StubRegistration:
    """
    One ``when(...)`` declaration.

    ``action`` stays None when no clause was given; a matching call then
    returns None.
    """
    matchers: MatcherSet
    action: Optional[StubAction] = None

    def run(self, context: Any, args: Sequence[Any], kwargs: Dict[str, Any]) -> Any:
        if self.action is None:
            return None
        return self.action.run(context, args, kwargs)


class StubTable:
    """Ordered stub registrations for one double member."""

    def __init__(self) -> None:
        self._registrations: List[StubRegistration] = []

    def register(self, matchers: MatcherSet) -> StubRegistration:
        registration = StubRegistration(matchers=matchers)
        self._registrations.append(registration)
        return registration

    def resolve(
        self,
        context: Any,
        args: Sequence[Any],
        kwargs: Dict[str, Any],
    ) -> Optional[StubRegistration]:
        """Return the most recently registered stub matching the call, if any."""
        for registration in reversed(self._registrations):
            if registration.matchers.matches(context, args, kwargs):
                return registration
        return None

    @property
    def registrations(self) -> List[StubRegistration]:
        return list(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)


class StubBuilder:
    """
    Fluent clause builder returned by ``when(double).member(...)``.

    Each clause replaces the action of the registration it was created for.
    """

    def __init__(self, label: str, registration: StubRegistration) -> None:
        self.label = label
        self.registration = registration

    def then(self, fn: Callable[..., Any]) -> "StubBuilder":
        """
        Call *fn* on matching calls and return its result.

        *fn* receives the call context first, then the call's positional
        and keyword arguments.
        """
        return self._set(StubAction(ActionKind.CALL, fn))

    def then_return(self, value: Any) -> "StubBuilder":
        """Return *value* on matching calls."""
        return self._set(StubAction(ActionKind.RETURN, value))

    def then_raise(self, error: BaseException) -> "StubBuilder":
        """Raise *error* on matching calls."""
        return self._set(StubAction(ActionKind.RAISE, error))

    def _set(self, action: StubAction) -> "StubBuilder":
        self.registration.action = action
        logger.debug("Stubbed %s to %s %r", self.label, action.kind.value, action.payload)
        return self
