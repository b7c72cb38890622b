"""
MockFunction: a single recording, stubbable callable.

Every member of a mock object is a MockFunction, and ``mock_function()``
returns one directly. Calling it records an interaction unconditionally,
then returns whatever the newest matching stub dictates.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from stubwright.core.interaction import Interaction
from stubwright.core.session import Session
from stubwright.core.stubbing import StubBuilder, StubTable
from stubwright.matchers import Anything, Matcher, MatcherSet, SameAs

logger = logging.getLogger(__name__)


class MockFunction:
    """
    A recording, stubbable callable.

    Args:
        label: Name used in interaction records and failure messages
        session: Session providing the call order
        delegate: Called as ``delegate(context, *args, **kwargs)`` when no
            stub matches (spying); None means return None
        context: Default receiver for plain calls; the function itself
            when omitted

    Example:
        >>> f = mock_function("callback")
        >>> when(f)(1).then_return("one")
        >>> f(1)
        'one'
        >>> f.call_with(some_receiver, 2)  # explicit context
    """

    def __init__(
        self,
        label: str,
        session: Session,
        delegate: Optional[Callable[..., Any]] = None,
        context: Any = None,
    ) -> None:
        self.label = label
        self.stubs = StubTable()
        self._session = session
        self._delegate = delegate
        self._standalone = context is None
        self._context = self if context is None else context
        self._interactions: List[Interaction] = []

    @property
    def session(self) -> Session:
        return self._session

    @property
    def interactions(self) -> List[Interaction]:
        """This member's log, in call order."""
        return list(self._interactions)

    @property
    def call_count(self) -> int:
        return len(self._interactions)

    @property
    def default_context_matcher(self) -> Matcher:
        """
        Context matcher for plain stub and verification calls.

        A double member expects its double as receiver; a standalone
        function accepts any receiver, so ``call_with`` calls still count.
        """
        if self._standalone:
            return Anything()
        return SameAs(self._context)

    def __call__(self, /, *args: Any, **kwargs: Any) -> Any:
        return self.call_with(self._context, *args, **kwargs)

    def call_with(self, context: Any, /, *args: Any, **kwargs: Any) -> Any:
        """Invoke with an explicit receiver instead of the default one."""
        interaction = self._session.record(self.label, context, args, kwargs)
        self._interactions.append(interaction)

        registration = self.stubs.resolve(context, args, kwargs)
        if registration is not None:
            logger.debug("Resolved stub for %s", self.label)
            return registration.run(context, args, kwargs)
        if self._delegate is not None:
            return self._delegate(context, *args, **kwargs)
        return None

    def stub(self, matchers: MatcherSet) -> StubBuilder:
        """Register a stub for calls matching *matchers*."""
        registration = self.stubs.register(matchers)
        logger.debug("Registered stub #%d for %s", len(self.stubs), self.label)
        return StubBuilder(self.label, registration)

    def unverified(self) -> List[Interaction]:
        return [i for i in self._interactions if not i.verified]

    def __repr__(self) -> str:
        return f"<MockFunction {self.label}>"
