"""
Session: the per-test scope for call ordering.

A session owns the invocation-order counter that gives calls across all of
its doubles a total order, and the session-wide list of interactions.
Doubles and sequences created in one session must not be verified against
another session's doubles: their order ids are unrelated.

The module-level helpers (``mock()``, ``sequence()``, ...) use a default
session. Tests that want isolation create their own or use the
``stubwright_session`` pytest fixture.

Example:
    session = Session()
    greeter = session.mock(Greeter)
    seq = session.sequence()
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from stubwright.config.settings import StubwrightConfig, get_config
from stubwright.core.interaction import Interaction

if TYPE_CHECKING:
    from stubwright.core.mock import Mock
    from stubwright.core.mock_function import MockFunction
    from stubwright.core.verifiers import SequenceFactory

logger = logging.getLogger(__name__)


class Session:
    """Owns the call counter and every interaction recorded through it."""

    def __init__(self, config: StubwrightConfig | None = None) -> None:
        self.config = config or get_config()
        self._order = itertools.count(1)
        self._last_order_id = 0
        self._interactions: List[Interaction] = []

    @property
    def last_order_id(self) -> int:
        """Order id of the most recent interaction (0 before any call)."""
        return self._last_order_id

    @property
    def interactions(self) -> List[Interaction]:
        """All interactions recorded in this session, in call order."""
        return list(self._interactions)

    def interactions_since(self, order_id: int) -> List[Interaction]:
        """Interactions recorded after the one with *order_id*."""
        return [i for i in self._interactions if i.invocation_order_id > order_id]

    def record(
        self,
        function_label: str,
        context: Any,
        args: Iterable[Any],
        kwargs: dict[str, Any],
    ) -> Interaction:
        """Mint the next order id and record a new interaction."""
        order_id = next(self._order)
        self._last_order_id = order_id
        interaction = Interaction(
            function_label=function_label,
            context=context,
            args=tuple(args),
            kwargs=dict(kwargs),
            invocation_order_id=order_id,
        )
        self._interactions.append(interaction)
        logger.debug("Recorded %s (order id %d)", function_label, order_id)
        return interaction

    # ------------------------------------------------------------------
    # Factories bound to this session
    # ------------------------------------------------------------------

    def mock(self, template: Any = None, **kwargs: Any) -> "Mock":
        """Build a mock object in this session. See ``stubwright.mock``."""
        from stubwright.core.mock import mock

        return mock(template, session=self, **kwargs)

    def spy(self, template: Any, **kwargs: Any) -> "Mock":
        from stubwright.core.mock import spy

        return spy(template, session=self, **kwargs)

    def mock_function(self, name: str | None = None, delegate: Any = None) -> "MockFunction":
        from stubwright.core.mock import mock_function

        return mock_function(name, delegate=delegate, session=self)

    def sequence(self) -> "SequenceFactory":
        """Start a new in-order verification over this session's calls."""
        from stubwright.core.verifiers import SequenceFactory

        return SequenceFactory(self)

    def __repr__(self) -> str:
        return f"<Session interactions={len(self._interactions)}>"


_session: Optional[Session] = None


def get_session() -> Session:
    """Get the default session, creating it on first use."""
    global _session
    if _session is None:
        _session = Session()
    return _session


def set_session(session: Session | None) -> Session | None:
    """Install *session* as the default session and return the previous one."""
    global _session
    previous = _session
    _session = session
    return previous


def reset_session() -> Session:
    """Replace the default session with a fresh one and return it."""
    global _session
    _session = Session()
    return _session
