"""
Interaction: one recorded call on a double member.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Interaction:
    """
    Record of a single call made to a double member.

    Interactions compare by identity: two calls with equal arguments are
    still two interactions.

    Attributes:
        function_label: Label of the member, e.g. ``obj.greeting`` or ``func``
        context: The receiver the call was made with
        args: Positional arguments, arity preserving
        kwargs: Keyword arguments
        invocation_order_id: Position in the session-wide call order (from 1)
        verified: Set once a count verifier has matched this interaction
    """
    function_label: str | None
    context: Any = None
    args: tuple = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    invocation_order_id: int = 0
    verified: bool = False

    @classmethod
    def origin(cls) -> "Interaction":
        """The sentinel a sequence cursor starts from: before every call."""
        return cls(function_label=None)

    @property
    def is_origin(self) -> bool:
        return self.invocation_order_id == 0
