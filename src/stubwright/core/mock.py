"""
Double factory: mock objects, spies and mock functions.

Example:
    >>> class Greeter:
    ...     def greeting(self): return "hello"
    ...     def farewell(self, a, b, c): return "bye"
    >>>
    >>> greeter = mock(Greeter)
    >>> isinstance(greeter, Greeter)
    True
    >>> greeter.greeting() is None
    True
    >>> verify(greeter).greeting()
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from stubwright.core.mock_function import MockFunction
from stubwright.core.session import Session, get_session
from stubwright.core.template import (
    MemberSource,
    inspect_template,
    is_mapping_template,
    is_scalar,
)

logger = logging.getLogger(__name__)


@dataclass
class DoubleState:
    """Bookkeeping of one mock object, kept off its public namespace."""
    name: str
    session: Session
    template_class: Optional[type] = None
    members: Dict[str, MockFunction] = field(default_factory=dict)
    nested: Dict[str, "Mock"] = field(default_factory=dict)


class Mock:
    """
    Base class of every mock object.

    Each mock gets its own subclass so protocol methods (``__len__``,
    ``__getitem__``, ...) can be installed per double. The public
    namespace holds only the mocked members and copied attributes.
    """

    _stubwright: DoubleState

    @property  # type: ignore[misc]
    def __class__(self) -> type:
        template_class = self._stubwright.template_class
        return template_class if template_class is not None else type(self)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        state = self._stubwright
        if state.template_class is None:
            return f"<Mock {state.name}>"
        return f"<Mock {state.name} of {state.template_class.__name__}>"


def _protocol_method(name: str) -> Callable[..., Any]:
    def forward(self: Mock, /, *args: Any, **kwargs: Any) -> Any:
        return self._stubwright.members[name](*args, **kwargs)

    forward.__name__ = name
    return forward


def _spy_delegate(template: Any, double: Mock, source: MemberSource) -> Callable[..., Any]:
    """Route unmatched calls to the template's own implementation."""
    target = source.target
    bound_to_template = not inspect.isclass(template) and not is_mapping_template(template)

    def delegate(context: Any, /, *args: Any, **kwargs: Any) -> Any:
        on_double = context is double
        if isinstance(target, MockFunction):
            receiver = template if on_double and bound_to_template else context
            return target.call_with(receiver, *args, **kwargs)
        if source.binds_self and not (on_double and bound_to_template):
            return source.unbound(context, *args, **kwargs)
        return target(*args, **kwargs)

    return delegate


def mock(
    template: Any = None,
    *,
    members: Iterable[str] | None = None,
    deep: bool = False,
    spy: bool = False,
    name: str | None = None,
    session: Session | None = None,
    _seen: Dict[int, Mock] | None = None,
) -> Mock:
    """
    Create a mock object from a template.

    Args:
        template: A class, an instance, or a mapping of ``name -> callable``
        members: Extra member names to mock (the whole interface when no
            template is given)
        deep: Replace nested object-valued attributes with mocks too
        spy: Delegate calls that match no stub to the template's
            implementation
        name: Label prefix for members (config ``default_name``, "obj")
        session: Session to record into (the default session)

    Returns:
        A mock whose public members are MockFunctions. Non-callable
        attributes of the template are copied, or mocked in deep mode.
    """
    session = session if session is not None else get_session()
    name = name or session.config.default_name
    seen: Dict[int, Mock] = {} if _seen is None else _seen

    introspected = inspect_template(template, members)
    template_class = introspected.template_class
    namespace = {n: _protocol_method(n) for n in introspected.protocol_methods}
    class_name = f"Mock{template_class.__name__}" if template_class is not None else "Mock"
    double = type(class_name, (Mock,), namespace)()
    state = DoubleState(name=name, session=session, template_class=template_class)
    double._stubwright = state
    if template is not None:
        seen[id(template)] = double

    sources = list(introspected.methods.values()) + list(introspected.protocol_methods.values())
    for source in sources:
        delegate = None
        if spy and source.target is not None:
            delegate = _spy_delegate(template, double, source)
        member = MockFunction(f"{name}.{source.name}", session, delegate=delegate, context=double)
        state.members[source.name] = member
        if source.name not in introspected.protocol_methods:
            setattr(double, source.name, member)

    for attr_name, value in introspected.attributes.items():
        if deep and not is_scalar(value):
            nested = seen.get(id(value))
            if nested is None:
                nested = mock(value, deep=True, name=f"{name}.{attr_name}", session=session, _seen=seen)
            state.nested[attr_name] = nested
            value = nested
        setattr(double, attr_name, value)

    logger.debug(
        "Created %s with %d members%s",
        double, len(state.members), " (spy)" if spy else "",
    )
    return double


def spy(template: Any, **kwargs: Any) -> Mock:
    """Create a mock that falls through to *template* when no stub matches."""
    return mock(template, spy=True, **kwargs)


def _ignore_context(fn: Callable[..., Any]) -> Callable[..., Any]:
    def call(context: Any, /, *args: Any, **kwargs: Any) -> Any:
        return fn(*args, **kwargs)

    return call


def mock_function(
    name: str | None = None,
    delegate: Callable[..., Any] | None = None,
    session: Session | None = None,
) -> MockFunction:
    """
    Create a standalone mock function.

    Args:
        name: Label for failure messages (config ``function_name``, "func")
        delegate: Function called with the call's arguments when no stub matches
        session: Session to record into (the default session)
    """
    session = session if session is not None else get_session()
    fallback = _ignore_context(delegate) if delegate is not None else None
    return MockFunction(name or session.config.function_name, session, delegate=fallback)


# ---------------------------------------------------------------------------
# Double inspection helpers
# ---------------------------------------------------------------------------

def is_double(obj: Any) -> bool:
    return isinstance(obj, (Mock, MockFunction))


def members_of(double: Mock | MockFunction) -> List[MockFunction]:
    """The mock functions making up *double*, in creation order."""
    if isinstance(double, MockFunction):
        return [double]
    return list(double._stubwright.members.values())


def state_of(double: Mock) -> DoubleState:
    return double._stubwright
