"""
Argument matchers.

A matcher is a predicate over one call argument (or the call context) that
can describe itself for failure messages. Literal values given to
``when()`` or ``verify()`` are wrapped in ``EqualTo`` automatically, so
matchers are only needed for looser expectations:

    verify(mock_obj).farewell("x", "y", less_than(100))
    when(mock_obj).greeting(anything()).then_return("hi")

``MatcherSet`` is the adapter the engine works with: a context matcher plus
positional and keyword argument matchers, evaluated together against one
call. Stubbing and verification share it, so a stub and a verifier built
from the same arguments always select the same calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Sequence, Tuple


class Matcher(ABC):
    """Base class for argument matchers."""

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if *value* satisfies this matcher."""

    @abstractmethod
    def describe(self) -> str:
        """Describe what this matcher expects, e.g. ``equal to 42``."""

    def describe_value(self, value: Any) -> str:
        """Describe an actual value the way this matcher sees it."""
        return repr(value)

    def __repr__(self) -> str:
        return f"<{self.describe()}>"


class Anything(Matcher):
    def matches(self, value: Any) -> bool:
        return True

    def describe(self) -> str:
        return "anything"


class EqualTo(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def matches(self, value: Any) -> bool:
        return bool(value == self.expected)

    def describe(self) -> str:
        return f"equal to {self.expected!r}"


class SameAs(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def matches(self, value: Any) -> bool:
        return value is self.expected

    def describe(self) -> str:
        return f"same instance as {self.expected!r}"


class InstanceOf(Matcher):
    def __init__(self, expected_type: type | Tuple[type, ...]):
        self.expected_type = expected_type

    def matches(self, value: Any) -> bool:
        return isinstance(value, self.expected_type)

    def describe(self) -> str:
        if isinstance(self.expected_type, tuple):
            names = ", ".join(t.__name__ for t in self.expected_type)
            return f"instance of ({names})"
        return f"instance of {self.expected_type.__name__}"


class _Ordering(Matcher):
    """Compares against a bound; values that cannot be ordered never match."""

    symbol = ""
    words = ""

    def __init__(self, bound: Any):
        self.bound = bound

    def matches(self, value: Any) -> bool:
        try:
            return bool(self._compare(value))
        except TypeError:
            return False

    def _compare(self, value: Any) -> Any:
        raise NotImplementedError

    def describe(self) -> str:
        return f"{self.words} {self.bound!r}"


class LessThan(_Ordering):
    words = "less than"

    def _compare(self, value: Any) -> Any:
        return value < self.bound


class LessThanOrEqualTo(_Ordering):
    words = "less than or equal to"

    def _compare(self, value: Any) -> Any:
        return value <= self.bound


class GreaterThan(_Ordering):
    words = "greater than"

    def _compare(self, value: Any) -> Any:
        return value > self.bound


class GreaterThanOrEqualTo(_Ordering):
    words = "greater than or equal to"

    def _compare(self, value: Any) -> Any:
        return value >= self.bound


class ContainsString(Matcher):
    def __init__(self, substring: str):
        self.substring = substring

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and self.substring in value

    def describe(self) -> str:
        return f"a string containing {self.substring!r}"


class Predicate(Matcher):
    """Wraps an arbitrary callable ``fn(value) -> bool``."""

    def __init__(self, fn: Callable[[Any], bool], description: str | None = None):
        self.fn = fn
        self.description = description or getattr(fn, "__name__", "predicate")

    def matches(self, value: Any) -> bool:
        return bool(self.fn(value))

    def describe(self) -> str:
        return f"matching {self.description}"


class Not(Matcher):
    def __init__(self, matcher: Any):
        self.matcher = wrap(matcher)

    def matches(self, value: Any) -> bool:
        return not self.matcher.matches(value)

    def describe(self) -> str:
        return f"not {self.matcher.describe()}"


class AllOf(Matcher):
    def __init__(self, *matchers: Any):
        self.matchers = [wrap(m) for m in matchers]

    def matches(self, value: Any) -> bool:
        return all(m.matches(value) for m in self.matchers)

    def describe(self) -> str:
        return " and ".join(f"({m.describe()})" for m in self.matchers)


class AnyOf(Matcher):
    def __init__(self, *matchers: Any):
        self.matchers = [wrap(m) for m in matchers]

    def matches(self, value: Any) -> bool:
        return any(m.matches(value) for m in self.matchers)

    def describe(self) -> str:
        return " or ".join(f"({m.describe()})" for m in self.matchers)


# === Factory functions ===

def anything() -> Matcher:
    """Match any value, including None."""
    return Anything()


def equal_to(expected: Any) -> Matcher:
    return EqualTo(expected)


def same_as(expected: Any) -> Matcher:
    """Match only *expected* itself (identity, not equality)."""
    return SameAs(expected)


def instance_of(expected_type: type | Tuple[type, ...]) -> Matcher:
    return InstanceOf(expected_type)


def less_than(bound: Any) -> Matcher:
    return LessThan(bound)


def less_than_or_equal_to(bound: Any) -> Matcher:
    return LessThanOrEqualTo(bound)


def greater_than(bound: Any) -> Matcher:
    return GreaterThan(bound)


def greater_than_or_equal_to(bound: Any) -> Matcher:
    return GreaterThanOrEqualTo(bound)


def contains_string(substring: str) -> Matcher:
    return ContainsString(substring)


def matching(fn: Callable[[Any], bool], description: str | None = None) -> Matcher:
    """Match values for which ``fn(value)`` is truthy."""
    return Predicate(fn, description)


def not_(matcher: Any) -> Matcher:
    return Not(matcher)


def all_of(*matchers: Any) -> Matcher:
    return AllOf(*matchers)


def any_of(*matchers: Any) -> Matcher:
    return AnyOf(*matchers)


def wrap(value: Any) -> Matcher:
    """Return *value* if it is a matcher, otherwise an ``EqualTo`` for it."""
    if isinstance(value, Matcher):
        return value
    return EqualTo(value)


# === Matcher adapter ===

@dataclass(frozen=True)
class MatcherSet:
    """
    Matchers for one whole call: context, positional and keyword arguments.

    Matching rules:
    - ``context_matcher`` must match the call context.
    - Positional matcher ``i`` must match ``args[i]``. A call with fewer
      positional arguments than matchers never matches; extra arguments
      beyond the matchers are ignored.
    - Every keyword matcher must match the keyword argument of the same
      name, which must be present. Other keyword arguments are ignored.
    """
    context_matcher: Matcher = field(default_factory=Anything)
    arg_matchers: Tuple[Matcher, ...] = ()
    kwarg_matchers: Mapping[str, Matcher] = field(default_factory=dict)

    @classmethod
    def from_call(
        cls,
        context: Any,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> "MatcherSet":
        """Build a matcher set from call-shaped values, wrapping literals."""
        return cls(
            context_matcher=wrap(context),
            arg_matchers=tuple(wrap(a) for a in args),
            kwarg_matchers={k: wrap(v) for k, v in (kwargs or {}).items()},
        )

    @classmethod
    def any(cls) -> "MatcherSet":
        """A matcher set accepting every call on any context."""
        return cls()

    def matches(self, context: Any, args: Sequence[Any], kwargs: Dict[str, Any]) -> bool:
        if not self.context_matcher.matches(context):
            return False
        if len(args) < len(self.arg_matchers):
            return False
        for matcher, value in zip(self.arg_matchers, args):
            if not matcher.matches(value):
                return False
        for name, matcher in self.kwarg_matchers.items():
            if name not in kwargs or not matcher.matches(kwargs[name]):
                return False
        return True
