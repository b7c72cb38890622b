"""
Unit tests for argument matchers and MatcherSet.
"""

import pytest

from stubwright.matchers import (
    Anything,
    EqualTo,
    MatcherSet,
    all_of,
    any_of,
    anything,
    contains_string,
    equal_to,
    greater_than,
    greater_than_or_equal_to,
    instance_of,
    less_than,
    less_than_or_equal_to,
    matching,
    not_,
    same_as,
    wrap,
)


# ---------------------------------------------------------------------------
# Individual matchers
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_anything_matches_everything():
    m = anything()
    assert m.matches(None)
    assert m.matches(42)
    assert m.matches(object())
    assert m.describe() == "anything"


@pytest.mark.unit
def test_equal_to():
    m = equal_to("hi")
    assert m.matches("hi")
    assert not m.matches("bye")
    assert m.describe() == "equal to 'hi'"
    assert repr(m) == "<equal to 'hi'>"


@pytest.mark.unit
def test_same_as_uses_identity():
    a = [1]
    m = same_as(a)
    assert m.matches(a)
    assert not m.matches([1])


@pytest.mark.unit
def test_instance_of():
    assert instance_of(int).matches(3)
    assert not instance_of(int).matches("3")
    assert instance_of((int, str)).matches("3")
    assert instance_of((int, str)).describe() == "instance of (int, str)"


@pytest.mark.unit
def test_ordering_matchers():
    assert less_than(100).matches(67)
    assert not less_than(100).matches(100)
    assert less_than_or_equal_to(100).matches(100)
    assert greater_than(1).matches(2)
    assert greater_than_or_equal_to(2).matches(2)
    assert less_than(100).describe() == "less than 100"


@pytest.mark.unit
def test_ordering_matcher_rejects_unorderable_values():
    """Comparing incompatible types does not raise, it simply fails to match."""
    assert not less_than(100).matches("x")
    assert not greater_than(1).matches(None)


@pytest.mark.unit
def test_contains_string():
    assert contains_string("ell").matches("hello")
    assert not contains_string("ell").matches(42)


@pytest.mark.unit
def test_matching_predicate():
    def is_even(v):
        return v % 2 == 0

    m = matching(is_even)
    assert m.matches(4)
    assert not m.matches(3)
    assert m.describe() == "matching is_even"
    assert matching(lambda v: True, "always").describe() == "matching always"


@pytest.mark.unit
def test_combinators():
    assert not_(1).matches(2)
    assert not not_(1).matches(1)
    assert all_of(greater_than(1), less_than(5)).matches(3)
    assert not all_of(greater_than(1), less_than(5)).matches(7)
    assert any_of(1, 2).matches(2)
    assert not any_of(1, 2).matches(3)
    assert any_of(1, 2).describe() == "(equal to 1) or (equal to 2)"


@pytest.mark.unit
def test_wrap_keeps_matchers_and_wraps_literals():
    m = anything()
    assert wrap(m) is m
    wrapped = wrap(42)
    assert isinstance(wrapped, EqualTo)
    assert wrapped.expected == 42


# ---------------------------------------------------------------------------
# MatcherSet
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_matcher_set_from_call_wraps_everything():
    ctx = object()
    ms = MatcherSet.from_call(ctx, ("a", less_than(3)), {"key": 1})
    assert isinstance(ms.context_matcher, EqualTo)
    assert len(ms.arg_matchers) == 2
    assert isinstance(ms.kwarg_matchers["key"], EqualTo)
    assert ms.matches(ctx, ("a", 2), {"key": 1})


@pytest.mark.unit
def test_matcher_set_any_accepts_every_call():
    ms = MatcherSet.any()
    assert isinstance(ms.context_matcher, Anything)
    assert ms.matches(object(), (), {})
    assert ms.matches(None, (1, 2, 3), {"x": 1})


@pytest.mark.unit
def test_matcher_set_context_slot():
    ctx = object()
    ms = MatcherSet(context_matcher=same_as(ctx))
    assert ms.matches(ctx, (), {})
    assert not ms.matches(object(), (), {})


@pytest.mark.unit
def test_matcher_set_ignores_extra_arguments():
    ms = MatcherSet(arg_matchers=(equal_to(42),))
    assert ms.matches(None, (42, "hi"), {})


@pytest.mark.unit
def test_matcher_set_rejects_missing_arguments():
    """Absent positional slots never match, not even ``anything()``."""
    ms = MatcherSet(arg_matchers=(equal_to("foo"), anything()))
    assert not ms.matches(None, ("foo",), {})
    assert ms.matches(None, ("foo", None), {})


@pytest.mark.unit
def test_matcher_set_keyword_arguments():
    ms = MatcherSet(kwarg_matchers={"name": equal_to("bob")})
    assert ms.matches(None, (), {"name": "bob", "age": 3})
    assert not ms.matches(None, (), {"name": "alice"})
    assert not ms.matches(None, (), {})
