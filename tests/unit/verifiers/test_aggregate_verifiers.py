"""
Unit tests for zero_interactions and no_more_interactions.
"""

import re

import pytest

from stubwright import (
    FailureKind,
    RemainingInteractionsError,
    VerificationError,
    mock,
    mock_function,
    no_more_interactions,
    sequence,
    times,
    verify,
    verify_no_more_interactions,
    verify_zero_interactions,
    zero_interactions,
)


class MyObject:
    def greeting(self, *args):
        return "hello"

    def farewell(self, a=None, b=None, c=None):
        return "bye"


@pytest.mark.unit
def test_zero_interactions_passes_on_untouched_double():
    obj = mock(MyObject)
    assert verify(obj, zero_interactions()) is None
    verify_zero_interactions(obj, mock_function())


@pytest.mark.unit
def test_zero_interactions_fails_naming_the_member():
    obj = mock(MyObject)
    obj.farewell("x")
    with pytest.raises(VerificationError, match=re.escape("Never wanted but invoked: obj.farewell()")):
        verify_zero_interactions(obj)


@pytest.mark.unit
def test_zero_interactions_on_mock_function():
    f = mock_function()
    f()
    with pytest.raises(VerificationError, match=re.escape("Never wanted but invoked: func()")):
        verify(f, zero_interactions())


@pytest.mark.unit
def test_no_more_interactions_after_verifying_everything():
    obj = mock(MyObject)
    obj.greeting()
    verify(obj, times(1)).greeting()
    assert verify(obj, no_more_interactions()) is None
    verify_no_more_interactions(obj)


@pytest.mark.unit
def test_no_more_interactions_fails_with_remaining_count():
    obj = mock(MyObject)
    obj.greeting()
    obj.farewell("x")
    obj.farewell("y")
    verify(obj).greeting()
    with pytest.raises(RemainingInteractionsError) as exc_info:
        verify_no_more_interactions(obj)
    error = exc_info.value
    assert error.headline == "No interactions wanted, but 2 remains: obj.farewell()"
    assert error.remaining == 2
    assert error.kind == FailureKind.INTERACTIONS_REMAIN
    assert error.function_label == "obj.farewell"


@pytest.mark.unit
def test_no_more_interactions_only_counts_unverified():
    f = mock_function()
    f(1)
    f(2)
    verify(f)(1)
    with pytest.raises(RemainingInteractionsError, match=re.escape("but 1 remains: func()")):
        verify_no_more_interactions(f)
    verify(f)(2)
    verify_no_more_interactions(f)


@pytest.mark.unit
def test_no_more_interactions_checks_every_double():
    f, g = mock_function("f"), mock_function("g")
    f()
    g()
    verify(f)()
    with pytest.raises(RemainingInteractionsError, match=re.escape("g()")):
        verify_no_more_interactions(f, g)


@pytest.mark.unit
def test_sequence_verification_does_not_mark_verified():
    f = mock_function()
    seq = sequence()
    f()
    verify(f, seq(1))()
    with pytest.raises(RemainingInteractionsError):
        verify_no_more_interactions(f)


@pytest.mark.unit
def test_failed_count_verification_does_not_mark_verified():
    f = mock_function()
    f()
    f()
    with pytest.raises(VerificationError):
        verify(f, times(1))()
    with pytest.raises(RemainingInteractionsError, match=re.escape("but 2 remains")):
        verify_no_more_interactions(f)
