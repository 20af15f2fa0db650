"""Tests for Pattern / ClosedPattern construction and dispatch."""

from unittest.mock import Mock

import pytest

from declarative_pattern import (
    UNDEFINED,
    ClosedPattern,
    ClosedPatternError,
    MatchError,
    NoMatchingKindError,
    Pattern,
    constant,
    match,
    pattern,
)


class TestMatchEntryPoint:
    """Test the one-shot ``match`` helper."""

    def test_performs_match_directly(self):
        """match builds the pattern and dispatches at once."""
        assert match(1, lambda p: p.when(1, 2)) == 2

    def test_builder_return_value_ignored(self):
        """Whatever the builder returns is ignored."""
        def build(p):
            p.when("a", "A")
            return "ignored"

        assert match("a", build) == "A"

    def test_builder_may_set_default(self):
        """A default set inside the builder is honoured."""
        assert match(99, lambda p: p.when(1, "one").default("other")) == "other"

    def test_extra_arguments_forwarded(self):
        """Extra positional args reach the result callable."""
        result = match(2, lambda p: p.when(int, lambda v, k: v * k), 10)
        assert result == 20

    def test_raises_when_nothing_matches(self):
        """No clause and no default → MatchError."""
        with pytest.raises(MatchError):
            match(3, lambda p: p.when(1, 1))


class TestNoMatch:
    """Test the no-default failure path."""

    def test_empty_pattern_raises(self):
        """An empty open pattern raises on dispatch."""
        with pytest.raises(MatchError, match=r"^MatchError"):
            pattern().match("")
        with pytest.raises(MatchError, match=r"^MatchError"):
            pattern()("")

    def test_non_matching_clause_raises(self):
        """Clauses that do not match do not prevent the error."""
        with pytest.raises(MatchError):
            pattern().when(1, 1).match("")
        with pytest.raises(MatchError):
            pattern().when(1, 1)("")

    def test_closed_without_default_raises(self):
        """close() keeps the no-match failure."""
        closed = pattern().when(1, 1).close()

        with pytest.raises(MatchError) as exc_info:
            closed(2)

        assert exc_info.value.value == 2

    def test_match_error_is_lookup_error(self):
        """MatchError can be caught as LookupError."""
        with pytest.raises(LookupError):
            pattern().close()(0)


class TestInvalidPatterns:
    """Test construction-time rejection of unclassifiable specs."""

    def test_exception_instance_rejected(self):
        """An exception instance is not a pattern."""
        with pytest.raises(NoMatchingKindError):
            pattern().when(Exception(), None)

    def test_error_carries_spec(self):
        """The offending spec is kept on the error."""
        spec = object()

        with pytest.raises(NoMatchingKindError) as exc_info:
            pattern().when(spec, None)

        assert exc_info.value.spec is spec

    def test_failed_when_leaves_pattern_unchanged(self):
        """A rejected clause is not appended."""
        p = pattern().when(1, "one")

        with pytest.raises(NoMatchingKindError):
            p.when({1, 2}, "set")

        assert len(p.clauses) == 1
        assert p(1) == "one"

    def test_nested_invalid_spec_rejected(self):
        """An invalid element inside a container fails the whole clause."""
        p = pattern()

        with pytest.raises(NoMatchingKindError):
            p.when([1, object()], None)

        assert p.clauses == ()


class TestClosing:
    """Test the open → closed transition."""

    def test_closed_view_has_no_when(self):
        """close() and default() return an invocation-only view."""
        assert not hasattr(pattern().close(), "when")
        assert not hasattr(pattern().default(), "when")
        assert not hasattr(pattern().close(), "default")

    def test_close_returns_closed_pattern(self):
        """close() returns a ClosedPattern."""
        assert isinstance(pattern().close(), ClosedPattern)
        assert isinstance(pattern().default(1), ClosedPattern)

    def test_builder_refuses_when_after_close(self):
        """The builder itself rejects further clauses once closed."""
        p = pattern()
        p.close()

        with pytest.raises(ClosedPatternError):
            p.when(1, 1)

    def test_builder_refuses_second_default(self):
        """default() is one-shot on the builder."""
        p = pattern()
        p.default(0)

        with pytest.raises(ClosedPatternError):
            p.default(1)
        with pytest.raises(ClosedPatternError):
            p.when(1, 1)

    def test_builder_close_is_idempotent(self):
        """close() on a closed builder returns an equivalent view."""
        p = pattern().when(1, "one")
        first = p.close()
        second = p.close()

        assert isinstance(second, ClosedPattern)
        assert second(1) == "one"
        assert second.clauses == first.clauses
        with pytest.raises(MatchError):
            second(2)

    def test_second_close_keeps_default(self):
        """Closing after default() keeps the default."""
        p = pattern().when(1, "one")
        p.default("other")

        assert p.close()(2) == "other"

    def test_closed_close_is_idempotent(self):
        """close() on the closed view returns the same view."""
        closed = pattern().when(1, 1).close()
        assert closed.close() is closed

    def test_builder_still_dispatches_after_close(self):
        """Dispatch is legal in both states."""
        p = pattern().when(1, "one")
        p.default("other")

        assert p.closed is True
        assert p(1) == "one"
        assert p.match(2) == "other"

    def test_closed_view_is_snapshot(self):
        """Clauses are frozen into the closed view."""
        p = pattern().when(1, "one")
        closed = p.close()

        assert len(closed.clauses) == 1
        assert closed.has_default is False

    def test_when_returns_same_builder(self):
        """when() chains on the same object."""
        p = pattern()
        assert p.when(1, 1) is p
        assert isinstance(p, Pattern)


class TestDefault:
    """Test default clause behaviour."""

    def test_omitted_default_is_none(self):
        """default() without argument yields None."""
        assert pattern().default()("") is None

    def test_default_value_returned(self):
        """A plain default is returned verbatim."""
        assert pattern().default("default")("") == "default"

    def test_default_function_called_with_value(self):
        """A callable default receives the value."""
        default_mock = Mock(return_value="default")

        assert pattern().default(default_mock)("value") == "default"
        default_mock.assert_called_once_with("value")

    def test_default_receives_extra_arguments(self):
        """Extra args are forwarded to the default callable."""
        default_mock = Mock()

        pattern().default(default_mock)("value", "extra", "parameters")

        default_mock.assert_called_once_with("value", "extra", "parameters")

    def test_undefined_is_a_legitimate_default(self):
        """UNDEFINED as default is not confused with "no default"."""
        assert pattern().default(UNDEFINED)(1) is UNDEFINED

    def test_default_used_for_anything(self):
        """default("x") returns "x" for any value."""
        closed = pattern().default("x")

        for value in (None, 0, "", [], {}, object()):
            assert closed(value) == "x"


class TestResults:
    """Test result production for matching clauses."""

    def test_matching_function_called_with_value(self):
        """A callable result receives the matched value."""
        when_mock = Mock(return_value="pattern")

        assert pattern().when(str, when_mock)("value") == "pattern"
        when_mock.assert_called_once_with("value")

    def test_extra_parameters_passed_to_when_function(self):
        """Extra args reach the matched result callable."""
        when_mock = Mock()

        pattern().when(str, when_mock).match("value", "extra", "parameters")

        when_mock.assert_called_once_with("value", "extra", "parameters")

    def test_plain_results_ignore_extra_arguments(self):
        """Non-callable results are returned as is."""
        assert pattern().when(1, "one")(1, "extra") == "one"

    def test_constant_wraps_callable_result(self):
        """constant() returns a callable without invoking it."""
        closed = pattern().when("upper", constant(str.upper)).close()

        assert closed("upper") is str.upper

    def test_result_exception_propagates(self):
        """Exceptions from result callables are not wrapped."""
        def boom(value):
            raise KeyError(value)

        with pytest.raises(KeyError):
            pattern().when(1, boom)(1)


class TestOrdering:
    """Test first-match-wins ordering."""

    def test_first_clause_wins(self):
        """Overlapping clauses resolve to the earliest."""
        assert pattern().when(1, "a").when(1, "b")(1) == "a"

    def test_later_clause_not_evaluated(self, hit, miss):
        """Only the first matching result is invoked."""
        pattern().when(int, hit).when(1, miss).match(1)

        hit.assert_called_once_with(1)
        miss.assert_not_called()

    def test_broad_then_narrow(self):
        """A broad early clause shadows a narrower later one."""
        closed = pattern().when([], "any list").when([1], "starts with 1").close()
        assert closed([1, 2]) == "any list"
