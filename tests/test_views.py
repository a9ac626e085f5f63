import operator
from itertools import count, islice

import pytest

from fluent_views import (
    BoundedView,
    ChainedView,
    ExhaustedError,
    FilteredView,
    InvalidArgumentError,
    IterableView,
    LoopingView,
    NullArgumentError,
    SkippingView,
    TransformedView,
    TypeMismatchError,
    UniqueView,
)


class TestFilteredView:
    """Test the filtering view and its lookahead"""

    def test_keeps_matching_elements(self):
        view = FilteredView(range(10), lambda x: x % 3 == 0)
        assert list(view) == [0, 3, 6, 9]

    def test_always_true_and_always_false(self):
        data = [5, 1, 4]
        assert list(FilteredView(data, lambda x: True)) == data
        assert list(FilteredView(data, lambda x: False)) == []

    def test_lookahead_answers_without_consuming(self, counting_source):
        """Test that has_more finds the next match ahead of time"""
        cursor = FilteredView(counting_source, lambda x: x > 8).cursor()
        assert counting_source.pulled == 9
        assert cursor.has_more()
        assert cursor.has_more()
        assert counting_source.pulled == 9
        assert cursor.advance() == 9
        assert counting_source.pulled == 10
        assert cursor.advance() == 10
        assert not cursor.has_more()

    def test_advance_past_end(self):
        cursor = FilteredView([1, 2], lambda x: x > 5).cursor()
        assert not cursor.has_more()
        with pytest.raises(ExhaustedError):
            cursor.advance()

    def test_falsy_elements_are_kept(self):
        """Test that matching elements equal to None or 0 are still emitted"""
        assert list(FilteredView([None, 0, 1], lambda x: not x)) == [None, 0]

    def test_none_predicate(self):
        with pytest.raises(NullArgumentError):
            FilteredView([1], None)

    def test_non_callable_predicate(self):
        with pytest.raises(TypeMismatchError):
            FilteredView([1], 3)

    def test_none_source(self):
        with pytest.raises(NullArgumentError):
            FilteredView(None, bool)


class TestBoundedView:
    """Test the bounding view"""

    @pytest.mark.parametrize("n", [0, 1, 3, 5, 8])
    def test_count_is_min_of_bound_and_length(self, n):
        assert len(list(BoundedView(range(5), n))) == min(n, 5)

    def test_zero_bound_pulls_nothing(self, counting_source):
        cursor = BoundedView(counting_source, 0).cursor()
        assert not cursor.has_more()
        assert counting_source.pulled == 0

    def test_bound_pulls_only_what_is_needed(self, counting_source):
        assert list(BoundedView(counting_source, 3)) == [1, 2, 3]
        assert counting_source.pulled == 3

    def test_advance_past_bound(self):
        cursor = BoundedView([1, 2, 3], 1).cursor()
        cursor.advance()
        with pytest.raises(ExhaustedError):
            cursor.advance()

    def test_infinite_source(self):
        assert list(BoundedView(count(), 4)) == [0, 1, 2, 3]

    def test_negative_bound(self):
        with pytest.raises(InvalidArgumentError):
            BoundedView([1], -1)

    def test_negative_bound_is_value_error(self):
        with pytest.raises(ValueError):
            BoundedView([1], -5)

    def test_non_integer_bound(self):
        with pytest.raises(TypeError):
            BoundedView([1], 2.5)

    def test_none_bound(self):
        with pytest.raises(NullArgumentError):
            BoundedView([1], None)

    def test_length_hint(self):
        cursor = BoundedView([1, 2, 3, 4], 2).cursor()
        assert operator.length_hint(cursor) == 2
        cursor.advance()
        assert operator.length_hint(cursor) == 1


class TestSkippingView:
    """Test the skipping view"""

    def test_skips_leading_elements(self):
        assert list(SkippingView(range(6), 4)) == [4, 5]

    def test_skip_zero(self):
        assert list(SkippingView([1, 2], 0)) == [1, 2]

    def test_skip_beyond_length_is_empty(self):
        """Test that skipping more than available is silently empty"""
        cursor = SkippingView([1, 2], 10).cursor()
        assert not cursor.has_more()
        with pytest.raises(ExhaustedError):
            cursor.advance()

    def test_skip_happens_on_cursor_creation(self, counting_source):
        view = SkippingView(counting_source, 3)
        assert counting_source.pulled == 0
        view.cursor()
        assert counting_source.pulled == 3

    def test_negative_skip(self):
        with pytest.raises(InvalidArgumentError):
            SkippingView([1], -1)


class TestLoopingView:
    """Test the looping view"""

    def test_repeats_forever(self):
        assert list(islice(LoopingView([1, 2, 3]), 8)) == [1, 2, 3, 1, 2, 3, 1, 2]

    def test_empty_loop_terminates(self):
        """Test that looping over nothing is empty instead of spinning"""
        cursor = LoopingView([]).cursor()
        assert not cursor.has_more()
        assert not cursor.has_more()
        with pytest.raises(ExhaustedError):
            cursor.advance()

    def test_empty_loop_opens_one_cursor(self, make_counting_source):
        source = make_counting_source([])
        assert list(LoopingView(source)) == []
        assert source.opened == 1

    def test_new_cycle_uses_fresh_cursor(self, make_counting_source):
        source = make_counting_source("ab")
        cursor = LoopingView(source).cursor()
        assert [cursor.advance() for _ in range(5)] == ["a", "b", "a", "b", "a"]
        assert source.opened == 3

    def test_source_emptied_between_cycles(self):
        """Test that a cycle coming back empty ends the loop"""
        data = [1, 2]
        cursor = LoopingView(data).cursor()
        assert cursor.advance() == 1
        assert cursor.advance() == 2
        data.clear()
        assert not cursor.has_more()

    def test_one_shot_source_loops_once(self):
        """Test that a generator source stops after its only cycle"""
        assert list(LoopingView(x for x in "xy")) == ["x", "y"]

    def test_none_source(self):
        with pytest.raises(NullArgumentError):
            LoopingView(None)


class TestTransformedView:
    """Test the transforming view"""

    def test_maps_elements(self):
        assert list(TransformedView([1, 2, 3], str)) == ["1", "2", "3"]

    def test_transform_is_applied_on_advance(self):
        calls = []
        cursor = TransformedView([1, 2], lambda x: calls.append(x) or x * 10).cursor()
        assert cursor.has_more()
        assert calls == []
        assert cursor.advance() == 10
        assert calls == [1]

    def test_none_transform(self):
        with pytest.raises(NullArgumentError):
            TransformedView([1], None)


class TestUniqueView:
    """Test the deduplicating view"""

    def test_first_occurrence_order(self):
        assert list(UniqueView([3, 1, 3, 2, 1, 3])) == [3, 1, 2]

    def test_equality_by_value(self):
        assert list(UniqueView([(1, 2), (1, 2), 1.0, 1])) == [(1, 2), 1.0]

    def test_seen_set_is_per_cursor(self):
        view = UniqueView("abca")
        assert list(view) == ["a", "b", "c"]
        assert list(view) == ["a", "b", "c"]

    def test_unique_over_infinite_source(self):
        view = UniqueView(x // 2 for x in count())
        assert list(islice(view, 4)) == [0, 1, 2, 3]

    def test_unhashable_elements(self):
        """Test that unhashable elements are deduplicated by value"""
        assert list(UniqueView([[1], [2], [1]])) == [[1], [2]]

    def test_mixed_hashable_and_unhashable(self):
        data = [1, {"a": 1}, (1, [2]), 1, {"a": 1}, (1, [2]), "x"]
        assert list(UniqueView(data)) == [1, {"a": 1}, (1, [2]), "x"]


class TestChainedView:
    """Test the chaining view"""

    def test_concatenates(self):
        assert list(ChainedView([1, 2], (3, 4))) == [1, 2, 3, 4]

    def test_second_none_passes_first_through(self):
        assert list(ChainedView([1, 2], None)) == [1, 2]
        assert list(ChainedView([1, 2])) == [1, 2]

    def test_empty_sides(self):
        assert list(ChainedView([], [1])) == [1]
        assert list(ChainedView([1], [])) == [1]
        assert list(ChainedView([], [])) == []

    def test_second_opened_only_when_first_exhausted(self, make_counting_source):
        second = make_counting_source([3])
        cursor = ChainedView([1, 2], second).cursor()
        cursor.advance()
        cursor.advance()
        assert second.opened == 0
        assert cursor.has_more()
        assert second.opened == 1
        assert cursor.advance() == 3
        assert not cursor.has_more()
        assert second.opened == 1

    def test_advance_without_has_more_switches(self):
        cursor = ChainedView([1], [2]).cursor()
        assert cursor.advance() == 1
        assert cursor.advance() == 2
        with pytest.raises(ExhaustedError):
            cursor.advance()

    def test_first_none(self):
        with pytest.raises(NullArgumentError):
            ChainedView(None, [1])


class TestViewRepr:
    """Test that reprs describe the pipeline without traversing it"""

    def test_nested_repr(self):
        view = BoundedView(SkippingView(IterableView([1, 2]), 1), 3)
        assert repr(view) == "IterableView([1, 2]).skip(1).limit(3)"

    def test_repr_of_infinite_view(self):
        assert repr(UniqueView(LoopingView(IterableView("a")))) == "IterableView('a').loop().unique()"

    def test_repr_of_chain(self):
        assert repr(ChainedView(IterableView([1]), None)) == "IterableView([1]).append(None)"
