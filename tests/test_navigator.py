"""Tests for the selection navigator."""

from __future__ import annotations

import itertools

import pytest

from listview.navigator import Transformation, transition

FIRST = Transformation.FIRST
LAST = Transformation.LAST
PREVIOUS = Transformation.PREVIOUS
NEXT = Transformation.NEXT
PREVIOUS_PAGE = Transformation.PREVIOUS_PAGE
NEXT_PAGE = Transformation.NEXT_PAGE


class TestBasicMoves:
    """Movement through fully enabled lists."""

    def test_next(self) -> None:
        assert transition(NEXT, [True] * 3, 0) == 1

    def test_previous(self) -> None:
        assert transition(PREVIOUS, [True] * 3, 2) == 1

    def test_first_and_last(self) -> None:
        assert transition(FIRST, [True] * 4, 2) == 0
        assert transition(LAST, [True] * 4, 1) == 3

    def test_next_clamps_at_end(self) -> None:
        assert transition(NEXT, [True] * 3, 2) == 2

    def test_previous_clamps_at_start(self) -> None:
        assert transition(PREVIOUS, [True] * 3, 0) == 0

    def test_page_moves(self) -> None:
        selectable = [True] * 20
        assert transition(NEXT_PAGE, selectable, 3) == 8
        assert transition(PREVIOUS_PAGE, selectable, 8) == 3
        assert transition(NEXT_PAGE, selectable, 18) == 19
        assert transition(PREVIOUS_PAGE, selectable, 2) == 0

    def test_custom_page_size(self) -> None:
        assert transition(NEXT_PAGE, [True] * 20, 0, page_size=10) == 10

    def test_empty_list_is_noop(self) -> None:
        for command in Transformation:
            assert transition(command, [], 0) == 0


class TestWrapAround:
    """Movement with wrap-around enabled."""

    def test_next_wraps_to_start(self) -> None:
        assert transition(NEXT, [True] * 3, 2, wrap_around=True) == 0

    def test_previous_wraps_to_end(self) -> None:
        assert transition(PREVIOUS, [True] * 3, 0, wrap_around=True) == 2

    def test_previous_from_zero_lands_on_last_selectable(self) -> None:
        selectable = [True, True, True, False]
        assert transition(PREVIOUS, selectable, 0, wrap_around=True) == 2

    def test_cycle_through_three(self) -> None:
        current = 0
        visited = []
        for _ in range(3):
            current = transition(NEXT, [True] * 3, current, wrap_around=True)
            visited.append(current)
        assert visited == [1, 2, 0]


class TestDisabledSkip:
    """Skipping of disabled rows and dividers."""

    def test_next_skips_forward(self) -> None:
        assert transition(NEXT, [True, False, True], 0) == 2

    def test_previous_skips_backward(self) -> None:
        assert transition(PREVIOUS, [True, False, True], 2) == 0

    def test_next_continues_downward_then_wraps(self) -> None:
        selectable = [True, True, False, False]
        assert transition(NEXT, selectable, 1, wrap_around=True) == 0

    def test_last_searches_forward_and_wraps(self) -> None:
        # LAST steps in the increasing direction.
        selectable = [True, True, False]
        assert transition(LAST, selectable, 0, wrap_around=True) == 0

    def test_first_searches_backward_and_wraps(self) -> None:
        # FIRST steps in the decreasing direction.
        selectable = [False, True, True]
        assert transition(FIRST, selectable, 2, wrap_around=True) == 2

    def test_first_without_wrap_stays_in_range(self) -> None:
        selectable = [False, True, True]
        assert transition(FIRST, selectable, 2) == 0

    def test_page_down_lands_past_disabled(self) -> None:
        selectable = [True] * 10
        selectable[5] = False
        assert transition(NEXT_PAGE, selectable, 0) == 6

    def test_all_disabled_terminates_in_range(self) -> None:
        for command in Transformation:
            for wrap in (False, True):
                result = transition(command, [False] * 4, 1, wrap_around=wrap)
                assert 0 <= result < 4


class TestInvariants:
    """Exhaustive checks over small lists."""

    @pytest.mark.parametrize("wrap", [False, True])
    def test_result_always_in_range(self, wrap: bool) -> None:
        for size in range(1, 5):
            for mask in itertools.product([True, False], repeat=size):
                for current in range(size):
                    for command in Transformation:
                        result = transition(command, list(mask), current, wrap_around=wrap)
                        assert 0 <= result < size

    def test_wrapped_moves_land_on_selectable_when_any_exists(self) -> None:
        for size in range(1, 5):
            for mask in itertools.product([True, False], repeat=size):
                if not any(mask):
                    continue
                for current in range(size):
                    for command in (NEXT, PREVIOUS):
                        result = transition(command, list(mask), current, wrap_around=True)
                        assert mask[result]
