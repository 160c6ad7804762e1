"""Tests for viewport offset maintenance and hit-testing."""

from __future__ import annotations

from listview.viewport import (
    clamp_offset,
    index_at_point,
    index_at_y,
    update_offset,
    visible_capacity,
)


class TestVisibleCapacity:
    def test_single_line_rows(self) -> None:
        assert visible_capacity(5, 1) == 5

    def test_two_line_rows(self) -> None:
        assert visible_capacity(5, 2) == 2

    def test_at_least_one_row(self) -> None:
        assert visible_capacity(1, 2) == 1

    def test_unknown_height(self) -> None:
        assert visible_capacity(0, 1) == 0


class TestClampOffset:
    def test_within_bounds(self) -> None:
        assert clamp_offset(3, 20, 5) == 3

    def test_no_blank_lines_below_last_row(self) -> None:
        assert clamp_offset(18, 20, 5) == 15

    def test_never_negative(self) -> None:
        assert clamp_offset(-4, 20, 5) == 0

    def test_short_list(self) -> None:
        assert clamp_offset(2, 3, 5) == 0

    def test_unknown_capacity_bounds_by_last_row(self) -> None:
        assert clamp_offset(30, 20, 0) == 19


class TestUpdateOffset:
    """Tests for update_offset."""

    def test_scrolls_up_to_current(self) -> None:
        assert update_offset(current=2, offset=5, height=5, rows_per_item=1, count=20) == 2

    def test_scrolls_down_just_enough(self) -> None:
        assert update_offset(current=7, offset=0, height=5, rows_per_item=1, count=20) == 3

    def test_visible_current_keeps_offset(self) -> None:
        assert update_offset(current=4, offset=2, height=5, rows_per_item=1, count=20) == 2

    def test_two_line_rows(self) -> None:
        # Capacity 2: current 4 needs lines 8-9 visible.
        assert update_offset(current=4, offset=0, height=5, rows_per_item=2, count=10) == 3

    def test_centered(self) -> None:
        assert update_offset(10, 0, 5, 1, 20, centered=True) == 8

    def test_centered_keeps_offset_inside_viewport(self) -> None:
        assert update_offset(9, 8, 5, 1, 20, centered=True) == 8
        assert update_offset(12, 8, 5, 1, 20, centered=True) == 8

    def test_centered_scrolls_up_to_current(self) -> None:
        assert update_offset(3, 8, 5, 1, 20, centered=True) == 3

    def test_centered_clamps_at_edges(self) -> None:
        assert update_offset(1, 0, 5, 1, 20, centered=True) == 0
        assert update_offset(19, 0, 5, 1, 20, centered=True) == 15

    def test_unknown_height_only_scrolls_up(self) -> None:
        assert update_offset(current=7, offset=2, height=0, rows_per_item=1, count=20) == 2
        assert update_offset(current=1, offset=4, height=0, rows_per_item=1, count=20) == 1

    def test_empty_list(self) -> None:
        assert update_offset(0, 3, 5, 1, 0) == 0

    def test_current_always_visible(self) -> None:
        for height in range(1, 8):
            for rows in (1, 2):
                capacity = visible_capacity(height, rows)
                offset = 0
                for current in list(range(15)) + list(range(14, -1, -1)):
                    offset = update_offset(current, offset, height, rows, 15)
                    assert offset <= current < offset + capacity
                    assert 0 <= offset <= max(0, 15 - capacity)


class TestHitTest:
    """Tests for index_at_point / index_at_y."""

    RECT = (2, 1, 10, 6)

    def test_first_row(self) -> None:
        assert index_at_point(self.RECT, 2, 1, offset=0, rows_per_item=1, count=10) == 0

    def test_with_offset(self) -> None:
        assert index_at_point(self.RECT, 5, 3, offset=4, rows_per_item=1, count=10) == 6

    def test_two_line_rows(self) -> None:
        assert index_at_point(self.RECT, 5, 2, offset=0, rows_per_item=2, count=10) == 0
        assert index_at_point(self.RECT, 5, 3, offset=0, rows_per_item=2, count=10) == 1

    def test_outside_rect(self) -> None:
        assert index_at_point(self.RECT, 1, 1, 0, 1, 10) is None
        assert index_at_point(self.RECT, 12, 1, 0, 1, 10) is None
        assert index_at_point(self.RECT, 5, 0, 0, 1, 10) is None
        assert index_at_point(self.RECT, 5, 7, 0, 1, 10) is None

    def test_below_last_row(self) -> None:
        assert index_at_point(self.RECT, 5, 4, 0, 1, 3) is None

    def test_index_at_y_ignores_x(self) -> None:
        assert index_at_y(self.RECT, 2, 0, 1, 10) == 1
        assert index_at_point(self.RECT, 50, 2, 0, 1, 10) is None
