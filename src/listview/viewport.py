"""
Viewport arithmetic: scroll offset maintenance and hit-testing.

Heights are in screen lines; every item occupies ``rows_per_item`` lines
(2 when secondary text is shown, else 1).
"""

from __future__ import annotations


def visible_capacity(height: int, rows_per_item: int) -> int:
    """Number of whole items that fit into *height* lines."""
    if height <= 0:
        return 0
    return max(1, height // max(1, rows_per_item))


def clamp_offset(offset: int, count: int, capacity: int) -> int:
    """
    Keep *offset* in ``[0, max(0, count - capacity)]``.

    An unknown viewport (``capacity == 0``) only bounds the offset by the
    last item.
    """
    if capacity <= 0:
        upper = max(0, count - 1)
    else:
        upper = max(0, count - capacity)
    return max(0, min(offset, upper))


def update_offset(
    current: int,
    offset: int,
    height: int,
    rows_per_item: int,
    count: int,
    centered: bool = False,
) -> int:
    """
    Return the offset that keeps item *current* inside the viewport.

    The view scrolls up just far enough when the current item is above
    it and down just far enough when its last line would fall below the
    bottom edge.  With *centered* a downward scroll places the current
    item on the middle line instead.  The result never leaves blank
    lines below the last item and is never negative.
    """
    if count <= 0:
        return 0

    capacity = visible_capacity(height, rows_per_item)
    if capacity == 0:
        return clamp_offset(min(offset, current), count, capacity)

    if current < offset:
        offset = current
    elif (current - offset + 1) * rows_per_item > height:
        if centered:
            offset = current - (capacity - 1) // 2
        else:
            offset = current + 1 - capacity

    return clamp_offset(offset, count, capacity)


def index_at_y(
    rect: tuple[int, int, int, int],
    y: int,
    offset: int,
    rows_per_item: int,
    count: int,
) -> int | None:
    """Item index drawn on screen row *y*, ignoring the horizontal position."""
    _, top, _, height = rect
    if y < top or y >= top + height:
        return None

    index = (y - top) // max(1, rows_per_item) + offset
    if index >= count:
        return None
    return index


def index_at_point(
    rect: tuple[int, int, int, int],
    x: int,
    y: int,
    offset: int,
    rows_per_item: int,
    count: int,
) -> int | None:
    """
    Item index drawn at screen cell ``(x, y)``.

    *rect* is the widget's inner rectangle ``(x, y, width, height)``.
    Returns ``None`` outside the rectangle or below the last item.
    """
    left, _, width, _ = rect
    if x < left or x >= left + width:
        return None
    return index_at_y(rect, y, offset, rows_per_item, count)
