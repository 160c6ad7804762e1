"""
Selection navigation.

:func:`transition` is a pure function: given which rows are selectable,
the current index and a command, it returns the new current index.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from listview.config import DEFAULT_PAGE_SIZE


class Transformation(Enum):
    """A discrete selection movement."""

    FIRST = "first"
    LAST = "last"
    PREVIOUS = "previous"
    NEXT = "next"
    PREVIOUS_PAGE = "previous_page"
    NEXT_PAGE = "next_page"


# Commands whose disabled-row search walks towards index 0.
_DECREASING = frozenset(
    {Transformation.FIRST, Transformation.PREVIOUS, Transformation.PREVIOUS_PAGE}
)


def _candidate(command: Transformation, current: int, count: int, page_size: int) -> int:
    if command is Transformation.FIRST:
        return 0
    if command is Transformation.LAST:
        return count - 1
    if command is Transformation.PREVIOUS:
        return current - 1
    if command is Transformation.NEXT:
        return current + 1
    if command is Transformation.PREVIOUS_PAGE:
        return current - page_size
    return current + page_size


def _wrap_or_clamp(index: int, count: int, wrap_around: bool) -> int:
    if index < 0:
        return count - 1 if wrap_around else 0
    if index >= count:
        return 0 if wrap_around else count - 1
    return index


def transition(
    command: Transformation,
    selectable: Sequence[bool],
    current: int,
    wrap_around: bool = False,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> int:
    """
    Apply *command* to *current* and return the new index.

    Parameters
    ----------
    selectable:
        One flag per row; ``False`` for disabled rows and dividers.
    wrap_around:
        Moving past either end continues from the opposite end instead of
        stopping there.

    Notes
    -----
    When the row landed on is not selectable the search keeps stepping in
    the command's direction, wrapping or clamping at each step.  The walk
    is bounded by the number of rows, so a list with no selectable row
    terminates with an in-range (but unselectable) index.  An empty list
    returns *current* unchanged.
    """
    count = len(selectable)
    if count == 0:
        return current

    step = -1 if command in _DECREASING else 1
    index = _candidate(command, current, count, page_size)

    for _ in range(count):
        index = _wrap_or_clamp(index, count, wrap_around)
        if selectable[index]:
            return index
        index += step

    return _wrap_or_clamp(index, count, wrap_around)
