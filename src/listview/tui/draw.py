"""
Drawing primitives: aligned text, borders, fills and scroll bars.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from rich.cells import cell_len, get_character_cell_size

if TYPE_CHECKING:
    from listview.tui.screen import CellStyle, Screen

# Box drawing characters
H_LINE = "─"
V_LINE = "│"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
LEFT_TEE = "├"
RIGHT_TEE = "┤"

SCROLL_BAR_AREA = "░"
SCROLL_BAR_HANDLE = "▒"
SCROLL_BAR_HANDLE_FOCUSED = "█"


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ScrollBarVisibility(Enum):
    """When a scroll bar is drawn next to scrollable content."""

    NEVER = "never"
    AUTO = "auto"  # only when content overflows
    ALWAYS = "always"


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    max_width: int,
    align: Align = Align.LEFT,
    cell_style: CellStyle | None = None,
) -> tuple[int, int]:
    """
    Print *text* into the cells ``[x, x + max_width)`` of row *y*.

    Text that does not fit is cut at a character boundary.

    Returns
    -------
    tuple[int, int]
        ``(consumed, drawn_width)``: number of characters of *text*
        printed and the number of cells they occupy.
    """
    if max_width <= 0:
        return 0, 0

    consumed = 0
    drawn_width = 0
    for ch in text:
        w = get_character_cell_size(ch)
        if drawn_width + w > max_width:
            break
        consumed += 1
        drawn_width += w

    if align is Align.RIGHT:
        x += max_width - drawn_width
    elif align is Align.CENTER:
        x += (max_width - drawn_width) // 2

    col = x
    for ch in text[:consumed]:
        w = get_character_cell_size(ch)
        screen.set_content(col, y, ch, cell_style)
        for extra in range(1, w):
            screen.set_content(col + extra, y, "", cell_style)
        col += w
    return consumed, drawn_width


def text_width(text: str) -> int:
    """Number of terminal cells *text* occupies."""
    return cell_len(text)


def fill(screen: Screen, x: int, y: int, width: int, height: int, cell_style: CellStyle) -> None:
    for row in range(y, y + height):
        for col in range(x, x + width):
            screen.set_content(col, row, " ", cell_style)


def draw_border(
    screen: Screen,
    x: int,
    y: int,
    width: int,
    height: int,
    cell_style: CellStyle | None = None,
) -> None:
    right, bottom = x + width - 1, y + height - 1
    for col in range(x + 1, right):
        screen.set_content(col, y, H_LINE, cell_style)
        screen.set_content(col, bottom, H_LINE, cell_style)
    for row in range(y + 1, bottom):
        screen.set_content(x, row, V_LINE, cell_style)
        screen.set_content(right, row, V_LINE, cell_style)
    screen.set_content(x, y, TOP_LEFT, cell_style)
    screen.set_content(right, y, TOP_RIGHT, cell_style)
    screen.set_content(x, bottom, BOTTOM_LEFT, cell_style)
    screen.set_content(right, bottom, BOTTOM_RIGHT, cell_style)


def render_scroll_bar(
    screen: Screen,
    visibility: ScrollBarVisibility,
    x: int,
    y: int,
    height: int,
    items: int,
    cursor: int,
    printed: int,
    focused: bool,
    cell_style: CellStyle | None = None,
) -> None:
    """
    Draw one cell of a vertical scroll bar.

    Parameters
    ----------
    height:
        Visible height of the scrolled area, in the same unit as *items*.
    items:
        Total content length.
    cursor:
        Position of the current element within the content.
    printed:
        Which cell of the bar (0 = top) is being drawn at ``(x, y)``.
    """
    if visibility is ScrollBarVisibility.NEVER:
        return
    if visibility is ScrollBarVisibility.AUTO and items <= height:
        return
    if height <= 0:
        return

    if items <= height or cursor < 0:
        cursor = 0
    if items > 1:
        handle = int((height - 1) * (min(cursor, items - 1) / (items - 1)))
    else:
        handle = 0

    if printed == handle:
        char = SCROLL_BAR_HANDLE_FOCUSED if focused else SCROLL_BAR_HANDLE
    else:
        char = SCROLL_BAR_AREA
    screen.set_content(x, y, char, cell_style)
