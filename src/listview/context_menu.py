"""
Context menu coordination.

A :class:`ContextMenu` wraps an independent :class:`ListView` that is
drawn as a bordered popup next to its owner.  The owner routes input to
it while it is open.  Selecting an option or cancelling closes it again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from listview.logging import get_logger
from listview.tui.component import Component
from listview.tui.draw import ScrollBarVisibility, text_width

if TYPE_CHECKING:
    from listview.tui.keys import Key
    from listview.tui.mouse import MouseAction, MouseEvent
    from listview.tui.screen import Screen
    from listview.widget import ListView

logger = get_logger("context_menu")


class ContextMenu:
    """
    Popup option list anchored to a row of an owning list.

    Parameters
    ----------
    menu_list:
        The list that holds the options.  It is configured here as a
        single-line, hover-enabled, wrapping, bordered list.
    restore_focus:
        Called when the menu closes so the owner can take input back.
    """

    def __init__(
        self,
        menu_list: ListView,
        restore_focus: Callable[[], None] | None = None,
    ) -> None:
        self._list = menu_list
        self._restore_focus = restore_focus

        self.open: bool = False
        self.anchor_index: int = 0  # owner row the menu was opened for
        self.x: int = -1
        self.y: int = -1
        self.drag: bool = False  # opened by a right-button press

        menu_list.show_secondary_text = False
        menu_list.hover = True
        menu_list.wrap_around = True
        menu_list.set_border(True)
        menu_list.set_padding(0, 0, 1, 1)
        menu_list.on_selected = lambda *_: self.hide()
        menu_list.on_done = self.hide

    @property
    def list(self) -> ListView:
        """The list holding the menu options."""
        return self._list

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def add_item(
        self,
        text: str,
        shortcut: str = "",
        callback: Callable[[int], None] | None = None,
    ) -> None:
        """
        Append an option.

        *callback* receives the owner row index the menu was opened for.
        An option with neither text nor shortcut is a disabled divider.
        """

        def selected() -> None:
            if callback is not None:
                callback(self.anchor_index)

        self._list.add_item(
            text,
            shortcut=shortcut,
            on_select=selected,
            enabled=bool(text or shortcut),
        )

    def clear(self) -> None:
        self._list.clear()

    # ------------------------------------------------------------------
    # Open / closed
    # ------------------------------------------------------------------

    def show(self, anchor_index: int, x: int, y: int) -> bool:
        """
        Open the menu at screen position ``(x, y)`` for owner row
        *anchor_index*.  Returns ``False`` (and stays closed) when there
        are no options.
        """
        if len(self._list) == 0:
            return False

        self.open = True
        self.anchor_index = anchor_index
        self.x, self.y = x, y

        first = self._list.first_selectable()
        self._list.set_current_item(first if first is not None else 0)
        self._list.offset = 0
        self._list.focused = True
        logger.debug("Context menu opened for row %d at (%d, %d)", anchor_index, x, y)
        return True

    def hide(self) -> None:
        """Close the menu and hand focus back to the owner."""
        if not self.open:
            return
        self.open = False
        self.drag = False
        self._list.focused = False
        logger.debug("Context menu closed")
        if self._restore_focus is not None:
            self._restore_focus()

    # ------------------------------------------------------------------
    # Layout and drawing
    # ------------------------------------------------------------------

    def layout(self, screen_width: int, screen_height: int) -> tuple[int, int, int, int]:
        """
        Compute the popup rectangle ``(x, y, width, height)``.

        The popup is as wide as its longest option plus border and
        padding.  It opens below the anchor unless that overflows the
        screen and there is more room above, is cut to the screen height,
        and shifts left rather than run off the right edge.
        """
        items = self._list.get_items()
        padding = self._list.padding

        longest = max(
            (text_width(item.main_text) + (4 if item.shortcut else 0) for item in items),
            default=0,
        )
        width = longest + 2 + padding.left + padding.right
        height = len(items) + 2 + padding.top + padding.bottom

        x, y = self.x, self.y
        if y + height > screen_height and y > screen_height - y:
            y = max(0, y - height)
        if y + height > screen_height:
            height = max(0, screen_height - y)

        visible_rows = height - 2 - padding.top - padding.bottom
        visibility = self._list.scroll_bar_visibility
        if visibility is ScrollBarVisibility.ALWAYS or (
            visibility is ScrollBarVisibility.AUTO and len(items) > visible_rows
        ):
            width += 1

        width = min(width, screen_width)
        if x + width > screen_width:
            x = max(0, screen_width - width)
        return x, y, width, height

    def draw(self, screen: Screen) -> None:
        if not self.open:
            return
        self._list.set_rect(*self.layout(screen.width, screen.height))
        self._list.draw(screen)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def in_rect(self, x: int, y: int) -> bool:
        return self.open and self._list.in_rect(x, y)

    def handle_input(self, key: Key) -> bool:
        return self._list.handle_input(key)

    def handle_mouse(
        self,
        action: MouseAction,
        event: MouseEvent,
    ) -> tuple[bool, Component | None]:
        return self._list.handle_mouse(action, event)
