"""
Selectable list widget.

:class:`ListView` displays rows of items, each optionally with a second
line of text and a shortcut character.  It keeps one row current, scrolls
so that row stays visible, turns key and mouse events into selection
changes, and owns a context menu that can be opened on a row.

Thread safety
-------------
Every list has its own reader/writer lock.  Queries take it shared,
mutations and :meth:`ListView.draw` take it exclusively.  User callbacks
(``on_changed``, ``on_selected``, ``on_done`` and per-row ``on_select``)
are never called while the lock is held: each operation collects the
callbacks it has to fire, bound to a snapshot of the row, and invokes
them after leaving the locked block.  Callbacks may therefore call back
into the list, e.g. remove the row that was just selected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from functools import partial
from typing import Any

from listview._rwlock import RWLock
from listview.config import ListColors, ListConfig, SelectedAttributes
from listview.context_menu import ContextMenu
from listview.items import ItemStore, ListItem, clamp_index
from listview.logging import get_logger
from listview.navigator import Transformation, transition
from listview.tui.component import Box, Component, Padding
from listview.tui.draw import (
    H_LINE,
    LEFT_TEE,
    RIGHT_TEE,
    Align,
    ScrollBarVisibility,
    print_text,
    render_scroll_bar,
    text_width,
)
from listview.tui.keybindings import KeybindingsManager
from listview.tui.keys import Key
from listview.tui.mouse import MouseAction, MouseEvent
from listview.tui.screen import CellStyle, Screen
from listview.viewport import (
    clamp_offset,
    index_at_point,
    index_at_y,
    update_offset,
    visible_capacity,
)

logger = get_logger("widget")

ItemCallback = Callable[[int, str, str, str], None]
"""Signature of ``on_changed`` / ``on_selected``: index, main, secondary, shortcut."""

_Notice = Callable[[], Any]

_NAVIGATION_ACTIONS: dict[str, Transformation] = {
    "first_item": Transformation.FIRST,
    "last_item": Transformation.LAST,
    "previous_item": Transformation.PREVIOUS,
    "next_item": Transformation.NEXT,
    "previous_page": Transformation.PREVIOUS_PAGE,
    "next_page": Transformation.NEXT_PAGE,
}

# Cells left of the text where the context menu opens from the keyboard.
_MENU_INDENT = 7
_SHORTCUT_COLUMN = 4


def _locked_attribute(name: str, doc: str, reflow: bool = False) -> property:
    """
    A property reading/writing ``self._<name>`` under the list lock.

    With *reflow* the scroll offset is re-clamped after a write, for
    attributes that change how many items fit into the viewport.
    """
    attr = f"_{name}"

    def getter(self: ListView) -> Any:
        with self._lock.read_locked():
            return getattr(self, attr)

    def setter(self: ListView, value: Any) -> None:
        with self._lock.write_locked():
            setattr(self, attr, value)
            if reflow:
                self._clamp_offset()
            self.invalidate()

    return property(getter, setter, doc=doc)


class ListView(Component):
    """
    A scrollable list of selectable rows.

    Parameters
    ----------
    config:
        Display policies and colours.  Defaults to :class:`ListConfig()`.
    keybindings:
        Key-to-action mapping.  Defaults to one built from
        ``config.keybindings``.

    Example
    -------
    >>> lv = ListView()
    >>> lv.add_item("Open", "Open a file", "o")
    >>> lv.add_item("Quit", "Leave the program", "q")
    >>> lv.on_selected = lambda i, main, sec, sc: print("picked", main)
    """

    def __init__(
        self,
        config: ListConfig | None = None,
        keybindings: KeybindingsManager | None = None,
    ) -> None:
        super().__init__()
        self._lock = RWLock()
        self._box = Box()
        self._store = ItemStore()

        self._current: int = 0
        self._offset: int = 0
        self._height: int = 0  # inner height at the last draw

        self._changed: ItemCallback | None = None
        self._selected: ItemCallback | None = None
        self._done: Callable[[], None] | None = None

        self._context_menu: ContextMenu | None = None
        self._explicit_keybindings = keybindings
        self.apply_config(config or ListConfig())

    def apply_config(self, config: ListConfig) -> None:
        """Replace display policies, colours and keybindings."""
        colors = config.colors.resolved()
        keybindings = self._explicit_keybindings or KeybindingsManager(config.keybindings)
        with self._lock.write_locked():
            self._show_secondary_text = config.show_secondary_text
            self._wrap_around = config.wrap_around
            self._hover = config.hover
            self._selected_focus_only = config.selected_focus_only
            self._selected_always_visible = config.selected_always_visible
            self._selected_always_centered = config.selected_always_centered
            self._highlight_full_line = config.highlight_full_line
            self._scroll_bar_visibility = config.scroll_bar_visibility
            self._page_size = config.page_size
            self._colors = colors
            self._selected_attributes = replace(config.selected_attributes)
            self._clamp_offset()
            self._keybindings = keybindings
            self.invalidate()

    # ------------------------------------------------------------------
    # Display policies
    # ------------------------------------------------------------------

    show_secondary_text = _locked_attribute(
        "show_secondary_text", "Draw each item's secondary text on a second line.", reflow=True)
    wrap_around = _locked_attribute(
        "wrap_around", "Navigating past either end continues at the other end.")
    hover = _locked_attribute(
        "hover", "Moving the pointer over a row makes it current.")
    selected_focus_only = _locked_attribute(
        "selected_focus_only", "Only highlight the current row while the list has focus.")
    selected_always_visible = _locked_attribute(
        "selected_always_visible", "Scroll to the current row before every draw.")
    selected_always_centered = _locked_attribute(
        "selected_always_centered", "Keep the current row on the middle line of the viewport.")
    highlight_full_line = _locked_attribute(
        "highlight_full_line", "Highlight the full row width rather than just its text.")
    scroll_bar_visibility: ScrollBarVisibility = _locked_attribute(  # type: ignore[assignment]
        "scroll_bar_visibility", "When to draw the scroll bar.")
    page_size = _locked_attribute(
        "page_size", "Rows moved by the page up / page down commands.")
    colors: ListColors = _locked_attribute(  # type: ignore[assignment]
        "colors", "Colours used to draw the list.")
    selected_attributes: SelectedAttributes = _locked_attribute(  # type: ignore[assignment]
        "selected_attributes", "Text attributes added to the highlighted row.")

    # ------------------------------------------------------------------
    # Event subscriptions
    # ------------------------------------------------------------------

    on_changed = _locked_attribute(
        "changed",
        "Called with ``(index, main, secondary, shortcut)`` when the current row changes.",
    )
    on_selected = _locked_attribute(
        "selected",
        "Called with ``(index, main, secondary, shortcut)`` when a row is selected.",
    )
    on_done = _locked_attribute("done", "Called with no arguments when the user cancels.")

    @property
    def keybindings(self) -> KeybindingsManager:
        with self._lock.read_locked():
            return self._keybindings

    # ------------------------------------------------------------------
    # Geometry (delegated to the owned Box)
    # ------------------------------------------------------------------

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        with self._lock.write_locked():
            self._box.set_rect(x, y, width, height)
            self._clamp_offset()
            self.invalidate()

    def rect(self) -> tuple[int, int, int, int]:
        with self._lock.read_locked():
            return self._box.rect()

    def inner_rect(self) -> tuple[int, int, int, int]:
        with self._lock.read_locked():
            return self._box.inner_rect()

    def set_border(self, border: bool) -> None:
        with self._lock.write_locked():
            self._box.border = border
            self._clamp_offset()
            self.invalidate()

    def set_padding(self, top: int, bottom: int, left: int, right: int) -> None:
        with self._lock.write_locked():
            self._box.set_padding(top, bottom, left, right)
            self._clamp_offset()
            self.invalidate()

    @property
    def padding(self) -> Padding:
        with self._lock.read_locked():
            return replace(self._box.padding)

    def in_rect(self, x: int, y: int) -> bool:
        with self._lock.read_locked():
            return self._box.in_rect(x, y)

    @property
    def has_focus(self) -> bool:
        """Whether the list, or its open context menu, has input focus."""
        menu = self._context_menu
        if menu is not None and menu.open:
            return menu.list.focused
        return self.focused

    def _restore_focus(self) -> None:
        self.focused = True

    # ------------------------------------------------------------------
    # Internal helpers (caller holds the lock)
    # ------------------------------------------------------------------

    def _rows_per_item(self) -> int:
        return 2 if self._show_secondary_text else 1

    def _viewport_height(self) -> int:
        height = self._box.inner_rect()[3]
        return height if height > 0 else self._height

    def _capacity(self) -> int:
        return visible_capacity(self._viewport_height(), self._rows_per_item())

    def _clamp_offset(self) -> None:
        self._offset = clamp_offset(self._offset, len(self._store), self._capacity())

    def _update_offset(self) -> None:
        self._offset = update_offset(
            self._current,
            self._offset,
            self._viewport_height(),
            self._rows_per_item(),
            len(self._store),
            self._selected_always_centered,
        )

    def _changed_notices(self) -> list[_Notice]:
        if self._changed is None or not self._store:
            return []
        index = self._current
        item = self._store.get(index)
        return [partial(self._changed, index, item.main_text, item.secondary_text, item.shortcut)]

    def _selection_notices(self) -> list[_Notice]:
        """Per-row callback then list-wide ``selected``, if the row is selectable."""
        if not self._store:
            return []
        index = self._current
        item = self._store.get(index)
        if not item.selectable:
            return []
        notices: list[_Notice] = []
        if item.on_select is not None:
            notices.append(item.on_select)
        if self._selected is not None:
            notices.append(
                partial(self._selected, index, item.main_text, item.secondary_text, item.shortcut)
            )
        return notices

    def _move_to(self, index: int, select: bool) -> list[_Notice]:
        """Make *index* current; return selection (optional) then change notices."""
        previous = self._current
        self._current = index
        self._update_offset()
        self.invalidate()
        notices = self._selection_notices() if select else []
        if index != previous:
            notices += self._changed_notices()
        return notices

    def _transform(self, command: Transformation) -> list[_Notice]:
        if not self._store:
            return []
        previous = self._current
        self._current = transition(
            command,
            self._store.selectable_mask(),
            self._current,
            self._wrap_around,
            self._page_size,
        )
        self._update_offset()
        self.invalidate()
        logger.debug("%s: %d -> %d", command.value, previous, self._current)
        if self._current == previous:
            return []
        return self._changed_notices()

    @staticmethod
    def _fire(notices: list[_Notice]) -> None:
        for notice in notices:
            notice()

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_item(
        self,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        on_select: Callable[[], None] | None = None,
        enabled: bool = True,
    ) -> None:
        """Append a row; see :meth:`insert_item`."""
        self.insert_item(-1, main_text, secondary_text, shortcut, on_select, enabled)

    def insert_item(
        self,
        index: int,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        on_select: Callable[[], None] | None = None,
        enabled: bool = True,
    ) -> None:
        """
        Insert a row before position *index*.

        ``0`` inserts at the front, ``item_count`` or more appends.
        Negative indices count from the end: ``-1`` appends, ``-2``
        inserts before the last row, and so on.

        The current row keeps its identity (its index shifts when the new
        row lands at or before it).  Inserting into an empty list makes
        the new row current and fires ``on_changed``.
        """
        item = ListItem(
            main_text=main_text,
            secondary_text=secondary_text,
            shortcut=shortcut,
            on_select=on_select,
            enabled=enabled,
        )
        with self._lock.write_locked():
            was_empty = not self._store
            position = self._store.insert(index, item)
            if was_empty:
                self._current = 0
                self._offset = 0
                notices = self._changed_notices()
            else:
                if position <= self._current:
                    self._current += 1
                notices = []
            self.invalidate()
            logger.debug("Inserted %r at %d (%d items)", main_text, position, len(self._store))
        self._fire(notices)

    def remove_item(self, index: int) -> None:
        """
        Remove the row at *index*.

        Negative indices count from the end and out-of-range indices are
        clamped, so unless the list is empty a row is always removed.
        Removing the current row fires ``on_changed`` for the row that
        takes its place.
        """
        with self._lock.write_locked():
            previous = self._current
            removed = self._store.remove(index)
            if removed is None:
                return
            notices: list[_Notice] = []
            if not self._store:
                self._current = 0
                self._offset = 0
            else:
                if removed < self._current:
                    self._current -= 1
                elif removed == self._current:
                    self._current = clamp_index(self._current, len(self._store))
                    notices = self._changed_notices()
                self._offset = clamp_offset(self._offset, len(self._store), self._capacity())
            self.invalidate()
            logger.debug("Removed row %d (current %d -> %d)", removed, previous, self._current)
        self._fire(notices)

    def clear(self) -> None:
        """Remove all rows."""
        with self._lock.write_locked():
            self._store.clear()
            self._current = 0
            self._offset = 0
            self.invalidate()

    @property
    def item_count(self) -> int:
        with self._lock.read_locked():
            return len(self._store)

    def __len__(self) -> int:
        return self.item_count

    def get_item(self, index: int) -> ListItem:
        """
        Return a copy of the row at *index*.

        Raises
        ------
        OutOfRangeError
            If *index* is not in ``[0, item_count)``.
        """
        with self._lock.read_locked():
            return replace(self._store.get(index))

    def get_items(self) -> list[ListItem]:
        """Copies of all rows, in order."""
        with self._lock.read_locked():
            return [replace(item) for item in self._store]

    def get_item_text(self, index: int) -> tuple[str, str]:
        """Return ``(main_text, secondary_text)``; raises ``OutOfRangeError``."""
        with self._lock.read_locked():
            item = self._store.get(index)
            return item.main_text, item.secondary_text

    def set_item_text(self, index: int, main_text: str, secondary_text: str) -> None:
        """Replace a row's texts; raises ``OutOfRangeError``."""
        with self._lock.write_locked():
            self._store.set_text(index, main_text, secondary_text)
            self.invalidate()

    def set_item_enabled(self, index: int, enabled: bool) -> None:
        """Enable or disable a row; raises ``OutOfRangeError``."""
        with self._lock.write_locked():
            self._store.set_enabled(index, enabled)
            self.invalidate()

    def find_items(
        self,
        main_search: str,
        secondary_search: str = "",
        must_contain_both: bool = False,
        ignore_case: bool = False,
    ) -> list[int]:
        """
        Return ascending indices of rows containing the search strings.

        One of the two searches may be empty and is then ignored.  With
        *must_contain_both* the main search must be in the main text AND
        the secondary search in the secondary text.
        """
        with self._lock.read_locked():
            return self._store.find(main_search, secondary_search, must_contain_both, ignore_case)

    def first_selectable(self) -> int | None:
        with self._lock.read_locked():
            return self._store.first_selectable()

    # ------------------------------------------------------------------
    # Selection and scrolling
    # ------------------------------------------------------------------

    @property
    def current_item(self) -> int:
        """Index of the current row (0 for an empty list)."""
        with self._lock.read_locked():
            return self._current

    def set_current_item(self, index: int) -> None:
        """
        Make the row at *index* current.

        Negative indices count from the end (``-1`` is the last row) and
        out-of-range indices are clamped.  Fires ``on_changed`` if the
        current row changes.
        """
        with self._lock.write_locked():
            if not self._store:
                return
            notices = self._move_to(clamp_index(index, len(self._store)), select=False)
        self._fire(notices)

    def transform(self, command: Transformation) -> None:
        """Move the selection by *command*, firing ``on_changed`` if it moved."""
        with self._lock.write_locked():
            notices = self._transform(command)
        self._fire(notices)

    @property
    def offset(self) -> int:
        """Index of the first row drawn."""
        with self._lock.read_locked():
            return self._offset

    @offset.setter
    def offset(self, value: int) -> None:
        with self._lock.write_locked():
            self._offset = clamp_offset(value, len(self._store), self._capacity())
            self.invalidate()

    @property
    def last_drawn_height(self) -> int:
        with self._lock.read_locked():
            return self._height

    def index_at_point(self, x: int, y: int) -> int | None:
        """Index of the row drawn at screen cell ``(x, y)``, or ``None``."""
        with self._lock.read_locked():
            return index_at_point(
                self._box.inner_rect(), x, y, self._offset, self._rows_per_item(), len(self._store)
            )

    # ------------------------------------------------------------------
    # Context menu
    # ------------------------------------------------------------------

    @property
    def context_menu(self) -> ContextMenu:
        """The list's context menu, created on first use."""
        if self._context_menu is None:
            menu = ContextMenu(ListView(keybindings=self.keybindings), self._restore_focus)
            with self._lock.write_locked():
                if self._context_menu is None:
                    self._context_menu = menu
        return self._context_menu

    def add_context_item(
        self,
        text: str,
        shortcut: str = "",
        callback: Callable[[int], None] | None = None,
    ) -> None:
        """
        Add an option to the context menu.

        *callback* receives the index of the row the menu was opened on.
        Pass empty text and no shortcut for a divider.
        """
        self.context_menu.add_item(text, shortcut, callback)

    def clear_context_menu(self) -> None:
        self.context_menu.clear()

    def show_context_menu(self, x: int = -1, y: int = -1) -> bool:
        """
        Open the context menu for the current row.

        With a negative coordinate the menu is anchored next to the
        current row's on-screen position.  Returns ``False`` when the menu
        has no options.
        """
        menu = self.context_menu
        with self._lock.read_locked():
            anchor = self._current
            if x < 0 or y < 0:
                left, top, _, _ = self._box.inner_rect()
                x = left + _MENU_INDENT
                if self._store.has_shortcuts():
                    x += _SHORTCUT_COLUMN
                y = top + (self._current - self._offset) * self._rows_per_item()
        return menu.show(anchor, x, y)

    def hide_context_menu(self) -> None:
        if self._context_menu is not None:
            self._context_menu.hide()

    def _menu_open(self) -> bool:
        return self._context_menu is not None and self._context_menu.open

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, screen: Screen) -> None:
        """
        Draw the list into its rectangle on *screen*, followed by the
        context menu when it is open.
        """
        has_focus = self.has_focus
        with self._lock.write_locked():
            colors = self._colors
            self._box.border_style = CellStyle(fg=colors.border)
            self._box.draw(screen)

            x, y, width, height = self._box.inner_rect()
            self._height = height
            if width > 0 and height > 0:
                self._draw_rows(screen, x, y, width, height, has_focus)
            self.dirty = False

        if has_focus and self._menu_open():
            self._context_menu.draw(screen)

    def _draw_rows(
        self,
        screen: Screen,
        x: int,
        y: int,
        width: int,
        height: int,
        has_focus: bool,
    ) -> None:
        rows = self._rows_per_item()
        count = len(self._store)
        total_lines = count * rows
        colors = self._colors
        scroll_style = CellStyle(fg=colors.scroll_bar)

        visibility = self._scroll_bar_visibility
        show_scroll_bar = visibility is ScrollBarVisibility.ALWAYS or (
            visibility is ScrollBarVisibility.AUTO and total_lines > height
        )
        scroll_bar_x = min(x + width - 1, screen.width - 1)
        if show_scroll_bar:
            width -= 1

        text_x, text_w = x, width
        if self._store.has_shortcuts():
            text_x += _SHORTCUT_COLUMN
            text_w -= _SHORTCUT_COLUMN

        self._clamp_offset()
        if self._selected_always_visible or self._selected_always_centered:
            self._update_offset()

        highlight = not self._selected_focus_only or has_focus
        bottom = y + height
        row_y = y
        for index in range(self._offset, count):
            if row_y >= bottom:
                break
            item = self._store.get(index)
            for line in range(rows):
                if row_y >= bottom:
                    break
                if item.is_divider:
                    if line == 0:
                        self._draw_divider(screen, x, row_y, width)
                elif line == 0:
                    self._draw_main_line(
                        screen, item, text_x, row_y, text_w,
                        highlight and index == self._current,
                    )
                else:
                    fg = colors.secondary_text if item.enabled else colors.disabled_text
                    print_text(screen, item.secondary_text, text_x, row_y, text_w,
                               Align.LEFT, CellStyle(fg=fg))
                if show_scroll_bar:
                    render_scroll_bar(screen, visibility, scroll_bar_x, row_y, height,
                                      total_lines, self._current * rows, row_y - y,
                                      has_focus, scroll_style)
                row_y += 1

        while show_scroll_bar and row_y < bottom:
            render_scroll_bar(screen, visibility, scroll_bar_x, row_y, height,
                              total_lines, self._current * rows, row_y - y,
                              has_focus, scroll_style)
            row_y += 1

    def _draw_divider(self, screen: Screen, x: int, y: int, width: int) -> None:
        line_style = CellStyle(fg=self._colors.main_text)
        if self._box.border:
            left = self._box.x
            right = self._box.x + self._box.width - 1
            screen.set_content(left, y, LEFT_TEE, line_style)
            for col in range(left + 1, right):
                screen.set_content(col, y, H_LINE, line_style)
            screen.set_content(right, y, RIGHT_TEE, line_style)
        else:
            print_text(screen, H_LINE * width, x, y, width, Align.LEFT, line_style)

    def _draw_main_line(
        self,
        screen: Screen,
        item: ListItem,
        x: int,
        y: int,
        width: int,
        selected: bool,
    ) -> None:
        colors = self._colors
        if item.shortcut:
            fg = colors.shortcut if item.enabled else colors.disabled_shortcut
            print_text(screen, f"({item.shortcut})", x - _SHORTCUT_COLUMN - 1, y,
                       _SHORTCUT_COLUMN, Align.RIGHT, CellStyle(fg=fg))

        fg = colors.main_text if item.enabled else colors.disabled_text
        print_text(screen, item.main_text, x, y, width, Align.LEFT, CellStyle(fg=fg))

        if not selected or not item.enabled:
            return

        highlight_width = width
        if not self._highlight_full_line:
            highlight_width = min(width, text_width(item.main_text))

        attrs = self._selected_attributes
        for col in range(x, x + highlight_width):
            char, cell_style = screen.get_content(col, y)
            fg = colors.selected_text if cell_style.fg in (None, colors.main_text) else cell_style.fg
            screen.set_content(col, y, char, cell_style.with_(
                fg=fg,
                bg=colors.selected_background,
                bold=cell_style.bold or attrs.bold,
                underline=cell_style.underline or attrs.underline,
                italic=cell_style.italic or attrs.italic,
                reverse=cell_style.reverse or attrs.reverse,
            ))

    # ------------------------------------------------------------------
    # Keyboard input
    # ------------------------------------------------------------------

    def handle_input(self, key: Key) -> bool:
        """
        Handle a key press.

        While the context menu is open, cancel closes it and every other
        key goes to the menu.  Otherwise a printable character matching a
        row's shortcut selects that row; remaining keys are resolved
        through the keybindings (navigation, select, cancel, menu).
        """
        if not self.focused:
            return False

        if self._menu_open():
            if self.keybindings.matches(key, "cancel"):
                self._context_menu.hide()
            else:
                self._context_menu.handle_input(key)
            return True

        open_menu = False
        with self._lock.write_locked():
            notices: list[_Notice] = []
            consumed = True

            shortcut_index = None
            if key.is_printable and key.char != " ":
                shortcut_index = self._store.first_shortcut_match(key.char)

            action = None if shortcut_index is not None else self._keybindings.find_action(key)

            if shortcut_index is not None:
                notices = self._move_to(shortcut_index, select=True)
            elif action == "cancel":
                if self._done is not None:
                    notices = [self._done]
            elif action == "context_menu":
                open_menu = True
            elif not self._store:
                consumed = False
            elif action == "select":
                notices = self._selection_notices()
            elif action in _NAVIGATION_ACTIONS:
                notices = self._transform(_NAVIGATION_ACTIONS[action])
            else:
                consumed = False

        if open_menu:
            self.show_context_menu()
        self._fire(notices)
        return consumed

    # ------------------------------------------------------------------
    # Mouse input
    # ------------------------------------------------------------------

    def _click_notices(self, x: int, y: int) -> list[_Notice]:
        index = index_at_point(
            self._box.inner_rect(), x, y, self._offset, self._rows_per_item(), len(self._store)
        )
        if index is None or not self._store.get(index).selectable:
            return []
        return self._move_to(index, select=True)

    def handle_mouse(
        self,
        action: MouseAction,
        event: MouseEvent,
    ) -> tuple[bool, Component | None]:
        """
        Handle a mouse event at ``event.position``.

        Returns ``(consumed, capture)`` where *capture* is the component
        that should receive the following mouse events, if any.
        """
        x, y = event.position
        menu = self._context_menu
        menu_open = menu is not None and menu.open

        if menu_open and menu.in_rect(x, y):
            menu.handle_mouse(action, event)
            return True, None
        if not self.in_rect(x, y):
            return False, None

        menu_has_items = menu is not None and len(menu.list) > 0
        notices: list[_Notice] = []
        consumed = True
        hide_menu = False
        open_menu = False

        with self._lock.write_locked():
            if action is MouseAction.LEFT_CLICK:
                if menu_open:
                    hide_menu = True
                else:
                    self.focused = True
                    notices = self._click_notices(x, y)

            elif action is MouseAction.MIDDLE_CLICK:
                if menu_open:
                    hide_menu = True
                else:
                    consumed = False

            elif action is MouseAction.RIGHT_CLICK:
                if menu_has_items:
                    index = index_at_point(self._box.inner_rect(), x, y, self._offset,
                                           self._rows_per_item(), len(self._store))
                    if index is not None and self._store.get(index).selectable:
                        notices = self._move_to(index, select=False)
                    open_menu = True
                elif menu_open:
                    hide_menu = True
                else:
                    self.focused = True
                    notices = self._click_notices(x, y)

            elif action is MouseAction.MOVE:
                if self._hover:
                    index = index_at_y(self._box.inner_rect(), y, self._offset,
                                       self._rows_per_item(), len(self._store))
                    if index is not None and self._store.get(index).selectable:
                        notices = self._move_to(index, select=False)
                else:
                    consumed = False

            elif action is MouseAction.SCROLL_UP:
                self._offset = clamp_offset(self._offset - 1, len(self._store), self._capacity())
                self.invalidate()

            elif action is MouseAction.SCROLL_DOWN:
                self._offset = clamp_offset(self._offset + 1, len(self._store), self._capacity())
                self.invalidate()

            else:
                consumed = False

        if hide_menu:
            menu.hide()
        self._fire(notices)

        if open_menu and self.show_context_menu(x, y):
            self.context_menu.drag = True
            return True, self.context_menu.list
        return consumed, None
