"""
listview - a thread-safe selectable list widget for terminal UIs.

The list keeps one row current, scrolls to keep it visible, maps keys and
mouse events to selection changes and owns a context menu that opens on
a row.

Example:
    from listview import ListView, Screen
    from listview.tui.keys import KEY_DOWN, KEY_ENTER

    lv = ListView()
    lv.add_item("Open", "Open a file", "o")
    lv.add_item("Save", "Save the current file", "s")
    lv.add_context_item("Delete", "d", lambda row: lv.remove_item(row))
    lv.on_selected = lambda index, main, secondary, shortcut: print(main)

    lv.set_rect(0, 0, 30, 6)
    lv.focused = True
    lv.handle_input(KEY_DOWN)
    lv.handle_input(KEY_ENTER)  # prints "Save"

    screen = Screen(30, 6)
    lv.draw(screen)
    print("\\n".join(screen.to_lines()))
"""

from listview.config import ListColors, ListConfig, SelectedAttributes
from listview.context_menu import ContextMenu
from listview.errors import ConfigError, ListViewError, OutOfRangeError
from listview.items import ItemStore, ListItem
from listview.logging import get_logger, setup_logging
from listview.navigator import Transformation, transition
from listview.tui.draw import ScrollBarVisibility
from listview.tui.screen import CellStyle, Screen
from listview.widget import ListView

__version__ = "0.1.0"

__all__ = [
    # Widget
    "ListView",
    "ContextMenu",
    "ListItem",
    "ItemStore",
    # Navigation
    "Transformation",
    "transition",
    # Config
    "ListConfig",
    "ListColors",
    "SelectedAttributes",
    "ScrollBarVisibility",
    # Surface
    "Screen",
    "CellStyle",
    # Errors
    "ListViewError",
    "OutOfRangeError",
    "ConfigError",
    # Logging
    "setup_logging",
    "get_logger",
]
