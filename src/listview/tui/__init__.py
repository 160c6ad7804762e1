"""
Terminal UI primitives used by the list widget.

Provides the component base and geometry box, an in-memory cell surface
with drawing helpers, ANSI styling, key and mouse parsing, and keybinding
management.
"""
from __future__ import annotations

from listview.tui.component import Box, Component, Padding
from listview.tui.draw import Align, ScrollBarVisibility, print_text, render_scroll_bar
from listview.tui.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from listview.tui.keys import Key, parse_key
from listview.tui.mouse import MouseAction, MouseEvent, parse_mouse
from listview.tui.screen import CellStyle, Screen

__all__ = [
    # Core
    "Component",
    "Box",
    "Padding",
    # Surface
    "Screen",
    "CellStyle",
    "Align",
    "ScrollBarVisibility",
    "print_text",
    "render_scroll_bar",
    # Input
    "Key",
    "parse_key",
    "MouseAction",
    "MouseEvent",
    "parse_mouse",
    # Keybindings
    "KeybindingsManager",
    "DEFAULT_KEYBINDINGS",
]
