"""Shared pytest fixtures for listview tests."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from listview import ListConfig, ListView


class EventRecorder:
    """Collects list callbacks as ``(event, args)`` tuples."""

    def __init__(self) -> None:
        self.events: list[tuple[str, tuple]] = []

    def attach(self, list_view: ListView) -> EventRecorder:
        list_view.on_changed = lambda *args: self.events.append(("changed", args))
        list_view.on_selected = lambda *args: self.events.append(("selected", args))
        list_view.on_done = lambda: self.events.append(("done", ()))
        return self

    def of(self, name: str) -> list[tuple]:
        return [args for event, args in self.events if event == name]

    def names(self) -> list[str]:
        return [event for event, _ in self.events]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def abc_list() -> ListView:
    """Three single-line rows A, B, C in a focused, borderless 20x10 list."""
    lv = ListView(ListConfig(show_secondary_text=False))
    for text in ("A", "B", "C"):
        lv.add_item(text)
    lv.set_rect(0, 0, 20, 10)
    lv.focused = True
    return lv


@pytest.fixture
def long_list() -> ListView:
    """Twenty single-line rows in a focused, borderless 20x5 list."""
    lv = ListView(ListConfig(show_secondary_text=False))
    for i in range(20):
        lv.add_item(f"Item {i}")
    lv.set_rect(0, 0, 20, 5)
    lv.focused = True
    return lv


@pytest.fixture
def list_file(tmp_path: Path) -> Path:
    """A YAML list file with shortcuts, secondary text and a divider."""
    path = tmp_path / "menu.yaml"
    path.write_text(dedent("""\
        border: false
        config:
          show_secondary_text: false
        items:
          - main: Open
            secondary: Open a file
            shortcut: o
          - main: Save
            secondary: Save the current file
            shortcut: s
          - {}
          - main: Quit
            secondary: Leave the program
            shortcut: q
            enabled: false
    """))
    return path
