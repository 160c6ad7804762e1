"""
Mouse event model and SGR (mode 1006) report parsing.

A report looks like ``ESC [ < b ; x ; y M`` for presses/motion and ends in
``m`` for releases.  Coordinates in the report are 1-based; :class:`MouseEvent`
stores them 0-based to match screen cell addressing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class MouseAction(Enum):
    """What the pointer did, as far as a widget cares."""

    LEFT_CLICK = "left_click"
    MIDDLE_CLICK = "middle_click"
    RIGHT_CLICK = "right_click"
    MOVE = "move"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


@dataclass(frozen=True)
class MouseEvent:
    """Pointer position plus modifier flags of a mouse report."""

    x: int
    y: int
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


_SGR_RE = re.compile(rb"^\x1b\[<(\d+);(\d+);(\d+)([Mm])$")

_BUTTON_ACTIONS: dict[int, MouseAction] = {
    0: MouseAction.LEFT_CLICK,
    1: MouseAction.MIDDLE_CLICK,
    2: MouseAction.RIGHT_CLICK,
    64: MouseAction.SCROLL_UP,
    65: MouseAction.SCROLL_DOWN,
}


def parse_mouse(data: bytes) -> tuple[MouseAction, MouseEvent] | None:
    """
    Decode an SGR mouse report.

    Button presses map to click actions, any motion report (with or
    without a button held) maps to :attr:`MouseAction.MOVE`, wheel codes
    map to scroll actions.  Releases and unrecognised input return
    ``None``.
    """
    match = _SGR_RE.match(data)
    if match is None:
        return None

    code = int(match.group(1))
    event = MouseEvent(
        x=int(match.group(2)) - 1,
        y=int(match.group(3)) - 1,
        shift=bool(code & 4),
        alt=bool(code & 8),
        ctrl=bool(code & 16),
    )

    if code & 32:  # motion
        return MouseAction.MOVE, event
    if match.group(4) == b"m":
        return None

    action = _BUTTON_ACTIONS.get(code & ~0b11100)
    if action is None:
        return None
    return action, event
