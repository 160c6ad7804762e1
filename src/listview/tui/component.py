"""
Component base and rectangle/focus primitive.

``Component`` carries the state every widget shares (dirty, visible,
focused) and the input entry points.  ``Box`` is a separate geometry
object that widgets own and delegate to: position, size, border and
padding, the inner rectangle and point hit-testing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from listview.tui.draw import draw_border, fill

if TYPE_CHECKING:
    from listview.tui.keys import Key
    from listview.tui.mouse import MouseAction, MouseEvent
    from listview.tui.screen import CellStyle, Screen


class Component(ABC):
    """
    Base class for drawable widgets.

    Subclasses implement :meth:`draw`.  Components track *dirty* state so
    a host can skip unchanged frames.
    """

    def __init__(self) -> None:
        self._dirty: bool = True
        self._visible: bool = True
        self._focused: bool = False

    # ------------------------------------------------------------------
    # Abstract API
    # ------------------------------------------------------------------

    @abstractmethod
    def draw(self, screen: Screen) -> None:
        """Draw the component onto *screen* at its own rectangle."""
        ...

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, key: Key) -> bool:
        """
        Handle a keyboard event.

        Returns
        -------
        bool
            ``True`` if the event was consumed and should not propagate.
        """
        return False

    def handle_mouse(
        self,
        action: MouseAction,
        event: MouseEvent,
    ) -> tuple[bool, Component | None]:
        """
        Handle a mouse event.

        Returns
        -------
        tuple[bool, Component | None]
            Whether the event was consumed, and the component that should
            capture subsequent mouse events (``None`` for no capture).
        """
        return False, None

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        """Mark the component as needing a redraw."""
        self._dirty = True

    @property
    def dirty(self) -> bool:
        """Whether the component needs to be redrawn."""
        return self._dirty

    @dirty.setter
    def dirty(self, value: bool) -> None:
        self._dirty = value

    @property
    def visible(self) -> bool:
        """Whether the component is visible."""
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        if self._visible != value:
            self._visible = value
            self._dirty = True

    @property
    def focused(self) -> bool:
        """Whether the component currently has input focus."""
        return self._focused

    @focused.setter
    def focused(self, value: bool) -> None:
        if self._focused != value:
            self._focused = value
            self._dirty = True


@dataclass
class Padding:
    """Insets between a box's border and its content."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


class Box:
    """
    A rectangle with optional border and padding.

    The *inner* rectangle is what remains for content once the border
    (one cell on each side) and padding are removed.
    """

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        border: bool = False,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.border = border
        self.padding = Padding()
        self.background: CellStyle | None = None
        self.border_style: CellStyle | None = None

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y = x, y
        self.width, self.height = max(0, width), max(0, height)

    def rect(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height

    def set_padding(self, top: int, bottom: int, left: int, right: int) -> None:
        self.padding = Padding(top=top, bottom=bottom, left=left, right=right)

    def inner_rect(self) -> tuple[int, int, int, int]:
        """Return ``(x, y, width, height)`` of the content area."""
        x, y, width, height = self.x, self.y, self.width, self.height
        if self.border:
            x += 1
            y += 1
            width -= 2
            height -= 2
        x += self.padding.left
        y += self.padding.top
        width -= self.padding.left + self.padding.right
        height -= self.padding.top + self.padding.bottom
        return x, y, max(0, width), max(0, height)

    def in_rect(self, x: int, y: int) -> bool:
        """Whether screen cell ``(x, y)`` lies inside the outer rectangle."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def draw(self, screen: Screen) -> None:
        """Paint the background and, if enabled, the border."""
        if self.width <= 0 or self.height <= 0:
            return
        if self.background is not None:
            fill(screen, self.x, self.y, self.width, self.height, self.background)
        if self.border and self.width >= 2 and self.height >= 2:
            draw_border(screen, self.x, self.y, self.width, self.height, self.border_style)
