"""
Configuration models for list widgets.

A :class:`ListConfig` bundles display policies, colours and keybinding
overrides.  It can be built in code or loaded from YAML and applied to a
:class:`~listview.widget.ListView` at construction time or later.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from listview.errors import ConfigError
from listview.logging import get_logger
from listview.tui.ansi import resolve_color
from listview.tui.draw import ScrollBarVisibility

logger = get_logger("config")

DEFAULT_PAGE_SIZE = 5


@dataclass
class ListColors:
    """
    Colours used when drawing a list.

    Values are hex strings or any colour name understood by ``rich``;
    they are normalised to ``#rrggbb`` by :meth:`resolved`.
    """

    main_text: str = "#ffffff"  # Item main text
    secondary_text: str = "#00ff00"  # Item secondary text
    shortcut: str = "#ffff00"  # "(x)" shortcut column
    selected_text: str = "#000000"  # Main text of the selected row
    selected_background: str = "#ffffff"  # Highlight behind the selected row
    disabled_text: str = "#808080"  # Disabled rows
    disabled_shortcut: str = "#2f4f4f"
    scroll_bar: str = "#ffffff"
    border: str = "#ffffff"

    def resolved(self) -> ListColors:
        """Return a copy with every colour converted to hex."""
        values: dict[str, str] = {}
        for f in fields(self):
            raw = getattr(self, f.name)
            try:
                values[f.name] = resolve_color(raw)
            except ValueError as exc:
                raise ConfigError(f"colors.{f.name}: {exc}") from exc
        return ListColors(**values)


@dataclass
class SelectedAttributes:
    """Text attributes added to the selected row."""

    bold: bool = False
    underline: bool = False
    italic: bool = False
    reverse: bool = False


@dataclass
class ListConfig:
    """
    Display configuration for a list.

    Example YAML:
        show_secondary_text: false
        wrap_around: true
        selected_always_visible: true
        scroll_bar_visibility: auto
        page_size: 10
        colors:
          selected_background: navy
          selected_text: bright_white
        selected_attributes:
          bold: true
        keybindings:
          next_item: [down, ctrl+n]
          cancel: [escape, q]
    """

    # Display policies
    show_secondary_text: bool = True  # Second line under each item
    wrap_around: bool = False  # Navigation past an end cycles around
    hover: bool = False  # Pointer movement moves the selection
    selected_focus_only: bool = False  # Only highlight when focused
    selected_always_visible: bool = False  # Scroll to selection on draw
    selected_always_centered: bool = False  # Keep selection mid-viewport
    highlight_full_line: bool = False  # Highlight the whole row width
    scroll_bar_visibility: ScrollBarVisibility = ScrollBarVisibility.AUTO
    page_size: int = DEFAULT_PAGE_SIZE  # Rows moved by page up / page down

    # Styling
    colors: ListColors = field(default_factory=ListColors)
    selected_attributes: SelectedAttributes = field(default_factory=SelectedAttributes)

    # Keybinding overrides (action -> key descriptors)
    keybindings: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListConfig:
        """Create config from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping, got {type(data).__name__}")

        visibility = data.get("scroll_bar_visibility", ScrollBarVisibility.AUTO.value)
        try:
            scroll_bar_visibility = ScrollBarVisibility(visibility)
        except ValueError as exc:
            raise ConfigError(f"Unknown scroll_bar_visibility: {visibility!r}") from exc

        page_size = data.get("page_size", DEFAULT_PAGE_SIZE)
        if not isinstance(page_size, int) or page_size < 1:
            raise ConfigError(f"page_size must be a positive integer, got {page_size!r}")

        known_colors = {f.name for f in fields(ListColors)}
        color_data = data.get("colors", {}) or {}
        unknown = set(color_data) - known_colors
        if unknown:
            logger.warning("Ignoring unknown color keys: %s", ", ".join(sorted(unknown)))
        colors = ListColors(**{k: str(v) for k, v in color_data.items() if k in known_colors})

        attr_data = data.get("selected_attributes", {}) or {}
        attributes = SelectedAttributes(
            bold=bool(attr_data.get("bold", False)),
            underline=bool(attr_data.get("underline", False)),
            italic=bool(attr_data.get("italic", False)),
            reverse=bool(attr_data.get("reverse", False)),
        )

        keybindings = {
            action: [str(k) for k in keys]
            for action, keys in (data.get("keybindings", {}) or {}).items()
        }

        return cls(
            show_secondary_text=data.get("show_secondary_text", True),
            wrap_around=data.get("wrap_around", False),
            hover=data.get("hover", False),
            selected_focus_only=data.get("selected_focus_only", False),
            selected_always_visible=data.get("selected_always_visible", False),
            selected_always_centered=data.get("selected_always_centered", False),
            highlight_full_line=data.get("highlight_full_line", False),
            scroll_bar_visibility=scroll_bar_visibility,
            page_size=page_size,
            colors=colors.resolved(),
            selected_attributes=attributes,
            keybindings=keybindings,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> ListConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> ListConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "show_secondary_text": self.show_secondary_text,
            "wrap_around": self.wrap_around,
            "hover": self.hover,
            "selected_focus_only": self.selected_focus_only,
            "selected_always_visible": self.selected_always_visible,
            "selected_always_centered": self.selected_always_centered,
            "highlight_full_line": self.highlight_full_line,
            "scroll_bar_visibility": self.scroll_bar_visibility.value,
            "page_size": self.page_size,
            "colors": asdict(self.colors),
            "selected_attributes": asdict(self.selected_attributes),
            "keybindings": {k: list(v) for k, v in self.keybindings.items()},
        }
