"""
ANSI escape sequence utilities for terminal rendering.

Colours are handled as ``#rrggbb`` strings internally.  User-facing
configuration may use any colour understood by :mod:`rich.color`
(``"navy"``, ``"bright_white"``, ``"rgb(10,20,30)"``, ``"#ff8800"``);
:func:`resolve_color` normalises those to hex.
"""

from __future__ import annotations

from functools import lru_cache

from rich.color import Color, ColorParseError

ESC = "\033"
CSI = f"{ESC}["
RESET = f"{CSI}0m"


# ---------------------------------------------------------------------------
# Colour handling
# ---------------------------------------------------------------------------

@lru_cache(maxsize=256)
def resolve_color(value: str) -> str:
    """
    Normalise a colour description to a ``#rrggbb`` hex string.

    Raises
    ------
    ValueError
        If *value* is not a colour rich can parse.
    """
    try:
        color = Color.parse(value)
    except ColorParseError as exc:
        raise ValueError(f"Invalid color: {value!r}") from exc
    return color.get_truecolor().hex


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert a hex color string (with or without '#') to an (r, g, b) tuple."""
    h = hex_color.lstrip("#")
    if len(h) == 3:
        h = h[0] * 2 + h[1] * 2 + h[2] * 2
    if len(h) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_fg(r: int, g: int, b: int) -> str:
    """Return an escape sequence for a 24-bit foreground color."""
    return f"{CSI}38;2;{r};{g};{b}m"


def rgb_bg(r: int, g: int, b: int) -> str:
    """Return an escape sequence for a 24-bit background color."""
    return f"{CSI}48;2;{r};{g};{b}m"


# ---------------------------------------------------------------------------
# Text styling
# ---------------------------------------------------------------------------

_STYLE_CODES: dict[str, int] = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "reverse": 7,
}


def style(
    text: str,
    *,
    fg: str | None = None,
    bg: str | None = None,
    bold: bool = False,
    dim: bool = False,
    italic: bool = False,
    underline: bool = False,
    reverse: bool = False,
) -> str:
    """
    Apply ANSI styling to *text*.

    Parameters
    ----------
    text:
        The string to style.
    fg, bg:
        Foreground / background colour as a hex string or any colour name
        accepted by :func:`resolve_color`.
    bold, dim, italic, underline, reverse:
        Boolean attribute flags.

    Returns
    -------
    str
        The text wrapped in escape sequences with a trailing ``RESET``, or
        *text* unchanged when no styling was requested.
    """
    parts: list[str] = []

    if fg is not None:
        parts.append(rgb_fg(*_hex_to_rgb(resolve_color(fg))))
    if bg is not None:
        parts.append(rgb_bg(*_hex_to_rgb(resolve_color(bg))))

    attrs = {
        "bold": bold,
        "dim": dim,
        "italic": italic,
        "underline": underline,
        "reverse": reverse,
    }
    for attr_name, enabled in attrs.items():
        if enabled:
            parts.append(f"{CSI}{_STYLE_CODES[attr_name]}m")

    if not parts:
        return text
    return f"{''.join(parts)}{text}{RESET}"
