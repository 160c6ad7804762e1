"""
Key parsing for terminal input.

Translates raw bytes read from stdin into :class:`Key` objects that the
list widget dispatches on through :mod:`listview.tui.keybindings`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Key:
    """
    Parsed representation of a single key press.

    Attributes
    ----------
    name:
        Symbolic name for special keys (``'enter'``, ``'up'``,
        ``'page_down'``).  For plain printable characters this equals
        *char*, case preserved.
    char:
        The literal character, if printable.  Empty string otherwise.
    ctrl, alt, shift:
        Modifier flags.  Shift is only reported for keys where the
        terminal encodes it (arrows, tab, function keys).
    """

    name: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_printable(self) -> bool:
        """``True`` for an unmodified printable character (space included)."""
        return len(self.char) == 1 and self.char.isprintable() and not (self.ctrl or self.alt)


KEY_ENTER = Key(name="enter", char="\r")
KEY_ALT_ENTER = Key(name="enter", char="\r", alt=True)
KEY_TAB = Key(name="tab", char="\t")
KEY_BACKTAB = Key(name="tab", char="\t", shift=True)
KEY_ESCAPE = Key(name="escape")
KEY_BACKSPACE = Key(name="backspace")
KEY_SPACE = Key(name="space", char=" ")

KEY_UP = Key(name="up")
KEY_DOWN = Key(name="down")
KEY_LEFT = Key(name="left")
KEY_RIGHT = Key(name="right")
KEY_HOME = Key(name="home")
KEY_END = Key(name="end")
KEY_PAGE_UP = Key(name="page_up")
KEY_PAGE_DOWN = Key(name="page_down")
KEY_INSERT = Key(name="insert")
KEY_DELETE = Key(name="delete")

UNKNOWN = Key(name="unknown")

# Final byte of ``CSI [1;mod] X`` and ``SS3 X`` sequences
_FINAL_KEYS: dict[str, Key] = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
    "Z": KEY_BACKTAB,
}

# ``CSI n ~`` sequences
_TILDE_KEYS: dict[int, Key] = {
    1: KEY_HOME,
    2: KEY_INSERT,
    3: KEY_DELETE,
    4: KEY_END,
    5: KEY_PAGE_UP,
    6: KEY_PAGE_DOWN,
    7: KEY_HOME,
    8: KEY_END,
}


def _with_modifier(key: Key, code: str) -> Key:
    """
    Apply an xterm modifier parameter to *key*.

    The parameter is 1-based: ``1 + shift + 2*alt + 4*ctrl``.
    """
    try:
        bits = int(code) - 1
    except ValueError:
        return key
    return replace(
        key,
        shift=key.shift or bool(bits & 1),
        alt=bool(bits & 2),
        ctrl=bool(bits & 4),
    )


def _parse_csi(body: str) -> Key:
    """Parse the text following ``ESC [``."""
    if not body:
        return UNKNOWN

    final, params = body[-1], body[:-1].split(";") if body[:-1] else []

    if final == "~":
        if not params or not params[0].isdigit():
            return UNKNOWN
        key = _TILDE_KEYS.get(int(params[0]))
        if key is None:
            return UNKNOWN
        return _with_modifier(key, params[1]) if len(params) > 1 else key

    key = _FINAL_KEYS.get(final)
    if key is None:
        return UNKNOWN
    return _with_modifier(key, params[1]) if len(params) > 1 else key


def parse_key(data: bytes) -> Key:
    """
    Parse raw terminal input bytes into a :class:`Key`.

    Handles printable (UTF-8) characters, Ctrl+letter, Alt+character,
    Alt+Enter, and CSI/SS3 navigation sequences including xterm modifier
    suffixes such as ``ESC [1;5A`` (Ctrl+Up).  Anything else yields a key
    named ``'unknown'``.
    """
    if not data:
        return UNKNOWN

    if data[:1] == b"\x1b":
        if len(data) == 1:
            return KEY_ESCAPE
        rest = data[1:]
        if rest[:1] in (b"[", b"O") and len(rest) > 1:
            try:
                body = rest[1:].decode("ascii")
            except UnicodeDecodeError:
                return UNKNOWN
            if rest[:1] == b"O":
                return _FINAL_KEYS.get(body, UNKNOWN)
            return _parse_csi(body)
        if rest in (b"\r", b"\n"):
            return KEY_ALT_ENTER
        inner = parse_key(rest)
        if inner is UNKNOWN or inner.alt:
            return UNKNOWN
        return replace(inner, alt=True)

    byte = data[0]
    if byte in (0x0D, 0x0A):
        return KEY_ENTER
    if byte == 0x09:
        return KEY_TAB
    if byte in (0x7F, 0x08):
        return KEY_BACKSPACE
    if 1 <= byte <= 26:
        letter = chr(byte + 96)
        return Key(name=f"ctrl+{letter}", char=letter, ctrl=True)
    if byte < 0x20:
        return UNKNOWN

    try:
        ch = data.decode("utf-8")
    except UnicodeDecodeError:
        return UNKNOWN
    if len(ch) != 1 or not ch.isprintable():
        return UNKNOWN
    if ch == " ":
        return KEY_SPACE
    return Key(name=ch, char=ch)
