"""
Keybinding management.

Maps the list widget's logical actions to key descriptors such as
``"alt+enter"`` or ``"G"``, with user overrides from configuration or a
JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from listview.logging import get_logger
from listview.tui.keys import Key

logger = get_logger("keybindings")

# ---------------------------------------------------------------------------
# Default keybinding map
# ---------------------------------------------------------------------------

DEFAULT_KEYBINDINGS: dict[str, list[str]] = {
    "cancel": ["escape"],
    "context_menu": ["alt+enter"],
    "select": ["enter", "space"],
    "first_item": ["home", "g"],
    "last_item": ["end", "G"],
    "previous_item": ["up", "left", "shift+tab", "k"],
    "next_item": ["down", "right", "tab", "j"],
    "previous_page": ["page_up"],
    "next_page": ["page_down"],
}

_MODIFIERS = ("alt", "ctrl", "shift")


# ---------------------------------------------------------------------------
# Normalised key descriptor parsing
# ---------------------------------------------------------------------------

def _normalise_base(base: str) -> str:
    # Single characters keep their case so that "g" and "G" differ.
    return base if len(base) == 1 else base.lower()


def _normalise_key_descriptor(descriptor: str) -> str:
    """
    Normalise a human-readable key descriptor to a canonical form.

    ``"Shift+Tab"`` -> ``"shift+tab"``, ``"Ctrl+Alt+X"`` -> ``"alt+ctrl+X"``
    """
    descriptor = descriptor.strip()
    if descriptor == "+":
        return "+"
    parts = [p.strip() for p in descriptor.split("+")]
    modifiers = sorted({p.lower() for p in parts[:-1]})
    return "+".join(modifiers + [_normalise_base(parts[-1])])


def _key_to_descriptor(key: Key) -> str:
    """
    Convert a parsed :class:`Key` into a canonical descriptor string.

    Examples
    --------
    >>> _key_to_descriptor(Key(name="tab", char="\\t", shift=True))
    'shift+tab'
    >>> _key_to_descriptor(Key(name="G", char="G"))
    'G'
    """
    flags = {"alt": key.alt, "ctrl": key.ctrl, "shift": key.shift}
    base = key.name
    if key.ctrl and base.startswith("ctrl+"):
        base = base[len("ctrl+"):]
    modifiers = [m for m in _MODIFIERS if flags[m]]
    return "+".join(modifiers + [_normalise_base(base)])


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class KeybindingsManager:
    """
    Manages the mapping from logical action names to key descriptors.

    Parameters
    ----------
    user_overrides:
        Optional mapping of action names to key descriptor lists that
        replace the defaults for those actions.
    """

    def __init__(self, user_overrides: dict[str, list[str]] | None = None) -> None:
        self._bindings: dict[str, list[str]] = dict(DEFAULT_KEYBINDINGS)
        if user_overrides:
            self._bindings.update(user_overrides)

        self._normalised: dict[str, list[str]] = {
            action: [_normalise_key_descriptor(d) for d in descriptors]
            for action, descriptors in self._bindings.items()
        }

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> KeybindingsManager:
        """
        Load keybindings from a JSON file.

        When *config_path* is ``None`` the file
        ``~/.listview/keybindings.json`` is used if it exists.  The file
        maps action names to lists of key descriptors::

            {"next_item": ["down", "ctrl+n"], "cancel": ["escape", "q"]}

        Unreadable or malformed files are logged and ignored.
        """
        path = Path(config_path) if config_path is not None else (
            Path.home() / ".listview" / "keybindings.json"
        )

        overrides: dict[str, list[str]] | None = None
        if path.is_file():
            try:
                raw: Any = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring keybindings file %s: %s", path, e)
                raw = None
            if isinstance(raw, dict):
                overrides = {
                    action: val
                    for action, val in raw.items()
                    if isinstance(val, list) and all(isinstance(v, str) for v in val)
                }

        return cls(user_overrides=overrides)

    def matches(self, key: Key | str, action: str) -> bool:
        """
        Test whether *key* matches any binding for *action*.

        *key* is either a :class:`Key` or a raw descriptor string.
        """
        descriptors = self._normalised.get(action)
        if descriptors is None:
            return False

        if isinstance(key, str):
            normalised = _normalise_key_descriptor(key)
        else:
            normalised = _key_to_descriptor(key)
        return normalised in descriptors

    def get_keys(self, action: str) -> list[str]:
        """Return the descriptors bound to *action* as written."""
        return list(self._bindings.get(action, []))

    def actions(self) -> list[str]:
        """Return all registered action names."""
        return list(self._bindings.keys())

    def find_action(self, key: Key | str) -> str | None:
        """Find the first action that matches *key*, or ``None``."""
        for action in self._bindings:
            if self.matches(key, action):
                return action
        return None
