"""Keyboard handling: physical keys to the characters a terminal sends."""

from __future__ import annotations

from string import ascii_lowercase
from types import MappingProxyType
from typing import Callable, Mapping, Optional

_SHARED = {
    "escape": "\x1b\x1b",
    "1": "1!",
    "2": "2@",
    "3": "3#",
    "4": "4$",
    "5": "5%",
    "6": "6^",
    "7": "7&",
    "8": "8*",
    "9": "9(",
    "0": "0)",
    "minus": "-_",
    "equals": "=+",
    "backspace": "\b\b",
    "delete": "\x7f\x7f",
    "tab": "\t\t",
    "semicolon": ";:",
    "apostrophe": "'\"",
    "return": "\r\r",
    "comma": ",<",
    "period": ".>",
    "slash": "/?",
    "space": "  ",
}

KEYMAP_BOTH: Mapping[str, str] = MappingProxyType(
    {
        **_SHARED,
        "grave": "`~",
        "leftbracket": "[{",
        "rightbracket": "]}",
        "backslash": "\\|",
        **{c: c + c.upper() for c in ascii_lowercase},
    }
)
"""Keymap for terminals with lower and upper case."""

KEYMAP_UPPER: Mapping[str, str] = MappingProxyType(
    {
        **_SHARED,
        "grave": "\x1b\x1b",
        "leftbracket": "[[",
        "rightbracket": "]]",
        "backslash": "\\\\",
        **{c: c.upper() * 2 for c in ascii_lowercase},
    }
)
"""Keymap for upper-case-only terminals."""

_SHIFT = frozenset({"lshift", "rshift"})
_CTRL = frozenset({"capslock", "lctrl", "rctrl"})
_ALT = frozenset({"lalt", "ralt"})
_GUI = frozenset({"lgui", "rgui"})


class Keyboard:
    """Tracks modifiers and sends the byte for each key press."""

    def __init__(
        self,
        keymap: Mapping[str, str],
        send: Callable[[bytes], object],
        on_fullscreen: Optional[Callable[[], object]] = None,
    ):
        self.keymap = dict(keymap)
        self._send = send
        self._on_fullscreen = on_fullscreen
        self.shift = False
        self.ctrl = False
        self.alt = False
        self._gui: set[str] = set()

    def key_down(self, key: Optional[str], repeat: bool = False) -> Optional[bytes]:
        """Handle a key press; return the bytes sent, if any."""
        if key in _SHIFT:
            self.shift = True
            return None
        if key in _CTRL:
            self.ctrl = True
            return None
        if key in _GUI:
            self._gui.add(key)
        if self._gui:
            return None
        if key in _ALT:
            self.alt = True
            return None
        if key == "f11" and not repeat and self._on_fullscreen is not None:
            self._on_fullscreen()
        keys = self.keymap.get(key) if key is not None else None
        if keys is None:
            return None
        code = ord(keys[int(self.shift)])
        if self.ctrl:
            code &= 0o37
        data = bytes([0o33, code]) if self.alt else bytes([code])
        self._send(data)
        return data

    def key_up(self, key: Optional[str]) -> None:
        """Handle a key release."""
        if key in _SHIFT:
            self.shift = False
        elif key in _CTRL:
            self.ctrl = False
        elif key in _ALT:
            self.alt = False
        elif key in _GUI:
            self._gui.discard(key)