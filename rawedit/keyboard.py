"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyCode(Enum):
    """Key codes the editor distinguishes."""
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    TAB = "tab"
    OTHER = "other"


@dataclass
class KeyEvent:
    """A key code plus modifier flags."""
    code: KeyCode
    char: str = ''  # The character for CHAR events, or the base key for Ctrl/Alt
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    raw: str = ''  # The token read from the terminal

    @property
    def is_printable(self) -> bool:
        """True for an unmodified character that can go into the buffer."""
        return (self.code == KeyCode.CHAR and not (self.ctrl or self.alt)
                and len(self.char) == 1 and self.char.isprintable())


_NAMED_KEYS = {
    'left': KeyCode.LEFT,
    'right': KeyCode.RIGHT,
    'up': KeyCode.UP,
    'down': KeyCode.DOWN,
    'enter': KeyCode.ENTER,
    'return': KeyCode.ENTER,
    'backspace': KeyCode.BACKSPACE,
    'esc': KeyCode.ESCAPE,
    'escape': KeyCode.ESCAPE,
    'tab': KeyCode.TAB,
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and parse it."""
        key = self.terminal.read_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: token such as 'a', '<LEFT>', '<Ctrl-c>', '<Esc+x>' or a
                single raw control character

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-s>', '<Esc+f>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o in (8, 127):
                return KeyEvent(KeyCode.BACKSPACE, raw=key_str)
            if o == 9:
                return KeyEvent(KeyCode.TAB, raw=key_str)
            if o in (10, 13):
                return KeyEvent(KeyCode.ENTER, raw=key_str)
            if o == 27:
                return KeyEvent(KeyCode.ESCAPE, raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                return KeyEvent(KeyCode.CHAR, char=chr(ord('a') + o - 1), ctrl=True, raw=key_str)

        if len(key_str) == 1:
            return KeyEvent(KeyCode.CHAR, char=key_str, raw=key_str)
        return KeyEvent(KeyCode.OTHER, char=key_str, raw=key_str)

    def _parse_named(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        # Support both '-' and '+' as modifier separators
        parts = name.replace('+', '-').split('-')
        base = parts[-1]
        if base == '' and len(parts) > 1:
            # '<Ctrl-->' style: the base key is the separator itself
            base = '-'
        mods = {p.lower() for p in parts[:-1]}
        alt = bool(mods & {'alt', 'meta', 'esc'})
        ctrl = 'ctrl' in mods
        shift = 'shift' in mods
        lower = base.lower()

        if lower in ('space', 'spacebar', 'spc'):
            return KeyEvent(KeyCode.CHAR, char=' ', ctrl=ctrl, alt=alt, raw=key_str)
        if ctrl and len(base) == 1:
            # Terminals send Ctrl-J / Ctrl-M for Enter and Ctrl-H for Backspace
            if lower in ('j', 'm'):
                return KeyEvent(KeyCode.ENTER, raw=key_str)
            if lower == 'h':
                return KeyEvent(KeyCode.BACKSPACE, raw=key_str)
            return KeyEvent(KeyCode.CHAR, char=lower, ctrl=True, alt=alt, raw=key_str)
        if lower in _NAMED_KEYS:
            return KeyEvent(_NAMED_KEYS[lower], ctrl=ctrl, alt=alt, shift=shift, raw=key_str)
        if len(base) == 1:
            return KeyEvent(KeyCode.CHAR, char=base, ctrl=ctrl, alt=alt, shift=shift, raw=key_str)
        return KeyEvent(KeyCode.OTHER, char=lower, ctrl=ctrl, alt=alt, shift=shift, raw=key_str)
