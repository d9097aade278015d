"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
from collections import deque
from contextlib import contextmanager
from typing import Optional

import blessed
from curtsies import Input, events

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    This is the only object that talks to the terminal device. Output is
    written with ``print(..., end='')`` and made visible by ``flush()``.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._pending: deque[str] = deque()

    # --- Screen ---

    def enter_alternate_screen(self):
        """Switch to the alternate screen and hide the cursor."""
        print(self.term.enter_fullscreen + self.term.hide_cursor, end='', flush=True)
        self.is_fullscreen = True

    def leave_alternate_screen(self):
        """Return to the normal screen and show the cursor."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    # --- Raw mode ---

    def enable_raw_mode(self):
        """Put stdin into raw input mode via curtsies.

        Flow control is disabled so Ctrl-S reaches the editor, and SIGINT is
        delivered as an event instead of raising KeyboardInterrupt.
        """
        if self._input is not None:
            return
        inp = Input(keynames='curtsies', sigint_event=True,
                    disable_terminal_start_stop=True)
        inp.__enter__()
        self._input = inp

    def disable_raw_mode(self):
        """Restore the terminal's input mode."""
        if self._input is None:
            return
        inp, self._input = self._input, None
        self._pending.clear()
        inp.__exit__(None, None, None)

    @property
    def is_raw(self) -> bool:
        return self._input is not None

    @contextmanager
    def session(self):
        """Hold raw mode and the alternate screen for the duration of a block.

        Both are released on every exit path, including exceptions.
        """
        self.enable_raw_mode()
        try:
            self.enter_alternate_screen()
            try:
                yield self
            finally:
                self.leave_alternate_screen()
        finally:
            self.disable_raw_mode()

    # --- Output primitives ---

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def move_cursor_to(self, col: int, row: int):
        """Move the terminal cursor to a column and row (0-based)."""
        print(self.term.move_xy(col, row), end='')

    def write_styled(self, text: str, color: Optional[str] = None):
        """Write text at the cursor, optionally in a named blessed color."""
        if color:
            print(getattr(self.term, color)(text), end='')
        else:
            print(text, end='')

    def show_cursor(self):
        print(self.term.normal_cursor, end='')

    def flush(self):
        print('', end='', flush=True)

    # --- Input ---

    def read_key(self) -> Optional[str]:
        """Block until the next key and return its curtsies token.

        Pasted text arrives as one event; its keys are handed out one by one.
        """
        if self._pending:
            return self._pending.popleft()
        if self._input is None:
            return None
        evt = next(self._input)
        if isinstance(evt, events.SigIntEvent):
            return '<Ctrl-c>'
        if isinstance(evt, events.PasteEvent):
            self._pending.extend(str(e) for e in evt.events)
            return self._pending.popleft() if self._pending else None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
