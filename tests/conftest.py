"""Shared fixtures: a recording stand-in for TerminalInterface."""

from contextlib import contextmanager

import pytest

from rawedit.editor import Editor


class FakeTerminal:
    """Records adapter calls and keeps a character grid of what was drawn."""

    def __init__(self, width=80, height=24, keys=None):
        self._width = width
        self._height = height
        self.keys = list(keys or [])
        self.calls = []
        self.grid = {}
        self.cursor = (0, 0)
        self.in_session = False
        self.sessions = 0

    # Adapter contract
    def clear_screen(self):
        self.calls.append(('clear',))
        self.grid = {}

    def move_cursor_to(self, col, row):
        self.calls.append(('move', col, row))
        self.cursor = (col, row)

    def write_styled(self, text, color=None):
        self.calls.append(('write', text, color))
        col, row = self.cursor
        line = self.grid.setdefault(row, [])
        if len(line) < col:
            line.extend(' ' * (col - len(line)))
        line[col:col + len(text)] = list(text)
        self.cursor = (col + len(text), row)

    def show_cursor(self):
        self.calls.append(('show_cursor',))

    def flush(self):
        self.calls.append(('flush',))

    def read_key(self):
        # Quit once the scripted keys run out
        return self.keys.pop(0) if self.keys else '<Ctrl-c>'

    @contextmanager
    def session(self):
        self.in_session = True
        self.sessions += 1
        try:
            yield self
        finally:
            self.in_session = False

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height - 1

    # Helpers for assertions
    def row_text(self, row):
        return ''.join(self.grid.get(row, []))

    def writes(self):
        return [c for c in self.calls if c[0] == 'write']


@pytest.fixture
def fake_terminal():
    return FakeTerminal()


@pytest.fixture
def editor(fake_terminal):
    return Editor(terminal=fake_terminal)
