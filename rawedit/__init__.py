"""rawedit - A minimal two-mode terminal text editor."""

from .model import TextBuffer, CursorPosition
from .highlight import Span, highlight_line
from .commands import Mode

__all__ = [
    'TextBuffer',
    'CursorPosition',
    'Span',
    'highlight_line',
    'Mode',
]
