from typing import Optional

from .constants import EditorConstants
from .highlight import highlight_line, spans_to_text
from .model import TextBuffer


class TerminalRenderer:
    """Draws the whole buffer each frame through a TerminalInterface.

    There is no diffing: every frame clears the screen and redraws each
    visible line. The cursor line goes through the highlighter, every other
    line is written as-is. Lines are cut at the terminal width, never
    wrapped.
    """

    def __init__(self, terminal, keyword_color: str = EditorConstants.DEFAULT_KEYWORD_COLOR):
        self.terminal = terminal
        self.keyword_color = keyword_color
        # First buffer row shown on screen
        self.top_row = 0

    def scroll_to_cursor(self, buffer: TextBuffer, num_rows: int):
        """Adjust top_row so the cursor row is on screen."""
        row = buffer.cursor_position.row
        num_rows = max(1, num_rows)
        if row < self.top_row:
            self.top_row = row
        elif row >= self.top_row + num_rows:
            self.top_row = row - num_rows + 1
        # Don't leave a gap below the last line after the buffer shrinks
        self.top_row = max(0, min(self.top_row, max(0, buffer.line_count - num_rows)))

    def render(self, buffer: TextBuffer, status: Optional[str] = None):
        """Draw one frame and leave the terminal cursor at the edit position."""
        term = self.terminal
        num_rows = term.height
        width = max(0, term.width)
        self.scroll_to_cursor(buffer, num_rows)
        cursor = buffer.cursor_position

        term.clear_screen()
        visible = buffer.lines[self.top_row:self.top_row + num_rows]
        for y, line in enumerate(visible):
            term.move_cursor_to(0, y)
            if self.top_row + y == cursor.row:
                self._draw_highlighted(line, width)
            else:
                term.write_styled(line[:width])

        if status:
            term.move_cursor_to(0, num_rows)
            term.write_styled(status[:max(0, term.width - 1)])

        term.move_cursor_to(cursor.column, cursor.row - self.top_row)
        term.show_cursor()
        term.flush()

    def _draw_highlighted(self, line: str, width: int):
        spans = highlight_line(line)
        shown = spans_to_text(spans)[:width]
        start = 0
        for span in spans:
            if start >= len(shown):
                break
            if start:
                self.terminal.write_styled(' ')
            color = self.keyword_color if span.is_keyword else None
            self.terminal.write_styled(shown[start:start + len(span.text)], color)
            start += len(span.text) + 1
