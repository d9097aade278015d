import logging
from dataclasses import dataclass
from typing import Optional

from .errors import OutOfRangeEdit

logger = logging.getLogger(__name__)


@dataclass
class CursorPosition:
    row: int = 0
    column: int = 0


class TextBuffer:
    """Ordered list of lines plus the cursor that edits them.

    Lines never contain a newline. The buffer always holds at least one
    line so cursor arithmetic stays valid.
    """

    lines: list[str]
    cursor_position: CursorPosition

    def __init__(self, lines: Optional[list[str]] = None):
        self.lines = list(lines) if lines else [""]
        self.cursor_position = CursorPosition()

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_position.row]

    def replace_lines(self, lines: list[str]):
        """Swap in new content and reset the cursor to the top."""
        self.lines = list(lines) if lines else [""]
        self.cursor_position = CursorPosition()

    # --- Low-level primitives (addressed explicitly, never clamp) ---

    def _check_column(self, row: int, column: int):
        line = self.lines[row]
        if column < 0 or column > len(line):
            raise OutOfRangeEdit(row, column, len(line))

    def insert_char_at(self, row: int, column: int, char: str):
        self._check_column(row, column)
        line = self.lines[row]
        self.lines[row] = line[:column] + char + line[column:]

    def delete_char_at(self, row: int, column: int):
        """Remove the character at ``column`` (the one the cursor is after)."""
        line = self.lines[row]
        if column < 0 or column >= len(line):
            raise OutOfRangeEdit(row, column, len(line))
        self.lines[row] = line[:column] + line[column + 1:]

    def split_line_at(self, row: int, column: int):
        self._check_column(row, column)
        line = self.lines[row]
        self.lines[row:row + 1] = [line[:column], line[column:]]

    # --- Cursor-relative editing ---

    def clamp_column(self) -> bool:
        """Pull the cursor column back onto the current line.

        Vertical moves leave the column alone, so it can point past the end
        of a shorter line. Edits call this first.

        Returns:
            True if the column had to be corrected
        """
        length = len(self.current_line)
        if self.cursor_position.column > length:
            logger.debug(
                "Clamping column %d to %d on row %d",
                self.cursor_position.column, length, self.cursor_position.row,
            )
            self.cursor_position.column = length
            return True
        return False

    def insert_char(self, char: str):
        self.clamp_column()
        pos = self.cursor_position
        self.insert_char_at(pos.row, pos.column, char)
        pos.column += 1

    def backspace(self) -> bool:
        """Delete the character before the cursor.

        At column 0 this does nothing; lines are never joined.

        Returns:
            True if a character was removed
        """
        self.clamp_column()
        pos = self.cursor_position
        if pos.column == 0:
            return False
        self.delete_char_at(pos.row, pos.column - 1)
        pos.column -= 1
        return True

    def split_line(self):
        self.clamp_column()
        pos = self.cursor_position
        self.split_line_at(pos.row, pos.column)
        pos.row += 1
        pos.column = 0

    # --- Navigation ---

    def left_char(self):
        if self.cursor_position.column > 0:
            self.cursor_position.column -= 1

    def right_char(self):
        if self.cursor_position.column < len(self.current_line):
            self.cursor_position.column += 1

    def up_line(self):
        if self.cursor_position.row > 0:
            self.cursor_position.row -= 1

    def down_line(self):
        if self.cursor_position.row < len(self.lines) - 1:
            self.cursor_position.row += 1
