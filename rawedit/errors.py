"""Exception types raised by the editor core.

File I/O failures are reported with the builtin ``OSError``.
"""


class EditorError(Exception):
    """Base class for editor errors."""


class UserReportableError(EditorError):
    """A non-fatal problem shown to the user on the status line."""


class OutOfRangeEdit(EditorError, IndexError):
    """An edit was addressed at a position outside the buffer."""

    def __init__(self, row: int, column: int, line_length: int):
        super().__init__(
            f"column {column} is past the end of line {row} (length {line_length})"
        )
        self.row = row
        self.column = column
        self.line_length = line_length
