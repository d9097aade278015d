"""Main editor controller for rawedit."""

import errno
import logging
import os
from typing import Optional
from .terminal import TerminalInterface
from .model import TextBuffer
from .view import TerminalRenderer
from .keyboard import KeyboardHandler, KeyEvent
from .constants import EditorConstants
from .commands import CommandRegistry, Mode
from .errors import UserReportableError
from .persistence import load_lines, save_lines

logger = logging.getLogger(__name__)


class Editor:
    """Editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 keyword_color: str = EditorConstants.DEFAULT_KEYWORD_COLOR):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.renderer = TerminalRenderer(self.terminal, keyword_color=keyword_color)
        self.buffer = TextBuffer()
        self.command_registry = CommandRegistry()
        self.mode = Mode.NORMAL
        self.running = False
        # File handling
        self.filename: Optional[str] = None
        self.modified = False
        self.status_message: Optional[str] = None

    def run(self) -> int:
        """Run the main editor loop until quit.

        Returns:
            Process exit status
        """
        self.running = True
        with self.terminal.session():
            while self.running:
                self._draw()
                key_event = self.keyboard.get_key_event()
                if key_event:
                    self._handle_key_event(key_event)
        return 0

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.renderer.render(self.buffer, status=self.status_line())

    def status_line(self) -> str:
        """Compose the bottom status line."""
        parts = []
        if self.mode == Mode.COMMAND:
            parts.append(EditorConstants.COMMAND_MODE_INDICATOR)
        name = self.filename or EditorConstants.NO_NAME
        if self.modified:
            name += " " + EditorConstants.MODIFIED_MARKER
        parts.append(name)
        if self.status_message:
            parts.append(self.status_message)
        return " " + "  ".join(parts)

    def set_mode(self, mode: Mode):
        if mode != self.mode:
            logger.debug("Mode %s -> %s", self.mode.value, mode.value)
            self.mode = mode

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # Clear status message on any keypress
        self.status_message = None

        try:
            was_modified = self.command_registry.execute(self, key_event)
        except UserReportableError as e:
            self.status_message = str(e)
            return
        if was_modified:
            self.modified = True

    def load_file(self, filename: str):
        """Load a file into the editor.

        Args:
            filename: Path to file to load

        Raises:
            OSError: if the file cannot be read
        """
        lines = load_lines(filename)
        self.buffer.replace_lines(lines)
        self.filename = filename
        self.modified = False

    def save_file(self, filename: str) -> bool:
        """Save the buffer to a file, reporting failures on the status line.

        Args:
            filename: Path to save file to

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            save_lines(filename, self.buffer.lines)
        except PermissionError:
            logger.warning("Permission denied saving %s", filename)
            self.status_message = EditorConstants.PERMISSION_DENIED_MESSAGE.format(filename)
            return False
        except OSError as e:
            logger.warning("Could not save %s: %s", filename, e)
            if e.errno == errno.ENOSPC:  # No space left on device
                self.status_message = EditorConstants.NO_SPACE_MESSAGE
            else:
                self.status_message = EditorConstants.CANNOT_SAVE_MESSAGE.format(filename)
            return False

        self.filename = filename
        self.modified = False
        return True

    def handle_save(self):
        """Save to the associated file.

        Raises:
            UserReportableError: if the buffer has no file name
        """
        if not self.filename:
            raise UserReportableError(EditorConstants.NO_FILE_NAME_MESSAGE)
        if self.save_file(self.filename):
            self.status_message = EditorConstants.SAVED_MESSAGE.format(
                os.path.basename(self.filename))
