"""Command pattern implementation of the two-mode key dispatcher."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyCode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Editor input modes."""
    NORMAL = "normal"
    COMMAND = "command"


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the buffer."""
        self._move(editor)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, editor):
        editor.buffer.left_char()


class RightCharCommand(MovementCommand):
    def _move(self, editor):
        editor.buffer.right_char()


class UpLineCommand(MovementCommand):
    def _move(self, editor):
        editor.buffer.up_line()


class DownLineCommand(MovementCommand):
    def _move(self, editor):
        editor.buffer.down_line()


class InsertCharCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.buffer.insert_char(key_event.char)
        return True


class BackspaceCommand(EditorCommand):
    def execute(self, editor, key_event):
        return editor.buffer.backspace()


class SplitLineCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.buffer.split_line()
        return True


class SwitchModeCommand(EditorCommand):
    """Change mode without touching the buffer."""

    def __init__(self, target: Mode):
        self.target = target

    def execute(self, editor, key_event):
        editor.set_mode(self.target)
        return False


class WriteCommand(EditorCommand):
    """':w' - save, then go back to Normal mode."""

    def execute(self, editor, key_event):
        # Leave Command mode even if the save is refused
        editor.set_mode(Mode.NORMAL)
        editor.handle_save()
        return False


class SaveCommand(EditorCommand):
    """Ctrl-S - save without changing mode."""

    def execute(self, editor, key_event):
        editor.handle_save()
        return False


class QuitCommand(EditorCommand):
    """Ctrl-C - stop the run loop. Unsaved changes are dropped."""

    def execute(self, editor, key_event):
        logger.info("Quit requested (modified=%s)", editor.modified)
        editor.running = False
        return False


# Registry keys are (code, char, ctrl). char is '' for keys other than CHAR.
KeySpec = Tuple[KeyCode, str, bool]


class CommandRegistry:
    """Transition table mapping (mode, key) to commands.

    Global bindings are looked up before the per-mode table on every key.
    In Normal mode a printable character with no binding is inserted; in
    Command mode unbound keys are ignored.
    """

    def __init__(self):
        self._global: Dict[KeySpec, EditorCommand] = {}
        self._commands: Dict[Tuple[Mode, KeySpec], EditorCommand] = {}
        self._insert = InsertCharCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Global shortcuts
        self.register_global((KeyCode.CHAR, 'c', True), QuitCommand())
        self.register_global((KeyCode.CHAR, 's', True), SaveCommand())

        # Normal mode
        self.register(Mode.NORMAL, (KeyCode.CHAR, ':', False), SwitchModeCommand(Mode.COMMAND))
        self.register(Mode.NORMAL, (KeyCode.BACKSPACE, '', False), BackspaceCommand())
        self.register(Mode.NORMAL, (KeyCode.ENTER, '', False), SplitLineCommand())
        self.register(Mode.NORMAL, (KeyCode.LEFT, '', False), LeftCharCommand())
        self.register(Mode.NORMAL, (KeyCode.RIGHT, '', False), RightCharCommand())
        self.register(Mode.NORMAL, (KeyCode.UP, '', False), UpLineCommand())
        self.register(Mode.NORMAL, (KeyCode.DOWN, '', False), DownLineCommand())

        # Command mode: single-key commands
        self.register(Mode.COMMAND, (KeyCode.CHAR, 'w', False), WriteCommand())
        self.register(Mode.COMMAND, (KeyCode.CHAR, 'q', False), SwitchModeCommand(Mode.NORMAL))
        self.register(Mode.COMMAND, (KeyCode.ESCAPE, '', False), SwitchModeCommand(Mode.NORMAL))

    def register(self, mode: Mode, key: KeySpec, command: EditorCommand):
        """Register a command for a key in one mode."""
        self._commands[(mode, key)] = command

    def register_global(self, key: KeySpec, command: EditorCommand):
        """Register a command checked before any mode table."""
        self._global[key] = command

    @staticmethod
    def key_spec(key_event: 'KeyEvent') -> KeySpec:
        char = key_event.char if key_event.code == KeyCode.CHAR else ''
        return (key_event.code, char, key_event.ctrl)

    def get_command(self, mode: Mode, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Get the command a key triggers in a mode, or None if it is ignored."""
        if key_event.alt:
            return None
        spec = self.key_spec(key_event)
        command = self._global.get(spec) or self._commands.get((mode, spec))
        if command is None and mode == Mode.NORMAL and key_event.is_printable:
            command = self._insert
        return command

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the buffer was modified
        """
        command = self.get_command(editor.mode, key_event)
        if command:
            return command.execute(editor, key_event)
        return False
