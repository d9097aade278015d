"""Reading and writing the line buffer to disk.

Both functions raise ``OSError`` on failure and leave handling to the caller.
"""

import errno
import logging
import os
import stat
import tempfile

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def load_lines(filename: str) -> list[str]:
    """Read a file into a list of lines without their line endings.

    A final newline does not produce an extra empty line, and an empty file
    yields a single empty line.

    Args:
        filename: Path to file to load

    Returns:
        List of lines, never empty

    Raises:
        OSError: if the file is missing, unreadable, or not valid UTF-8
    """
    lines = []
    try:
        # newline='\n' splits on LF only and leaves CR untouched
        with open(filename, 'r', encoding=EditorConstants.ENCODING, newline='\n') as f:
            for line in f:
                if line.endswith('\n'):
                    line = line[:-1]
                    if line.endswith('\r'):
                        line = line[:-1]
                lines.append(line)
    except UnicodeDecodeError as e:
        raise OSError(errno.EILSEQ, f"not valid UTF-8: {e.reason}", filename) from e
    logger.info("Loaded %d lines from %s", len(lines), filename)
    return lines or [""]


def save_lines(filename: str, lines: list[str]):
    """Write lines to a file atomically, each followed by one newline.

    The content goes to a temporary file in the target's directory and is
    renamed over the target, so a failed save never truncates the old file.

    Args:
        filename: Path to save file to
        lines: Buffer lines, without newlines

    Raises:
        OSError: on any write failure
    """
    dir_name = os.path.dirname(filename) or '.'
    suffix = os.path.splitext(filename)[1]
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.ENCODING,
                                         dir=dir_name, suffix=suffix,
                                         newline='', delete=False) as temp_file:
            temp_filename = temp_file.name
            for line in lines:
                temp_file.write(line + '\n')
            temp_file.flush()
            os.fsync(temp_file.fileno())

        # NamedTemporaryFile is created 0600; keep the target's mode instead
        try:
            mode = stat.S_IMODE(os.stat(filename).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            mode = 0o666 & ~umask
        os.chmod(temp_filename, mode)

        os.replace(temp_filename, filename)
        temp_filename = None
    finally:
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                logger.warning("Could not remove temporary file %s", temp_filename)
    logger.info("Saved %d lines to %s", len(lines), filename)
