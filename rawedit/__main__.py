"""rawedit CLI entry point.

Allows running via `python -m rawedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .settings import get_settings
from .version import get_version_string

logger = logging.getLogger("rawedit")


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(settings) -> None:
    """Send log records to the log file; the screen belongs to the editor."""
    log_file = settings.log_file
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding='utf-8')
    except OSError:
        # Nowhere to write; keep records off the terminal
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)


def run_keyboard_test() -> None:
    """Print parsed key events until ESC, using the editor's input stack."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyCode

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    kb = KeyboardHandler(term)
    term.enable_raw_mode()
    try:
        while True:
            ev = kb.get_key_event()
            if not ev:
                continue
            if ev.code == KeyCode.ESCAPE:
                print("Exiting keyboard test.")
                break
            parts = [f"code={ev.code.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            if ev.char:
                parts.append(f"char='{_escape_bytes(ev.char)}'")
            flags = [name for name in ('ctrl', 'alt', 'shift') if getattr(ev, name)]
            if flags:
                parts.append(f"flags={'+'.join(flags)}")
            print(' '.join(parts), end='\r\n', flush=True)
    finally:
        term.disable_raw_mode()


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing to support keyboard test mode, version, and optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return 0

    settings = get_settings()
    configure_logging(settings)
    filename = args[0] if args else settings.default_file

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    editor = Editor(keyword_color=settings.keyword_color)
    try:
        editor.load_file(filename)
    except OSError as e:
        logger.error("Could not load %s: %s", filename, e)
        print(f"rawedit: cannot open {filename}: {e.strerror or e}", file=sys.stderr)
        return 1
    return editor.run()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
