#!/usr/bin/env python3
"""rawedit - A minimal terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Type to insert text
    Arrow keys: Navigate cursor
    Backspace: Delete character before the cursor
    Enter: Split line
    ':' then 'w': Save
    ':' then 'q' or ESC: Back to editing
    Ctrl-S: Save file
    Ctrl-C: Quit (does not save)
"""

import sys
from rawedit.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
