"""Constants and configuration for the rawedit editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Highlighting
    KEYWORDS = frozenset({
        "fn", "let", "mut", "match", "if", "else",
        "for", "loop", "while", "return",
    })
    DEFAULT_KEYWORD_COLOR = "yellow"

    # Startup
    DEFAULT_FILE = "example.rs"

    # Status line
    COMMAND_MODE_INDICATOR = "-- COMMAND --"
    MODIFIED_MARKER = "[+]"
    NO_NAME = "[No Name]"

    # File operations
    ENCODING = "utf-8"

    # Status messages
    NO_FILE_NAME_MESSAGE = "No file name specified."
    SAVED_MESSAGE = "Saved to {}"
    PERMISSION_DENIED_MESSAGE = "Error: Permission denied saving {}"
    NO_SPACE_MESSAGE = "Error: No space left on device"
    CANNOT_SAVE_MESSAGE = "Error: Cannot save to {}"
