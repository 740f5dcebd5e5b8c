"""notesafe: best-effort XSS filtering for user-supplied text."""

from notesafe.core import (
    DANGEROUS_PATTERNS,
    HTML_ENTITIES,
    INVALID_INPUT_MESSAGE,
    SanitizationError,
    ValidationError,
    escape_html,
    is_input_safe,
    remove_dangerous_patterns,
    sanitize_input,
    sanitize_note_input,
    strip_html_tags,
)

__version__ = "1.0.0"
