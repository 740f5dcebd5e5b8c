from notesafe.core.errors import INVALID_INPUT_MESSAGE, SanitizationError, ValidationError
from notesafe.core.sanitize import (
    DANGEROUS_PATTERNS,
    HTML_ENTITIES,
    escape_html,
    is_input_safe,
    remove_dangerous_patterns,
    sanitize_input,
    sanitize_note_input,
    strip_html_tags,
)
