"""Input sanitization utilities.

Best-effort XSS filtering for user-supplied text: known-dangerous constructs
are removed, then the remaining text is HTML-entity escaped. This is a
heuristic filter, not an HTML parser.

Pipeline used by sanitize_input():
    trim -> remove dangerous patterns -> escape entities
         -> strip remaining tags -> clamp length
"""

import re
from types import MappingProxyType
from typing import Any, Optional

from notesafe.config import settings
from notesafe.core.errors import ValidationError

# Characters replaced by escape_html()
HTML_ENTITIES = MappingProxyType({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
})

# ASCII: \w, \b and case folding behave like browser regexes
_FLAGS = re.IGNORECASE | re.ASCII

# Browser whitespace (regex \s and String.prototype.trim), which is
# Unicode-aware and differs from both ASCII \s and str.isspace()
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = "[" + re.escape(JS_WHITESPACE) + "]"


def _tag_block(tag: str) -> re.Pattern:
    """Match an opening <tag ...> through the first matching </tag>."""
    return re.compile(rf"<{tag}\b[^<]*(?:(?!</{tag}>)<[^<]*)*</{tag}>", _FLAGS)


# Applied in order, each on the output of the previous one
DANGEROUS_PATTERNS = (
    _tag_block("script"),
    _tag_block("iframe"),
    _tag_block("object"),
    _tag_block("embed"),
    _tag_block("link"),
    _tag_block("meta"),
    _tag_block("style"),
    re.compile(r"javascript:", _FLAGS),
    re.compile(r"vbscript:", _FLAGS),
    re.compile(r"data:", _FLAGS),
    re.compile(rf"on\w+{_WS}*=", _FLAGS),  # onclick=, onload =, ...
)

_ESCAPE_RE = re.compile("[" + re.escape("".join(HTML_ENTITIES)) + "]")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_UNSAFE_SCHEME_RE = re.compile(r"javascript:|data:", _FLAGS)


def _is_empty(value: Any) -> bool:
    return not value or not isinstance(value, str)


def escape_html(text: str) -> str:
    """Escape the characters in HTML_ENTITIES in a single pass."""
    return _ESCAPE_RE.sub(lambda m: HTML_ENTITIES[m.group(0)], text)


def remove_dangerous_patterns(text: str) -> str:
    """Remove every match of DANGEROUS_PATTERNS, one pattern at a time.

    There is no re-scan afterwards, so nested payloads such as
    "javajavascript:script:" can leave a match behind.
    """
    for pattern in DANGEROUS_PATTERNS:
        text = pattern.sub("", text)
    return text


def strip_html_tags(text: str) -> str:
    """Remove anything shaped like an HTML tag."""
    return _HTML_TAG_RE.sub("", text)


def sanitize_input(value: Any, max_length: Optional[int] = None) -> str:
    """Sanitize user input for safe storage and display.

    None, non-string and empty values give "". The result is entity-escaped
    and at most ``max_length`` characters (settings.MAX_INPUT_LENGTH when
    not given). Never raises.
    """
    if _is_empty(value):
        return ""
    if max_length is None:
        max_length = settings.MAX_INPUT_LENGTH

    sanitized = value.strip(JS_WHITESPACE)
    sanitized = remove_dangerous_patterns(sanitized)
    sanitized = escape_html(sanitized)
    # Tags are already escaped at this point; kept as a last catch-all
    sanitized = strip_html_tags(sanitized)

    if len(sanitized) > max_length:
        sanitized = sanitized[:max(max_length, 0)]
    return sanitized


def is_input_safe(value: Any) -> bool:
    """Check raw input for scripts, tags and dangerous URL schemes.

    Empty or non-string input counts as safe.
    """
    if _is_empty(value):
        return True

    for pattern in DANGEROUS_PATTERNS:
        if pattern.search(value):
            return False

    if _HTML_TAG_RE.search(value):
        return False

    if _UNSAFE_SCHEME_RE.search(value):
        return False

    return True


def sanitize_note_input(value: Any, max_length: Optional[int] = None) -> str:
    """Sanitize note text and reject it if the result still looks unsafe.

    Raises ValidationError when is_input_safe() fails on the sanitized text.
    """
    sanitized = sanitize_input(value, max_length=max_length)

    if not is_input_safe(sanitized):
        raise ValidationError()

    return sanitized
