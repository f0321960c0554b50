"""String escaping for generated string literals.

Every value that ends up inside a string literal of a generated snippet goes
through ``sanitize()``. The context names the lexical situation:

- "raw": a complete double-quoted literal with JSON escapes (quotes included)
- "urlencoded": a percent-encoded form value
- "formdata", "file", "header": content of a single-quoted literal
- "c": content of a C double-quoted literal, control characters as octal escapes
- "swift": content of a Swift double-quoted literal, control characters as ``\\u{..}``
- anything else: content of a double-quoted literal
"""

from __future__ import annotations

import json
from collections.abc import Callable
from urllib.parse import quote

RAW = "raw"
URLENCODED = "urlencoded"
FORMDATA = "formdata"
FILE = "file"
HEADER = "header"
URL = "url"
C = "c"
SWIFT = "swift"

_SINGLE_QUOTED = frozenset({FORMDATA, FILE, HEADER})
_URLENCODED_SAFE = "@*_-./"
_DOUBLE_QUOTED_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def sanitize(value: object, context: object = None, trim: object = False) -> str:
    """Escape a value for embedding in a generated string literal.

    Args:
        value: The text to escape. Anything that is not a str yields ""
        context: Lexical context of the literal (see module docstring)
        trim: Strip surrounding whitespace before escaping (only when exactly True)

    Returns:
        The escaped text
    """
    if not isinstance(value, str):
        return ""
    text = value.strip() if trim is True else value
    if context == RAW:
        return json.dumps(text, ensure_ascii=False)
    if context == URLENCODED:
        return quote(text, safe=_URLENCODED_SAFE)
    if context == C:
        return "".join(_escape_char(char, lambda code: f"\\{code:03o}") for char in text)
    if context == SWIFT:
        return "".join(_escape_char(char, lambda code: f"\\u{{{code:x}}}") for char in text)
    if isinstance(context, str) and context in _SINGLE_QUOTED:
        return text.replace("\\", "\\\\").replace("'", "\\'")
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _escape_char(char: str, control: Callable[[int], str]) -> str:
    escaped = _DOUBLE_QUOTED_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    code = ord(char)
    if code < 0x20 or code == 0x7F:
        return control(code)
    return char
