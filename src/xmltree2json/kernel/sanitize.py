"""JSON string literal sanitizer.

Turns arbitrary text into a quoted JSON string that is also safe to embed in
HTML and to evaluate as JavaScript source.

Rules:
- Control characters, backslash and double quote are escaped
- <, > and & are escaped as \\u00XX so the output cannot close a <script> block
- U+2028 and U+2029 are escaped (legal JSON, but JavaScript line terminators)
- Invalid encoding units become \\ufffd
- Everything else is copied verbatim (no ASCII-only output)
"""

import re
from typing import Union

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Lone surrogates are what invalid UTF-8 bytes decode to under surrogateescape.
_ESCAPE_RE = re.compile('[\\x00-\\x1f\\\\"<>&\\u2028\\u2029\\ud800-\\udfff]')

_REPLACEMENT = "\\ufffd"


def _escape(match: "re.Match[str]") -> str:
    ch = match.group(0)
    short = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    code = ord(ch)
    if 0xD800 <= code <= 0xDFFF:
        return _REPLACEMENT
    return "\\u%04x" % code


def sanitize_string(s: Union[str, bytes]) -> str:
    """
    Encode a string as a JSON string literal, including the surrounding quotes.

    Never fails. For bytes input, every byte that is not part of a valid
    UTF-8 sequence is replaced by its own \\ufffd escape.

    Args:
        s: Text or raw UTF-8 bytes

    Returns:
        JSON string literal
    """
    if isinstance(s, (bytes, bytearray)):
        s = bytes(s).decode("utf-8", "surrogateescape")
    return '"' + _ESCAPE_RE.sub(_escape, s) + '"'
