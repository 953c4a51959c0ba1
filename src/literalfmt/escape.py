"""Escaping of text for Java literals, identifiers, XML and resources."""

from literalfmt.core.printable import (
    PrintablePredicate,
    is_printable_code_point,
)
from literalfmt.core.strings import iter_code_points

# Checked before any printability rule. A bare single quote is legal inside
# a string literal, so it maps to itself.
SPECIAL_ESCAPES: dict[int, str] = {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("'"): "'",
    ord('"'): '\\"',
    ord("\\"): "\\\\",
}

WHITESPACE_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

XML_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
    "\\": "\\\\",
}

RES_STRING_QUOTES: dict[str, str] = {
    '"': '\\"',
    "'": "\\'",
}

# None drops the character.
IDENTIFIER_SUBSTITUTIONS: dict[str, str | None] = {
    ".": "_",
    "/": "_",
    ";": "_",
    "$": "_",
    " ": "_",
    ",": "_",
    "<": "_",
    "[": "A",
    "]": None,
    ">": None,
    "?": None,
    "*": None,
}

_ASCII_PRINTABLE_END = 0x7F
_CONTROL_END = 0x20
_BMP_END = 0x10000
_CHAR_MAX = 0xFFFF


def _unicode_escape(code_point: int) -> str:
    if code_point < _BMP_END:
        return f"\\u{code_point:04x}"
    # Java source escapes are UTF-16 units.
    offset = code_point - _BMP_END
    high = 0xD800 + (offset >> 10)
    low = 0xDC00 + (offset & 0x3FF)
    return f"\\u{high:04x}\\u{low:04x}"


def _needs_unicode_escape(
    code_point: int, escape_unicode: bool, is_printable: PrintablePredicate
) -> bool:
    if code_point < _CONTROL_END:
        return True
    if code_point < _ASCII_PRINTABLE_END:
        return False
    if escape_unicode:
        return True
    return not is_printable(code_point)


def escape_string(
    text: str,
    *,
    escape_unicode: bool = False,
    is_printable: PrintablePredicate = is_printable_code_point,
) -> str:
    """Render ``text`` as a double-quoted Java string literal."""
    if not text:
        return '""'
    parts = ['"']
    for code_point in iter_code_points(text):
        special = SPECIAL_ESCAPES.get(code_point)
        if special is not None:
            parts.append(special)
        elif _needs_unicode_escape(code_point, escape_unicode, is_printable):
            parts.append(_unicode_escape(code_point))
        else:
            parts.append(chr(code_point))
    parts.append('"')
    return "".join(parts)


def escape_char(
    ch: str | int,
    explicit_cast: bool = False,
    *,
    escape_unicode: bool = False,
    is_printable: PrintablePredicate = is_printable_code_point,
) -> str:
    """Represent a single char the best way possible.

    Chars without a readable form fall back to their integer code, with a
    ``(char)`` cast when the context needs the char type explicitly.
    Code points outside the BMP raise ``ValueError``.
    """
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        code_point = ord(ch)
    else:
        code_point = int(ch)
    if not 0 <= code_point <= _CHAR_MAX:
        raise ValueError(
            f"Code point {code_point:#x} does not fit a single UTF-16 char"
        )
    if code_point == ord("'"):
        return "'\\''"
    special = SPECIAL_ESCAPES.get(code_point)
    if special is not None:
        return f"'{special}'"
    if code_point >= _ASCII_PRINTABLE_END and escape_unicode:
        return f"'\\u{code_point:04x}'"
    if is_printable(code_point):
        return f"'{chr(code_point)}'"
    code = str(code_point)
    return f"(char) {code}" if explicit_cast else code


def escape_identifier(text: str) -> str:
    """Turn an arbitrary symbol name into a legal identifier token."""
    parts: list[str] = []
    for ch in text:
        if ch in IDENTIFIER_SUBSTITUTIONS:
            replacement = IDENTIFIER_SUBSTITUTIONS[ch]
            if replacement is not None:
                parts.append(replacement)
        else:
            parts.append(ch)
    return "".join(parts)


def escape_xml_char(ch: str) -> str | None:
    """Return the XML escape for ``ch``, or None when it needs none.

    Control characters become a backslash followed by the decimal code.
    """
    if ord(ch) <= 0x1F:
        return f"\\{ord(ch)}"
    return XML_ENTITIES.get(ch)


def escape_xml(text: str) -> str:
    parts: list[str] = []
    for ch in text:
        replacement = escape_xml_char(ch)
        parts.append(ch if replacement is None else replacement)
    return "".join(parts)


def _escape_resource(text: str, *, quote_strings: bool) -> str:
    parts: list[str] = []
    for ch in text:
        replacement = None
        if quote_strings:
            replacement = RES_STRING_QUOTES.get(ch)
        if replacement is None:
            replacement = WHITESPACE_ESCAPES.get(ch)
        if replacement is None:
            replacement = escape_xml_char(ch)
        parts.append(ch if replacement is None else replacement)
    return "".join(parts)


def escape_res_value(text: str) -> str:
    """Escape a resource attribute value (whitespace, then XML)."""
    return _escape_resource(text, quote_strings=False)


def escape_res_str_value(text: str) -> str:
    """Escape a string resource value; quotes get backslash escapes."""
    return _escape_resource(text, quote_strings=True)
