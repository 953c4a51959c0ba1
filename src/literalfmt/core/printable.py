"""Default printability oracle for code points at or above U+007F."""

import unicodedata
from collections.abc import Callable

PrintablePredicate = Callable[[int], bool]

_HIDDEN_CATEGORIES = frozenset({"Cc", "Cf", "Co", "Cs", "Cn"})
_SPACE_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})
# Java does not treat no-break spaces as whitespace.
_NO_BREAK_SPACES = frozenset({0x00A0, 0x2007, 0x202F})


def _is_iso_control(code_point: int) -> bool:
    return code_point <= 0x1F or 0x7F <= code_point <= 0x9F


def _is_whitespace(code_point: int) -> bool:
    if code_point in (0x09, 0x0A, 0x0B, 0x0C, 0x0D) or (
        0x1C <= code_point <= 0x1F
    ):
        return True
    if code_point in _NO_BREAK_SPACES:
        return False
    return unicodedata.category(chr(code_point)) in _SPACE_CATEGORIES


def is_printable_code_point(code_point: int) -> bool:
    """Return True when the code point renders as a visible glyph.

    Controls, format characters, private-use and unassigned code points,
    lone surrogates and every whitespace except U+0020 are not printable.
    """
    if _is_iso_control(code_point):
        return False
    if _is_whitespace(code_point):
        return code_point == 0x20
    return unicodedata.category(chr(code_point)) not in _HIDDEN_CATEGORIES
