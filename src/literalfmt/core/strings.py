"""Generic string predicates and line utilities."""

from collections.abc import Iterator

WHITES = " \t\r\n\f\b"
WORD_SEPARATORS = WHITES + "(\")<,>{}=+-*/|[]\\:;'.`~!#^&"


def iter_code_points(text: str) -> Iterator[int]:
    """Yield each Unicode scalar value of ``text`` in order."""
    for ch in text:
        yield ord(ch)


def is_empty(text: str | None) -> bool:
    return text is None or text == ""


def not_empty(text: str | None) -> bool:
    return text is not None and text != ""


def _java_trim(text: str) -> str:
    # Java's String.trim strips every char <= U+0020 from both ends.
    start = 0
    end = len(text)
    while start < end and text[start] <= " ":
        start += 1
    while end > start and text[end - 1] <= " ":
        end -= 1
    return text[start:end]


def not_blank(text: str | None) -> bool:
    if text is None:
        return False
    return _java_trim(text) != ""


def count_matches(text: str | None, sub: str | None) -> int:
    """Count non-overlapping occurrences of ``sub`` in ``text``."""
    if not text or not sub:
        return 0
    return text.count(sub)


def contains_char(text: str, ch: str) -> bool:
    return ch in text


def remove_char(text: str, ch: str) -> str:
    if ch not in text:
        return text
    return text.replace(ch, "")


def is_white(ch: str) -> bool:
    return len(ch) == 1 and ch in WHITES


def is_word_separator(ch: str) -> bool:
    return len(ch) == 1 and ch in WORD_SEPARATORS


def remove_suffix(text: str, suffix: str) -> str:
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def get_prefix(text: str, delim: str) -> str | None:
    """Return the text before the first ``delim``, or None when absent."""
    idx = text.find(delim)
    if idx == -1:
        return None
    return text[:idx]


def capitalize_first_char(text: str | None) -> str | None:
    if text is None or text == "":
        return text
    return text[0].upper() + text[1:]


def count_lines_by_pos(content: str, pos: int, start: int) -> int:
    """Return how many line feeds lie between ``start`` and ``pos``."""
    if start >= pos:
        return 0
    return content.count("\n", max(start, 0), pos)


def get_line(content: str, pos: int, end: int = -1) -> str:
    """Return the line(s) containing ``pos``, through ``end`` if given.

    The result starts at the line feed preceding ``pos`` (inclusive) or at
    the beginning of ``content``, and stops before the first line feed at or
    after ``end``.
    """
    if pos >= len(content):
        return ""
    if end != -1:
        if end > len(content):
            end = len(content) - 1
    else:
        end = pos + 1
    head = content.rfind("\n", 0, pos + 1)
    if head == -1:
        head = 0
    tail = content.find("\n", end)
    if tail == -1:
        tail = len(content)
    return content[head:tail]
