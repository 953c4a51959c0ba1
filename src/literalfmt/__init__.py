"""literalfmt: Java source literals for strings, chars and numbers."""

from literalfmt.core.int_widths import IntegerWidthError, cast_token
from literalfmt.core.printable import is_printable_code_point
from literalfmt.core.strings import (
    capitalize_first_char,
    contains_char,
    count_lines_by_pos,
    count_matches,
    get_line,
    get_prefix,
    is_empty,
    is_white,
    is_word_separator,
    not_blank,
    not_empty,
    remove_char,
    remove_suffix,
)
from literalfmt.escape import (
    escape_char,
    escape_identifier,
    escape_res_str_value,
    escape_res_value,
    escape_string,
    escape_xml,
    escape_xml_char,
)
from literalfmt.formatter import LiteralFormatter
from literalfmt.models import FormatterConfig, IntegerFormat
from literalfmt.numbers import (
    format_byte,
    format_double,
    format_float,
    format_int,
    format_integer,
    format_long,
    format_short,
)

__all__ = [
    "FormatterConfig",
    "IntegerFormat",
    "IntegerWidthError",
    "LiteralFormatter",
    "capitalize_first_char",
    "cast_token",
    "contains_char",
    "count_lines_by_pos",
    "count_matches",
    "escape_char",
    "escape_identifier",
    "escape_res_str_value",
    "escape_res_value",
    "escape_string",
    "escape_xml",
    "escape_xml_char",
    "format_byte",
    "format_double",
    "format_float",
    "format_int",
    "format_integer",
    "format_long",
    "format_short",
    "get_line",
    "get_prefix",
    "is_empty",
    "is_printable_code_point",
    "is_white",
    "is_word_separator",
    "not_blank",
    "not_empty",
    "remove_char",
    "remove_suffix",
]
