"""Formatter session binding one immutable config to every literal call."""

from literalfmt.core.printable import (
    PrintablePredicate,
    is_printable_code_point,
)
from literalfmt.escape import escape_char, escape_string
from literalfmt.models import FormatterConfig, IntegerFormat
from literalfmt.numbers import format_double, format_float, format_integer


class LiteralFormatter:
    """Render Java literals under a fixed :class:`FormatterConfig`.

    Build one per session and share it freely; it holds no mutable state.
    """

    __slots__ = ("_config", "_is_printable")

    def __init__(
        self,
        config: FormatterConfig | None = None,
        *,
        is_printable: PrintablePredicate = is_printable_code_point,
    ) -> None:
        self._config = config if config is not None else FormatterConfig()
        self._is_printable = is_printable

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def integer_format(self) -> IntegerFormat:
        return self._config.integer_format

    def string_literal(self, text: str) -> str:
        return escape_string(
            text,
            escape_unicode=self._config.escape_unicode,
            is_printable=self._is_printable,
        )

    def char_literal(self, ch: str | int, explicit_cast: bool = False) -> str:
        return escape_char(
            ch,
            explicit_cast,
            escape_unicode=self._config.escape_unicode,
            is_printable=self._is_printable,
        )

    def format_integer(
        self, value: int, width: int, cast: bool = False
    ) -> str:
        return format_integer(
            value, width, cast, integer_format=self.integer_format
        )

    def format_byte(self, value: int, cast: bool = False) -> str:
        return self.format_integer(value, 1, cast)

    def format_short(self, value: int, cast: bool = False) -> str:
        return self.format_integer(value, 2, cast)

    def format_int(self, value: int, cast: bool = False) -> str:
        return self.format_integer(value, 4, cast)

    def format_long(self, value: int, cast: bool = False) -> str:
        return self.format_integer(value, 8, cast)

    def format_double(self, value: float) -> str:
        return format_double(value)

    def format_float(self, value: float) -> str:
        return format_float(value)
