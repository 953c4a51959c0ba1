"""JSONL batch rendering of literal requests."""

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from literalfmt.core.int_widths import INT64_MAX, INT64_MIN
from literalfmt.escape import (
    escape_identifier,
    escape_res_str_value,
    escape_res_value,
    escape_xml,
)
from literalfmt.formatter import LiteralFormatter

logger = logging.getLogger(__name__)


class LiteralKind(str, Enum):
    STRING = "string"
    CHAR = "char"
    IDENTIFIER = "identifier"
    XML = "xml"
    RES_VALUE = "res_value"
    RES_STR_VALUE = "res_str_value"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"


_TEXT_KINDS = frozenset(
    {
        LiteralKind.STRING,
        LiteralKind.CHAR,
        LiteralKind.IDENTIFIER,
        LiteralKind.XML,
        LiteralKind.RES_VALUE,
        LiteralKind.RES_STR_VALUE,
    }
)
_INTEGER_WIDTHS: dict[LiteralKind, int] = {
    LiteralKind.BYTE: 1,
    LiteralKind.SHORT: 2,
    LiteralKind.INT: 4,
    LiteralKind.LONG: 8,
}
_NON_FINITE_TOKENS: dict[str, float] = {
    "nan": float("nan"),
    "inf": float("inf"),
    "+inf": float("inf"),
    "-inf": float("-inf"),
}


class LiteralRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: LiteralKind
    value: str | int | float
    cast: bool = False

    @model_validator(mode="before")
    @classmethod
    def reject_bool_value(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("value"), bool):
            raise ValueError("value: bool is not allowed")
        return data

    @model_validator(mode="after")
    def validate_value(self) -> "LiteralRequest":
        if self.kind in _TEXT_KINDS:
            if not isinstance(self.value, str):
                raise ValueError(
                    f"kind '{self.kind.value}' requires a string value"
                )
            if self.kind is LiteralKind.CHAR and len(self.value) != 1:
                raise ValueError("kind 'char' requires exactly one character")
            if self.kind is LiteralKind.CHAR and ord(self.value) > 0xFFFF:
                raise ValueError("kind 'char' requires a BMP character")
        elif self.kind in _INTEGER_WIDTHS:
            if not isinstance(self.value, int):
                raise ValueError(
                    f"kind '{self.kind.value}' requires an integer value"
                )
            if not (INT64_MIN <= self.value <= INT64_MAX):
                raise ValueError(
                    f"Value {self.value} is out of signed 64-bit range"
                )
        elif isinstance(self.value, str):
            if self.value.strip().lower() not in _NON_FINITE_TOKENS:
                raise ValueError(
                    f"kind '{self.kind.value}' requires a number or one of "
                    "nan/inf/-inf"
                )
        return self

    def float_value(self) -> float:
        if isinstance(self.value, str):
            return _NON_FINITE_TOKENS[self.value.strip().lower()]
        return float(self.value)


def render_request(
    formatter: LiteralFormatter, request: LiteralRequest
) -> str:
    """Render one request with the session's settings."""
    kind = request.kind
    value = request.value
    if kind is LiteralKind.STRING:
        return formatter.string_literal(str(value))
    if kind is LiteralKind.CHAR:
        return formatter.char_literal(str(value), request.cast)
    if kind is LiteralKind.IDENTIFIER:
        return escape_identifier(str(value))
    if kind is LiteralKind.XML:
        return escape_xml(str(value))
    if kind is LiteralKind.RES_VALUE:
        return escape_res_value(str(value))
    if kind is LiteralKind.RES_STR_VALUE:
        return escape_res_str_value(str(value))
    if kind in _INTEGER_WIDTHS:
        return formatter.format_integer(
            int(value), _INTEGER_WIDTHS[kind], request.cast
        )
    if kind is LiteralKind.FLOAT:
        return formatter.format_float(request.float_value())
    return formatter.format_double(request.float_value())


def render_rows(
    formatter: LiteralFormatter, requests: Iterable[LiteralRequest]
) -> Iterator[dict[str, Any]]:
    count = 0
    for request in requests:
        literal = render_request(formatter, request)
        logger.debug("rendered %s literal: %s", request.kind.value, literal)
        count += 1
        yield {**request.model_dump(mode="json"), "literal": literal}
    logger.debug("rendered %d literal rows", count)
