from enum import Enum

from pydantic import BaseModel, ConfigDict


class IntegerFormat(str, Enum):
    AUTO = "auto"
    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"

    @property
    def is_hexadecimal(self) -> bool:
        return self is IntegerFormat.HEXADECIMAL


class FormatterConfig(BaseModel):
    """Session settings shared by every formatting call.

    ``escape_unicode`` forces ``\\uXXXX`` escapes for every code point at or
    above U+007F. ``integer_format`` selects decimal or hexadecimal digits;
    ``auto`` renders decimal and substitutes boundary constants such as
    ``Integer.MAX_VALUE``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    escape_unicode: bool = False
    integer_format: IntegerFormat = IntegerFormat.AUTO
