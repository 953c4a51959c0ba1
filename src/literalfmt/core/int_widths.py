"""Helpers for Java-style signed fixed-width integers."""

INT8_MIN = -(1 << 7)
INT8_MAX = (1 << 7) - 1
INT16_MIN = -(1 << 15)
INT16_MAX = (1 << 15) - 1
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT64_MASK = (1 << 64) - 1

SUPPORTED_WIDTHS = (1, 2, 4, 8)

_CAST_TOKENS: dict[int, str] = {
    1: "(byte) ",
    2: "(short) ",
    4: "(int) ",
    8: "(long) ",
}


class IntegerWidthError(ValueError):
    """Raised when an integer width outside {1, 2, 4, 8} bytes is used."""


def check_width(width: int) -> int:
    if isinstance(width, bool) or width not in _CAST_TOKENS:
        raise IntegerWidthError(f"Unexpected number type length: {width}")
    return width


def check_int64(value: int) -> int:
    ivalue = int(value)
    if not (INT64_MIN <= ivalue <= INT64_MAX):
        raise ValueError(
            f"Value {ivalue} is out of signed 64-bit range for Java long"
        )
    return ivalue


def cast_token(width: int) -> str:
    """Return the cast prefix forcing a literal to the given byte width."""
    return _CAST_TOKENS[check_width(width)]


def fits_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def hex_digits_i64(value: int) -> str:
    """Lowercase hex of the 64-bit two's-complement pattern, no padding."""
    return format(check_int64(value) & INT64_MASK, "x")
