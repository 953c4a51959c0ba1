"""Java numeric literals for fixed-width integers and IEEE floats."""

import math

from literalfmt.core.floats import (
    DOUBLE_MAX,
    DOUBLE_MIN,
    DOUBLE_MIN_NORMAL,
    FLOAT_MAX,
    FLOAT_MIN,
    FLOAT_MIN_NORMAL,
    java_double_text,
    java_float_text,
    to_float32,
)
from literalfmt.core.int_widths import (
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    cast_token,
    check_int64,
    check_width,
    fits_int32,
    hex_digits_i64,
)
from literalfmt.models import IntegerFormat

# Width -> ((value, name), ...) substituted in AUTO mode.
BOUNDARY_NAMES: dict[int, tuple[tuple[int, str], ...]] = {
    1: (),
    2: ((INT16_MAX, "Short.MAX_VALUE"), (INT16_MIN, "Short.MIN_VALUE")),
    4: ((INT32_MAX, "Integer.MAX_VALUE"), (INT32_MIN, "Integer.MIN_VALUE")),
    8: ((INT64_MAX, "Long.MAX_VALUE"), (INT64_MIN, "Long.MIN_VALUE")),
}

_DOUBLE_SPECIALS: tuple[tuple[float, str], ...] = (
    (-math.inf, "Double.NEGATIVE_INFINITY"),
    (math.inf, "Double.POSITIVE_INFINITY"),
    (DOUBLE_MIN, "Double.MIN_VALUE"),
    (DOUBLE_MAX, "Double.MAX_VALUE"),
    (DOUBLE_MIN_NORMAL, "Double.MIN_NORMAL"),
)

_FLOAT_SPECIALS: tuple[tuple[float, str], ...] = (
    (-math.inf, "Float.NEGATIVE_INFINITY"),
    (math.inf, "Float.POSITIVE_INFINITY"),
    (FLOAT_MIN, "Float.MIN_VALUE"),
    (FLOAT_MAX, "Float.MAX_VALUE"),
    (FLOAT_MIN_NORMAL, "Float.MIN_NORMAL"),
)


def boundary_name(value: int, width: int) -> str | None:
    for boundary, name in BOUNDARY_NAMES[check_width(width)]:
        if value == boundary:
            return name
    return None


def _format_number(
    value: int, width: int, cast: bool, integer_format: IntegerFormat
) -> str:
    if integer_format.is_hexadecimal:
        hex_str = hex_digits_i64(value)
        if value < 0:
            # Keep only the digits of the declared width. The unsigned
            # reading exceeds the signed max, so a cast is required.
            num_str = "0x" + hex_str[-width * 2 :]
            cast = True
        else:
            num_str = "0x" + hex_str
    else:
        num_str = str(value)
    if width == 8 and not fits_int32(value):
        # Avoids javac "integer number too large".
        cast = True
    if cast:
        if width == 8:
            return num_str + "L"
        return cast_token(width) + num_str
    return num_str


def format_integer(
    value: int,
    width: int,
    cast: bool = False,
    *,
    integer_format: IntegerFormat = IntegerFormat.AUTO,
) -> str:
    """Render a signed integer of ``width`` bytes as a Java literal.

    In AUTO mode min/max values of short, int and long are rendered with
    their symbolic names. Negative values in hexadecimal mode are truncated
    to ``width * 2`` digits and always cast.
    """
    check_width(width)
    ivalue = check_int64(value)
    if integer_format is IntegerFormat.AUTO:
        name = boundary_name(ivalue, width)
        if name is not None:
            return name
    return _format_number(ivalue, width, cast, integer_format)


def format_byte(
    value: int,
    cast: bool = False,
    *,
    integer_format: IntegerFormat = IntegerFormat.AUTO,
) -> str:
    return format_integer(value, 1, cast, integer_format=integer_format)


def format_short(
    value: int,
    cast: bool = False,
    *,
    integer_format: IntegerFormat = IntegerFormat.AUTO,
) -> str:
    return format_integer(value, 2, cast, integer_format=integer_format)


def format_int(
    value: int,
    cast: bool = False,
    *,
    integer_format: IntegerFormat = IntegerFormat.AUTO,
) -> str:
    return format_integer(value, 4, cast, integer_format=integer_format)


def format_long(
    value: int,
    cast: bool = False,
    *,
    integer_format: IntegerFormat = IntegerFormat.AUTO,
) -> str:
    return format_integer(value, 8, cast, integer_format=integer_format)


def _special_name(
    value: float, nan_name: str, specials: tuple[tuple[float, str], ...]
) -> str | None:
    # NaN first: it never compares equal to anything.
    if math.isnan(value):
        return nan_name
    for special, name in specials:
        if value == special:
            return name
    return None


def format_double(value: float) -> str:
    name = _special_name(value, "Double.NaN", _DOUBLE_SPECIALS)
    if name is not None:
        return name
    return java_double_text(value) + "d"


def format_float(value: float) -> str:
    """Render ``value`` rounded to single precision as a float literal."""
    fvalue = to_float32(value)
    name = _special_name(fvalue, "Float.NaN", _FLOAT_SPECIALS)
    if name is not None:
        return name
    return java_float_text(fvalue) + "f"
