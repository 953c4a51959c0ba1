"""Java ``Double.toString`` / ``Float.toString`` text for finite values."""

import math
import struct
import sys
from decimal import Decimal

DOUBLE_MAX = sys.float_info.max
DOUBLE_MIN = 5e-324
DOUBLE_MIN_NORMAL = sys.float_info.min

FLOAT_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
FLOAT_MIN = struct.unpack("<f", b"\x01\x00\x00\x00")[0]
FLOAT_MIN_NORMAL = struct.unpack("<f", b"\x00\x00\x80\x00")[0]

_PLAIN_LOW = Decimal("0.001")
_PLAIN_HIGH = Decimal(10**7)
_FLOAT_MAX_DIGITS = 9


def to_float32(value: float) -> float:
    """Round a double to the nearest IEEE-754 single precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _decimal_digits(text: str) -> tuple[str, int]:
    """Split a positive decimal into significant digits and sci exponent."""
    _, digits, exponent = Decimal(text).normalize().as_tuple()
    assert isinstance(exponent, int)
    digit_str = "".join(str(d) for d in digits)
    return digit_str, exponent + len(digit_str) - 1


def _prefer_two_digits(
    magnitude: float, digits: str, exponent: int
) -> tuple[str, int]:
    # A lone digit may be replaced by a closer two-digit decimal.
    if len(digits) != 1:
        return digits, exponent
    exact = Decimal(magnitude)
    two_digits, two_exponent = _decimal_digits(f"{magnitude:.1e}")
    one = Decimal(f"{digits}e{exponent}")
    two = Decimal(f"{two_digits[0]}.{two_digits[1:] or '0'}e{two_exponent}")
    if abs(two - exact) < abs(one - exact):
        return two_digits, two_exponent
    return digits, exponent


def _shortest_double(magnitude: float) -> tuple[str, int]:
    digits, exponent = _decimal_digits(repr(magnitude))
    return _prefer_two_digits(magnitude, digits, exponent)


def _shortest_float(magnitude: float) -> tuple[str, int]:
    for precision in range(_FLOAT_MAX_DIGITS):
        candidate = f"{magnitude:.{precision}e}"
        if to_float32(float(candidate)) == magnitude:
            digits, exponent = _decimal_digits(candidate)
            return _prefer_two_digits(magnitude, digits, exponent)
    return _decimal_digits(f"{magnitude:.{_FLOAT_MAX_DIGITS - 1}e}")


def _render(value: float, digits: str, exponent: int) -> str:
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return f"{sign}0.0"
    magnitude = Decimal(abs(value))
    if _PLAIN_LOW <= magnitude < _PLAIN_HIGH:
        if exponent >= 0:
            int_part = digits[: exponent + 1].ljust(exponent + 1, "0")
            frac_part = digits[exponent + 1 :] or "0"
        else:
            int_part = "0"
            frac_part = "0" * (-exponent - 1) + digits
        return f"{sign}{int_part}.{frac_part}"
    mantissa = f"{digits[0]}.{digits[1:] or '0'}"
    return f"{sign}{mantissa}E{exponent}"


def java_double_text(value: float) -> str:
    """Render a finite double the way ``Double.toString`` does."""
    if value == 0:
        return _render(value, "0", 0)
    digits, exponent = _shortest_double(abs(value))
    return _render(value, digits, exponent)


def java_float_text(value: float) -> str:
    """Render a finite single precision value like ``Float.toString``."""
    value = to_float32(value)
    if value == 0:
        return _render(value, "0", 0)
    digits, exponent = _shortest_float(abs(value))
    return _render(value, digits, exponent)
