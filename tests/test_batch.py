import pytest
from pydantic import ValidationError

from literalfmt.batch import LiteralKind, LiteralRequest, render_rows
from literalfmt.formatter import LiteralFormatter
from literalfmt.models import FormatterConfig, IntegerFormat


def _render(kind: str, value, **kwargs) -> str:
    request = LiteralRequest.model_validate(
        {"kind": kind, "value": value, **kwargs}
    )
    rows = list(render_rows(LiteralFormatter(), [request]))
    return rows[0]["literal"]


@pytest.mark.parametrize(
    ("kind", "value", "expected"),
    [
        ("string", "a\tb", '"a\\tb"'),
        ("char", "'", "'\\''"),
        ("identifier", "java.lang.String", "java_lang_String"),
        ("xml", "a&b", "a&amp;b"),
        ("res_value", "a\nb", "a\\nb"),
        ("res_str_value", "it's", "it\\'s"),
        ("byte", 7, "7"),
        ("short", 32767, "Short.MAX_VALUE"),
        ("int", -2147483648, "Integer.MIN_VALUE"),
        ("long", 4294967296, "4294967296L"),
        ("double", 1.5, "1.5d"),
        ("double", "-inf", "Double.NEGATIVE_INFINITY"),
        ("float", "nan", "Float.NaN"),
        ("float", 2, "2.0f"),
    ],
)
def test_render_each_kind(kind: str, value, expected: str) -> None:
    assert _render(kind, value) == expected


def test_cast_flag() -> None:
    assert _render("short", 1, cast=True) == "(short) 1"
    assert _render("char", "\x01", cast=True) == "(char) 1"


def test_rows_keep_request_fields() -> None:
    request = LiteralRequest(kind=LiteralKind.INT, value=-1)
    formatter = LiteralFormatter(
        FormatterConfig(integer_format=IntegerFormat.HEXADECIMAL)
    )
    rows = list(render_rows(formatter, [request]))
    assert rows == [
        {
            "kind": "int",
            "value": -1,
            "cast": False,
            "literal": "(int) 0xffffffff",
        }
    ]


@pytest.mark.parametrize(
    "raw",
    [
        {"kind": "int", "value": "5"},
        {"kind": "int", "value": 1.5},
        {"kind": "int", "value": True},
        {"kind": "long", "value": 2**63},
        {"kind": "char", "value": "ab"},
        {"kind": "char", "value": "\U0001f600"},
        {"kind": "string", "value": 3},
        {"kind": "double", "value": "pi"},
        {"kind": "decimal", "value": 1},
        {"kind": "int", "value": 1, "width": 4},
    ],
)
def test_invalid_requests(raw: dict) -> None:
    with pytest.raises(ValidationError):
        LiteralRequest.model_validate(raw)
