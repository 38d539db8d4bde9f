import io
from decimal import Decimal

import pytest

from melp_runtime.console import (
    NumericType,
    format_bool,
    format_numeric,
    parse_int_prefix,
    print_bool,
    print_numeric,
    print_string,
    read_line,
    read_numeric,
)


def test_format_numeric_int64_round_trips():
    for number in (0, 7, -42, 2**63 - 1):
        assert int(format_numeric(number, NumericType.INT64)) == number


def test_format_numeric_none_is_null():
    assert format_numeric(None, NumericType.DOUBLE) == "null"


def test_format_numeric_double_uses_g_format():
    assert format_numeric(1e20, NumericType.DOUBLE) == "1e+20"
    assert float(format_numeric(2.5, NumericType.DOUBLE)) == 2.5


def test_format_numeric_bigdecimal_keeps_digits():
    assert format_numeric(Decimal("1.50"), NumericType.BIGDECIMAL) == "1.50"


def test_format_numeric_unknown_kind():
    assert format_numeric(3, "other") == "(unknown)"


def test_format_bool():
    assert format_bool(True) == "true"
    assert format_bool(0) == "false"


def test_print_numeric_default_is_integer_without_newline():
    out = io.StringIO()
    print_numeric(15, file=out)
    assert out.getvalue() == "15"


def test_println_numeric_with_end():
    out = io.StringIO()
    print_numeric(3, NumericType.INT64, end="\n", file=out)
    assert out.getvalue() == "3\n"


def test_print_numeric_none_and_unknown():
    out = io.StringIO()
    print_numeric(None, end="\n", file=out)
    print_numeric(1, "weird", file=out)
    assert out.getvalue() == "(null)\n(unknown numeric type: weird)"


def test_print_string_none_without_end_prints_nothing():
    out = io.StringIO()
    print_string(None, file=out)
    assert out.getvalue() == ""


def test_print_string_none_with_end_prints_null():
    out = io.StringIO()
    print_string(None, end="\n", file=out)
    assert out.getvalue() == "(null)\n"


def test_print_string_and_bool():
    out = io.StringIO()
    print_string("hi", end="\n", file=out)
    print_bool(True, file=out)
    print_bool(False, end="\n", file=out)
    assert out.getvalue() == "hi\ntruefalse\n"


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -17xyz", -17), ("+8\n", 8), ("abc", 0), ("", 0), ("-", 0)],
)
def test_parse_int_prefix(text, expected):
    assert parse_int_prefix(text) == expected


def test_parse_int_prefix_saturates():
    assert parse_int_prefix("9" * 30) == 2**63 - 1
    assert parse_int_prefix("-" + "9" * 30) == -(2**63)


def test_read_line_strips_newline_and_writes_prompt():
    out = io.StringIO()
    source = io.StringIO("hello\nworld\n")
    assert read_line("> ", stdin=source, stdout=out) == "hello"
    assert read_line(stdin=source, stdout=out) == "world"
    assert out.getvalue() == "> "


def test_read_line_eof_gives_empty():
    assert read_line(stdin=io.StringIO("")) == ""


def test_read_line_limits_length():
    source = io.StringIO("x" * 2000 + "\n")
    first = read_line(stdin=source)
    assert len(first) == 1023
    assert read_line(stdin=source) == "x" * (2000 - 1023)


def test_read_numeric():
    out = io.StringIO()
    source = io.StringIO("123\nnope\n")
    assert read_numeric("n? ", stdin=source, stdout=out) == 123
    assert read_numeric(stdin=source) == 0
    assert read_numeric(stdin=source) == 0
    assert out.getvalue() == "n? "