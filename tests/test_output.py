import io

import pytest

from wirefdf.output import (
    format_hex,
    format_pointer,
    format_printf,
    format_unsigned,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_put_char_writes_one_character():
    buf = io.StringIO()
    assert put_char("i", buf) == 1
    assert put_char(ord("j"), buf) == 1
    assert buf.getvalue() == "ij"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_null():
    buf = io.StringIO()
    assert put_str("hellooo", buf) == len("hellooo")
    assert put_str(None, buf) == 6
    assert buf.getvalue() == "hellooo(null)"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    count = put_endl("hellooo", buf)
    assert buf.getvalue() == "hellooo\n"
    assert count == len(buf.getvalue())


@pytest.mark.parametrize("number", [0, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(number):
    buf = io.StringIO()
    count = put_nbr(number, buf)
    assert int(buf.getvalue()) == number
    assert count == len(buf.getvalue())


def test_put_defaults_to_stdout(capsys):
    put_str("hey")
    assert capsys.readouterr().out == "hey"


@pytest.mark.parametrize("number", [0, 9, 10, 238555, 45667, 4294967295])
def test_format_hex_round_trip(number):
    lower = format_hex(number)
    upper = format_hex(number, upper=True)
    assert int(lower, 16) == number
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_format_hex_wraps_negative():
    assert int(format_hex(-1), 16) == 4294967295


def test_format_unsigned():
    assert format_unsigned(4294967295) == "4294967295"
    assert format_unsigned(-1) == "4294967295"
    assert format_unsigned(417687283) == "417687283"


def test_format_pointer():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"
    rendered = format_pointer(567387)
    assert rendered.startswith("0x")
    assert int(rendered[2:], 16) == 567387


def test_format_printf_all_conversions():
    text = format_printf(
        "%c,%s,%p,%d,%i,%u,%x,%X,%%",
        "&", "hey", 567387, 423, -2147483648, 417687283, 45667, 45667,
    )
    expected = ",".join([
        "&", "hey", format_pointer(567387), "423", "-2147483648",
        "417687283", "%x" % 45667, "%X" % 45667, "%",
    ])
    assert text == expected


def test_format_printf_null_string_and_int_wrap():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%d", 2147483648) == "-2147483648"


def test_format_printf_unknown_conversion_is_dropped():
    assert format_printf("a%qb") == "ab"


def test_format_printf_empty_template():
    with pytest.raises(ValueError):
        format_printf("")


def test_format_printf_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_returns_count(capsys):
    count = printf("%s=%d\n", "x", 7)
    out = capsys.readouterr().out
    assert out == "x=7\n"
    assert count == len(out)


def test_printf_to_stream():
    buf = io.StringIO()
    assert printf("%u", 5, stream=buf) == 1
    assert buf.getvalue() == "5"