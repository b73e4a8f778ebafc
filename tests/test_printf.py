import io

import pytest

from meowlong.libft.printf import printf, render_format


def test_plain_text_passes_through():
    assert render_format("hello world") == "hello world"


def test_string_conversion():
    assert render_format("[%s]", "meow") == "[meow]"


def test_null_string():
    assert render_format("%s", None) == "(null)"


def test_char_from_int_and_str_agree():
    assert render_format("%c", ord("A")) == render_format("%c", "A")
    assert render_format("%c", "A") == "A"


@pytest.mark.parametrize("value", [0, 7, -7, 123456, 2**31 - 1])
def test_decimal_round_trip(value):
    assert int(render_format("%d", value)) == value
    assert render_format("%i", value) == render_format("%d", value)


def test_int_min():
    assert render_format("%d", -(2**31)) == "-2147483648"


def test_decimal_wraps_to_int32():
    assert int(render_format("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(render_format("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 255, 48879, 2**32 - 1])
def test_hex_round_trip(value):
    lower = render_format("%x", value)
    upper = render_format("%X", value)
    assert int(lower, 16) == value
    assert int(upper, 16) == value
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_null_address():
    assert render_format("%p", 0) == "(nil)"


def test_address_has_prefix():
    out = render_format("%p", 0xDEADBEEF)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0xDEADBEEF


def test_percent_literal():
    assert render_format("100%%") == "100%"


def test_unknown_conversion_prints_its_character():
    assert render_format("a%qb") == "aqb"


def test_trailing_percent_prints_nothing():
    assert render_format("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        render_format("%d")


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("Number of move: %d\n", 3, file=buf)
    assert buf.getvalue() == render_format("Number of move: %d\n", 3)
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", "win")
    assert capsys.readouterr().out == "win!"
    assert count == len("win!")