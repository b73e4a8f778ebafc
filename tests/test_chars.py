import string

import pytest

from meowlong.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("char", ASCII)
def test_classification_matches_ascii_sets(char):
    assert is_alpha(char) == (char in string.ascii_letters)
    assert is_digit(char) == (char in string.digits)
    assert is_alnum(char) == (char in string.ascii_letters + string.digits)
    assert is_print(char) == (char in string.printable and char not in "\t\n\r\x0b\x0c")


def test_integer_and_string_inputs_agree():
    for code in range(256):
        assert is_alpha(code) == is_alpha(chr(code))
        assert is_print(code) == is_print(chr(code))


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_case_conversion_of_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(ord(lower)) == ord(upper)
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("char", ["1", "@", "[", "`", "{", " ", "é"])
def test_case_conversion_leaves_others_alone(char):
    assert to_upper(char) == char
    assert to_lower(char) == char


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")