import string

import pytest

from pedrolib.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_sign,
    is_space,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ASCII)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ASCII)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


@pytest.mark.parametrize("c", ASCII)
def test_is_space_matches_whitespace(c):
    assert is_space(c) == (c in string.whitespace)


@pytest.mark.parametrize("c", ASCII)
def test_is_print_matches_isprintable(c):
    assert is_print(c) == c.isprintable()


@pytest.mark.parametrize("code", range(-1, 300))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code < 128)


def test_is_sign():
    assert is_sign("+")
    assert is_sign("-")
    assert not any(is_sign(c) for c in ASCII if c not in "+-")


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")
    assert not is_space("\u00a0")


@pytest.mark.parametrize("c", ASCII)
def test_to_lower_and_upper_match_str_methods(c):
    assert to_lower(c) == c.lower()
    assert to_upper(c) == c.upper()


def test_case_conversion_leaves_non_ascii_alone():
    assert to_lower("É") == "É"
    assert to_upper("é") == "é"


def test_case_conversion_with_code_points():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_lower(ord("!")) == ord("!")


@pytest.mark.parametrize("c", string.ascii_letters)
def test_case_round_trip(c):
    assert to_lower(to_upper(c)) == c.lower()
    assert to_upper(to_lower(c)) == c.upper()


def test_int_and_str_agree():
    for c in ASCII:
        assert is_alnum(c) == is_alnum(ord(c))
        assert is_print(c) == is_print(ord(c))


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        is_space(None)