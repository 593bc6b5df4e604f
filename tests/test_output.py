import io

import pytest

from pedrolib.output import printf, putchar_fd, putendl_fd, putnbr_fd, putstr_fd, sprintf


def test_plain_text_unchanged():
    assert sprintf("hello world") == "hello world"


def test_string_conversion():
    assert sprintf("Hello %s\n", "Pedro") == "Hello Pedro\n"


def test_none_string_prints_null():
    assert sprintf("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert sprintf("%c", "a") == "a"
    assert sprintf("%c", 65) == chr(65)


@pytest.mark.parametrize("n", [0, 42, -94120, 2**31 - 1, -(2**31)])
@pytest.mark.parametrize("spec", ["%d", "%i"])
def test_decimal_round_trip(n, spec):
    assert int(sprintf(spec, n)) == n


def test_decimal_wraps_to_32_bits():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 15, 3054, 2**32 - 1])
def test_hex_round_trip_and_case(n):
    lower = sprintf("%x", n)
    upper = sprintf("%X", n)
    assert int(lower, 16) == n
    assert lower == upper.lower()
    assert lower == lower.lower()


def test_hex_digits_lower_case():
    assert sprintf("%x", 255) == "ff"


def test_null_pointer():
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_prefix_and_value():
    text = sprintf("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_percent_escape():
    assert sprintf("100%%") == "100%"


def test_unknown_conversion_written_as_is():
    assert sprintf("%z") == "z"


def test_mixed_conversions():
    assert sprintf("%s=%d%c", "x", 7, "!") == "x=7!"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("Hello %s\n", "Pedro")
    out = capsys.readouterr().out
    assert out == "Hello Pedro\n"
    assert count == len(out)


def test_putchar_fd():
    stream = io.StringIO()
    putchar_fd("q", stream)
    putchar_fd(ord("r"), stream)
    assert stream.getvalue() == "qr"


def test_putstr_fd_and_none():
    stream = io.StringIO()
    putstr_fd(None, stream)
    putstr_fd("abc", stream)
    assert stream.getvalue() == "abc"


def test_putendl_fd_adds_newline():
    stream = io.StringIO()
    putendl_fd("line", stream)
    putendl_fd(None, stream)
    assert stream.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, -94120, -2147483648, 2147483647])
def test_putnbr_fd_round_trip(n):
    stream = io.StringIO()
    putnbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_putnbr_fd_wraps():
    stream = io.StringIO()
    putnbr_fd(2**31, stream)
    assert int(stream.getvalue()) == -(2**31)


def test_putstr_fd_defaults_to_stdout(capsys):
    putstr_fd("out")
    assert capsys.readouterr().out == "out"