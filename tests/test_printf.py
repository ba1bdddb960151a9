import io

import pytest

from ftkit.printf import DECIMAL, HEX_LOWER, HEX_UPPER, format_string, printf, to_base


@pytest.mark.parametrize("number", [0, 1, 9, 10, 255, 4096, 123456789, 2**40])
def test_to_base_decimal_round_trip(number):
    assert int(to_base(number, DECIMAL)) == number


@pytest.mark.parametrize("number", [0, 15, 16, 255, 65535, 0xDEADBEEF])
def test_to_base_hex_round_trip(number):
    lower = to_base(number, HEX_LOWER)
    upper = to_base(number, HEX_UPPER)
    assert int(lower, 16) == number
    assert upper == lower.upper()


def test_to_base_binary_round_trip():
    assert int(to_base(37, "01"), 2) == 37


def test_to_base_zero_is_first_digit():
    assert to_base(0, "xy") == "x"


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, DECIMAL)


def test_to_base_rejects_short_alphabet():
    with pytest.raises(ValueError):
        to_base(5, "0")


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


@pytest.mark.parametrize("n", [0, 7, -7, 42, -2147483648, 2147483647])
def test_signed_conversions(n):
    assert int(format_string("%d", n)) == n
    assert int(format_string("%i", n)) == n


def test_signed_min_value():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 2**32 - 1


def test_hex_conversions():
    assert int(format_string("%x", 48879), 16) == 48879
    assert format_string("%X", 48879) == format_string("%x", 48879).upper()


def test_hex_of_negative_is_unsigned():
    assert int(format_string("%x", -1), 16) == 2**32 - 1


def test_char_from_int_and_str():
    assert format_string("%c", ord("A")) == "A"
    assert format_string("%c", "z") == "z"


def test_string_and_null_string():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_pointer_null():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_address():
    result = format_string("%p", 0x1234)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 0x1234


def test_percent_uses_no_argument():
    assert format_string("%%%d", 5) == "%5"


def test_unknown_conversion_prints_nothing():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_prints_nothing():
    assert format_string("abc%") == "abc"


def test_mixed_format():
    assert format_string("%s=%d (%c)", "x", -3, "y") == "x=-3 (y)"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "nope")


def test_none_format_raises():
    with pytest.raises(TypeError):
        printf(None)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s-%u", "ab", 12, file=out)
    assert out.getvalue() == "ab-12"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == len("(null)")