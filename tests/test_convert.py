import pytest

from minitalk.convert import atoi, itoa_base


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_stops_at_first_non_digit():
    assert atoi("123 456") == 123


@pytest.mark.parametrize("text", ["abc", "", "--5", "+-5", "   "])
def test_atoi_without_number_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("number", [0, 1, -1, 9, 10, 4242, -2147483648, 2147483647])
def test_atoi_round_trip(number):
    assert atoi(str(number)) == number


def test_itoa_base_zero():
    assert itoa_base(0, 16) == "0"


def test_itoa_base_hex_is_upper_case():
    assert itoa_base(48879, 16) == format(48879, "X")


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [1, 7, 255, 4096, 2**64 - 1])
def test_itoa_base_round_trip(value, base):
    assert int(itoa_base(value, base), base) == value


def test_itoa_base_decimal_matches_str():
    assert itoa_base(2147483648, 10) == str(2147483648)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_itoa_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        itoa_base(10, base)


def test_itoa_base_rejects_negative():
    with pytest.raises(ValueError):
        itoa_base(-1, 10)