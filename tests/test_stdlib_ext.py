import pytest

from kaleidocore.stdlib_ext import dtostre, dtostrf, itoa, ltoa, ultoa, utoa


@pytest.mark.parametrize("value", [0, 1, 9, 10, 42, 1000, -1, -57, 2**31 - 1, -(2**31) + 1])
def test_itoa_decimal_matches_str(value):
    assert itoa(value, 10) == str(value)


@pytest.mark.parametrize("value", [0, 12345678901, -(2**63) + 1, 2**63 - 1])
def test_ltoa_decimal_matches_str(value):
    assert ltoa(value, 10) == str(value)


@pytest.mark.parametrize("value", [0, 7, 65535, 2**32 - 1])
def test_utoa_decimal_matches_str(value):
    assert utoa(value, 10) == str(value)


@pytest.mark.parametrize("value", [0, 2**40, 2**64 - 1])
def test_ultoa_decimal_matches_str(value):
    assert ultoa(value, 10) == str(value)


def test_unsigned_conversions_wrap_negative_values():
    assert utoa(-1, 10) == str(2**32 - 1)
    assert ultoa(-1, 10) == str(2**64 - 1)


def test_itoa_wraps_to_32_bits():
    assert itoa(2**32 + 5, 10) == str(5)
    assert itoa(2**31 - 1 + 2**32, 10) == str(2**31 - 1)


@pytest.mark.parametrize("radix", [2, 8, 16])
def test_single_digits_in_any_radix(radix):
    for value in range(min(radix, 10)):
        assert itoa(value, radix) == str(value)
        assert utoa(value, radix) == str(value)


def test_negative_sign_is_prefixed():
    for value in (-3, -40, -999):
        assert itoa(value, 10).startswith("-")
        assert itoa(value, 10)[1:] == itoa(-value, 10)


def test_float_conversions_give_placeholder():
    assert dtostrf(1.5, 4, 2) == "___"
    assert dtostre(-2.25, 3, 0) == "___"


def test_zero_radix_raises():
    with pytest.raises(ZeroDivisionError):
        itoa(5, 0)