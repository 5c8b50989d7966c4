import pytest

from fractview.chars import (
    atoi,
    exact_sqrt,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    power,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_classification_matches_ascii_rules(ch):
    assert is_alpha(ch) == ch.isalpha()
    assert is_digit(ch) == ch.isdigit()
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))
    assert is_print(ch) == ch.isprintable()


def test_classification_accepts_codes():
    assert is_digit(48) and is_digit(57)
    assert not is_digit(47) and not is_digit(58)
    assert is_alpha(65) and is_alpha(122)
    assert not is_alpha(91)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("ß")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_with_codes():
    assert to_lower(65) == 97
    assert to_upper(97) == 65
    assert to_lower(48) == 48


@pytest.mark.parametrize("ch", ASCII)
def test_case_conversion_matches_ascii(ch):
    if ch.isalpha():
        assert to_lower(ch) == ch.lower()
        assert to_upper(ch) == ch.upper()
        assert to_upper(to_lower(ch)) == ch.upper()
    else:
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42", -42),
        ("+17", 17),
        ("\b\t\n 7", 7),
        ("12abc", 12),
        ("", 0),
        ("abc", 0),
        ("+-5", 0),
        ("- 5", 0),
        ("-0", 0),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_rejects_non_ascii_first_character():
    assert atoi("é12") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 123456, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_wraps_to_32_bits():
    assert itoa(2147483648) == "-2147483648"


def test_power_zero_or_negative_exponent():
    assert power(7, 0) == 1
    assert power(7, -3) == 1


def test_power_value():
    assert power(2, 10) == 1024


@pytest.mark.parametrize("nb", [-3, -1, 0, 1, 2, 5])
def test_power_recurrence(nb):
    for k in range(8):
        assert power(nb, k + 1) == power(nb, k) * nb


def test_power_wraps_to_64_bits():
    assert power(2, 63) == -(1 << 63)
    assert power(2, 64) == 0


@pytest.mark.parametrize("k", [1, 2, 3, 10, 99, 1000])
def test_exact_sqrt_of_perfect_squares(k):
    assert exact_sqrt(float(k * k)) == float(k)


@pytest.mark.parametrize("nb", [0.0, -4.0, 2.0, 2.25, 15.0, 17.0, 1000001.0])
def test_exact_sqrt_of_non_squares(nb):
    assert exact_sqrt(nb) == 0.0


def test_exact_sqrt_nan_and_inf():
    assert exact_sqrt(float("nan")) == 0.0
    with pytest.raises(OverflowError):
        exact_sqrt(float("inf"))