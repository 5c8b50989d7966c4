"""Character classification and small integer conversions."""

from __future__ import annotations

import math
from typing import TypeVar

_CharT = TypeVar("_CharT", int, str)

_ATOI_SPACE = frozenset("\n \t\r\f\v\b")


def _code(c: int | str) -> int:
    """Return the code of a character given as a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for the decimal digits 0-9."""
    return 48 <= _code(c) <= 57


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: _CharT, low: int, high: int, shift: int) -> _CharT:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: _CharT) -> _CharT:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, 65, 90, 32)


def to_upper(c: _CharT) -> _CharT:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, 97, 122, -32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit C ``atoi`` does.

    Leading whitespace (backspace included) and one sign are accepted, parsing
    stops at the first non-digit, and the result wraps to a 32-bit int. A text
    whose first character is not ASCII yields 0.
    """
    if text and not is_ascii(text[0]):
        return 0
    pos = 0
    while pos < len(text) and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        number = _wrap(number * 10 + ord(text[pos]) - 48, 64)
        pos += 1
    return _wrap(_wrap(number * sign, 64), 32)


def itoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit signed int."""
    return str(_wrap(int(n), 32))


def power(nb: int, exponent: int) -> int:
    """``nb`` raised to ``exponent`` as a 64-bit signed result.

    A zero or negative exponent gives 1.
    """
    if exponent <= 0:
        return 1
    return _wrap(pow(int(nb), int(exponent), 1 << 64), 64)


def exact_sqrt(nb: float) -> float:
    """The square root of ``nb`` when it is a perfect square of a positive integer, else 0.0."""
    if math.isnan(nb):
        return 0.0
    if math.isinf(nb):
        raise OverflowError("cannot take the exact square root of infinity")
    if nb <= 1:
        root = 1
    else:
        target = math.ceil(nb)
        root = math.isqrt(target)
        if root * root < target:
            root += 1
    if root * root == nb:
        return float(root)
    return 0.0