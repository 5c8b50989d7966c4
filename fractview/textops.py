"""String comparison, searching, splitting and assembling helpers."""

from __future__ import annotations

from itertools import zip_longest

from fractview.chars import is_alnum, to_lower, to_upper

_TRIM_CHARS = " \n\t"
_TERMINATOR = "\0"


def _code(ch: str) -> int:
    """Code of a character, with a missing character read as the terminator."""
    return ord(ch) if ch else 0


def compare(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns 0 when they are equal, otherwise the difference between the codes
    of the first pair of characters that differ (a shorter string reads as
    ending in code 0).
    """
    for a, b in zip_longest(s1, s2, fillvalue=""):
        if a != b:
            return _code(a) - _code(b)
    return 0


def ncompare(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(s1[:n], s2[:n])


def equal(s1: str | None, s2: str | None) -> bool:
    """True when both strings are equal; two missing strings count as equal."""
    if s1 is None or s2 is None:
        return s1 is None and s2 is None
    return s1 == s2


def nequal(s1: str | None, s2: str | None, n: int) -> bool:
    """True when the first ``n`` characters of both strings are equal."""
    if n < 0:
        raise ValueError("n must not be negative")
    if s1 is None or s2 is None:
        return s1 is None and s2 is None
    return s1[:n] == s2[:n]


def find(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle``, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def nfind(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`find`, but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    return find(haystack[:length], needle)


def index_of(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the terminator character gives the length of ``s``.
    """
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rindex_of(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the terminator character gives the length of ``s``.
    """
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def split(s: str | None, c: str) -> list[str] | None:
    """The non-empty pieces of ``s`` between occurrences of the separator ``c``."""
    if s is None:
        return None
    if len(c) != 1:
        raise ValueError(f"separator must be a single character, got {c!r}")
    return [word for word in s.split(c) if word]


def trim(s: str | None) -> str | None:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    if s is None:
        return None
    return s.strip(_TRIM_CHARS)


def capitalize(s: str) -> str:
    """Lower-case every ASCII letter, then upper-case each one starting a word.

    A word starts at the beginning of the text and after any character that is
    not an ASCII letter or digit.
    """
    result = []
    previous_alnum = False
    for ch in s:
        ch = to_lower(ch)
        if not previous_alnum:
            ch = to_upper(ch)
        result.append(ch)
        previous_alnum = is_alnum(ch)
    return "".join(result)


def join(s1: str | None, s2: str | None) -> str:
    """Concatenate two strings; a missing one counts as empty."""
    return (s1 or "") + (s2 or "")


def substring(s: str | None, start: int, length: int) -> str | None:
    """The ``length`` characters of ``s`` beginning at ``start``."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(s):
        raise IndexError("substring runs past the end of the string")
    return s[start:start + length]


def lcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer holding ``size`` characters with its terminator.

    Returns the resulting text and the length the full concatenation would
    have had: the smaller of ``len(dst)`` and ``size``, plus ``len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    start = min(len(dst), size)
    room = max(size - 1 - start, 0)
    return dst + src[:room], start + len(src)