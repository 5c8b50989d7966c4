import pytest

from fractview.bytesutil import mem_compare, mem_copy_until, mem_find


def test_find_first_occurrence():
    assert mem_find(b"hello", ord("l"), 5) == 2


def test_find_limited_by_n():
    assert mem_find(b"hello", ord("o"), 4) is None


def test_find_masks_value():
    assert mem_find(b"hello", 256 + ord("h"), 5) == 0


def test_find_n_too_large():
    with pytest.raises(ValueError):
        mem_find(b"ab", ord("a"), 3)


def test_compare_equal_prefix():
    assert mem_compare(b"abcx", b"abcy", 3) == 0


def test_compare_difference():
    assert mem_compare(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert mem_compare(b"abd", b"abc", 3) > 0


def test_compare_bytes_are_unsigned():
    assert mem_compare(b"\xff", b"\x01", 1) > 0


def test_compare_zero_length():
    assert mem_compare(b"a", b"b", 0) == 0


def test_compare_n_too_large():
    with pytest.raises(ValueError):
        mem_compare(b"abc", b"ab", 3)


def test_copy_stops_after_byte():
    assert mem_copy_until(b"hello", ord("l"), 5) == (b"hel", True)


def test_copy_without_match():
    assert mem_copy_until(b"hello", ord("z"), 3) == (b"hel", False)


def test_copy_match_beyond_n_not_found():
    copied, found = mem_copy_until(b"hello", ord("o"), 4)
    assert (copied, found) == (b"hell", False)