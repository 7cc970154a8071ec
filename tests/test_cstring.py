import io

import pytest

from xv6util.cstring import atoi, gets, memcmp, strchr, strcmp


def test_atoi_leading_digits():
    assert atoi("123abc") == 123


def test_atoi_no_digits():
    assert atoi("abc") == 0


def test_atoi_rejects_sign_and_space():
    assert atoi("-7") == 0
    assert atoi(" 7") == 0


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0


def test_strcmp_ordering_and_antisymmetry():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") == -strcmp("abc", "abd")


def test_strcmp_prefix():
    assert strcmp("ab", "abc") == -ord("c")


def test_strcmp_stops_at_nul():
    assert strcmp("ab\0x", "ab\0y") == 0


def test_strcmp_unsigned_bytes():
    assert strcmp(b"\xff", b"\x01") > 0


def test_strchr_found():
    assert strchr("hello", "l") == 2


def test_strchr_missing_or_after_nul():
    assert strchr("hello", "z") is None
    assert strchr("ab\0c", "c") is None
    assert strchr("abc", "\0") is None


def test_strchr_bad_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_memcmp():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_too_long():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_gets_stops_after_newline():
    stream = io.StringIO("ab\ncd")
    assert gets(stream, 10) == "ab\n"
    assert gets(stream, 10) == "cd"


def test_gets_respects_limit():
    assert gets(io.StringIO("abcdef"), 3) == "ab"


def test_gets_binary_carriage_return():
    assert gets(io.BytesIO(b"x\ry"), 10) == b"x\r"


def test_gets_at_eof():
    assert gets(io.StringIO(""), 10) == ""