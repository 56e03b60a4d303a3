import pytest

from cubcaster.strutil import (
    atoi,
    itoa,
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_skips_space_and_sign():
    assert atoi("  -42abc") == -42
    assert atoi("\t\n+17") == 17


def test_atoi_rejects_double_sign():
    assert atoi("--5") == 0


def test_atoi_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("value", [0, 7, -7, 255, 1000000000, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(255) == "255"


def test_itoa_overflow():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("255,100,0", ",") == ["255", "100", "0"]
    assert split(",,,", ",") == []


def test_split_words_hold_no_separator():
    words = split("a;;b;c;;;d", ";")
    assert all(";" not in w and w for w in words)
    assert "".join(words) == "abcd"


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  NO ./a  ", " ") == "NO ./a"
    assert strtrim("aaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim(" text ", "") == " text "


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 5, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_needle():
    hay = "hello world"
    idx = strnstr(hay, "world", len(hay))
    assert idx is not None and hay[idx:].startswith("world")


def test_strnstr_respects_length():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay) - 1) is None
    assert strnstr(hay, "", 0) == 0
    assert strnstr("", "a", 5) is None


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("NO ./a", "NO", 2) == 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_is_antisymmetric():
    assert strncmp("WE", "EA", 2) == -strncmp("EA", "WE", 2)


def test_strchr():
    text = "hello"
    idx = strchr(text, "l")
    assert text[idx] == "l" and "l" not in text[:idx]
    assert strchr(text, "z") is None
    assert strchr(text, 0) == len(text)


def test_strchr_reduces_large_codes():
    assert strchr("a", ord("a") + 512) == strchr("a", "a")


def test_strrchr():
    text = "hello"
    idx = strrchr(text, "l")
    assert text[idx] == "l" and "l" not in text[idx + 1 :]
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_strchr_bad_argument():
    with pytest.raises(ValueError):
        strchr("abc", "ab")