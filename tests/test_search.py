import pytest

from libft.search import (
    count_chars,
    strchr,
    strcmp,
    strncmp,
    strnstr,
    strrchr,
    strstr,
)


def test_strchr_finds_first():
    assert strchr("hello", "l") == "hello".index("l")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_matches_end():
    assert strchr("abc", "\0") == len("abc")


def test_strchr_none_string():
    assert strchr(None, "a") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == "hello".rindex("l")


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "z") is None


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0


def test_strcmp_sign_and_antisymmetry():
    assert strcmp("abd", "abc") > 0
    assert strcmp("abc", "abd") == -strcmp("abd", "abc")


def test_strcmp_prefix():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_none():
    assert strcmp(None, "a") == 404
    assert strcmp("a", None) == 404
    assert strcmp(None, None) == 404


def test_strncmp_limit():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_strncmp_zero():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strnstr_found():
    big = "hello world"
    assert strnstr(big, "world", len(big)) == big.find("world")


def test_strnstr_must_fit_in_length():
    big = "hello world"
    assert strnstr(big, "world", len(big) - 1) is None


def test_strnstr_empty_and_zero():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strstr():
    assert strstr("haystack", "st") is True
    assert strstr("haystack", "xyz") is False
    assert strstr("abc", "") is True


def test_count_chars_first_char_uses_all():
    assert count_chars("aaa", "a") == 1


def test_count_chars_later_chars_skip_first_entry():
    assert count_chars("banana", "an") == 2


def test_count_chars_empty():
    assert count_chars("abc", "") == 0
    assert count_chars("", "abc") == 0