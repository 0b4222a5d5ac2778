import pytest

from libft.conversion import atoi, atol, itoa, tolower, toupper


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-17", -17),
        ("+8", 8),
        ("123abc", 123),
        ("", 0),
        ("abc", 0),
        ("--5", 0),
        ("+-5", 0),
        ("- 5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected
    assert atol(text) == expected


def test_atoi_wraps_32_bit():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


def test_atol_wraps_64_bit():
    assert atol("9223372036854775807") == 9223372036854775807
    assert atol("-9223372036854775808") == -9223372036854775808
    assert atol("2147483648") == 2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 18437, -2147483648, 9223372036854775807])
def test_itoa_round_trip(n):
    assert atol(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_case_mapping_chars():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("1") == "1"
    assert tolower("!") == "!"


def test_case_mapping_ints():
    assert toupper(ord("m")) == ord("M")
    assert tolower(ord("M")) == ord("m")
    assert toupper(200) == 200


def test_case_round_trip():
    for code in range(ord("a"), ord("z") + 1):
        assert tolower(toupper(chr(code))) == chr(code)


def test_case_bad_input():
    with pytest.raises(ValueError):
        toupper("ab")
    with pytest.raises(TypeError):
        tolower(None)