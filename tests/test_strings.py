import pytest

from piscript.strings import (
    char,
    is_alnum,
    is_alpha,
    is_digit,
    is_lower,
    is_numeric_string,
    is_upper,
    lower,
    ordinal,
    replace,
    trim,
    upper,
)
from piscript.values import PiError, PiString


@pytest.mark.parametrize("code", [65, 97, 48, 32, 126])
def test_char_and_ordinal_round_trip(code):
    assert ordinal(char(code)) == code


def test_char_returns_single_character_string():
    result = char(66)
    assert isinstance(result, PiString)
    assert len(result) == 1


def test_char_rejects_non_number():
    with pytest.raises(PiError):
        char("A")


def test_ordinal_uses_first_character():
    assert ordinal(PiString("Hello")) == ordinal("H")


def test_ordinal_empty_string_is_error():
    with pytest.raises(PiError):
        ordinal(PiString(""))


def test_ordinal_rejects_non_string():
    with pytest.raises(PiError):
        ordinal(5)


def test_trim_removes_surrounding_whitespace():
    assert str(trim(PiString(" \t hi there \n\r"))) == "hi there"


def test_trim_all_whitespace_gives_empty():
    assert str(trim(PiString("   \t"))) == ""


def test_trim_rejects_non_string():
    with pytest.raises(PiError):
        trim(None)


def test_upper_then_lower_round_trip():
    original = PiString("hello, world 42")
    upped = upper(original)
    assert is_upper(upped)
    assert str(lower(upped)) == str(original)


def test_upper_does_not_modify_input():
    original = PiString("abc")
    upper(original)
    assert original.chars == "abc"


def test_lower_makes_string_lower():
    assert is_lower(lower(PiString("MiXeD CaSe")))


def test_upper_preserves_length():
    text = PiString("abc DEF 123 !?")
    assert len(upper(text)) == len(text)


def test_replace_all_occurrences():
    assert str(replace(PiString("a-b-c"), "-", "")) == "abc"


def test_replace_non_overlapping_left_to_right():
    assert str(replace("aaa", "aa", "b")) == "ba"


def test_replace_without_match_keeps_string():
    assert str(replace("hello", "xyz", "q")) == "hello"


def test_replace_empty_old_is_error():
    with pytest.raises(PiError):
        replace("hello", "", "x")


def test_replace_requires_strings():
    with pytest.raises(PiError):
        replace("hello", 1, "x")


@pytest.mark.parametrize(
    "text, expected",
    [("HELLO", True), ("Hello", False), ("123!", True)],
)
def test_is_upper_examples(text, expected):
    assert is_upper(PiString(text)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("hello", True), ("Hello", False), ("123!", True)],
)
def test_is_lower_examples(text, expected):
    assert is_lower(PiString(text)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("12345", True), ("123a5", False), ("", False)],
)
def test_is_digit_examples(text, expected):
    assert is_digit(PiString(text)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("-45.67", True),
        ("abc123", False),
        ("", False),
        ("+", False),
        ("1.2.3", False),
        ("+7", True),
    ],
)
def test_is_numeric_string_examples(text, expected):
    assert is_numeric_string(PiString(text)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("Hello", True), ("abc123", False), ("", False)],
)
def test_is_alpha_examples(text, expected):
    assert is_alpha(PiString(text)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("Hello123", True), ("abc_123", False), ("", False)],
)
def test_is_alnum_examples(text, expected):
    assert is_alnum(PiString(text)) is expected


@pytest.mark.parametrize(
    "fn", [is_upper, is_lower, is_digit, is_numeric_string, is_alpha, is_alnum]
)
def test_predicates_reject_non_strings(fn):
    with pytest.raises(PiError):
        fn(3)