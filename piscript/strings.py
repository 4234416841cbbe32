"""String builtins: character codes, case conversion, trimming and classification."""

from __future__ import annotations

import string
from typing import Any

from .values import PiError, PiString, as_number, is_numeric

_WHITESPACE = " \t\n\v\f\r"
_UPPER = set(string.ascii_uppercase)
_LOWER = set(string.ascii_lowercase)
_LETTERS = _UPPER | _LOWER
_DIGITS = set(string.digits)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _text(value: Any, message: str) -> str:
    if not isinstance(value, (PiString, str)):
        raise PiError(message)
    return str(value)


def char(code: Any) -> PiString:
    """Return the one-character string with the given byte code."""
    if not is_numeric(code):
        raise PiError("[char] expects a single numeric argument.")
    return PiString(chr(int(as_number(code)) % 256))


def ordinal(text: Any) -> float:
    """Return the character code of the first character of a non-empty string."""
    chars = _text(text, "[ord] expects a non-empty string as argument.")
    if not chars:
        raise PiError("[ord] cannot operate on an empty string.")
    return float(ord(chars[0]))


def trim(text: Any) -> PiString:
    """Return the string without leading and trailing whitespace."""
    return PiString(_text(text, "[trim] expects a string argument.").strip(_WHITESPACE))


def upper(text: Any) -> PiString:
    """Return the string with ASCII letters in upper case."""
    return PiString(_text(text, "[upper] expects a string argument.").translate(_TO_UPPER))


def lower(text: Any) -> PiString:
    """Return the string with ASCII letters in lower case."""
    return PiString(_text(text, "[lower] expects a string argument.").translate(_TO_LOWER))


def replace(text: Any, old: Any, new: Any) -> PiString:
    """Replace every non-overlapping occurrence of old, scanning left to right."""
    message = "[replace] expects three string arguments: (str, old, new)."
    source = _text(text, message)
    old_sub = _text(old, message)
    new_sub = _text(new, message)
    if not old_sub:
        raise PiError("[replace] 'old' string must not be empty.")
    return PiString(source.replace(old_sub, new_sub))


def is_upper(text: Any) -> bool:
    """Return whether no letter in the string is lower case."""
    chars = _text(text, "[is_upper] expects a string as argument.")
    return not any(ch in _LOWER for ch in chars)


def is_lower(text: Any) -> bool:
    """Return whether no letter in the string is upper case."""
    chars = _text(text, "[is_lower] expects a string as argument.")
    return not any(ch in _UPPER for ch in chars)


def is_digit(text: Any) -> bool:
    """Return whether the string is non-empty and made only of digits 0-9."""
    chars = _text(text, "[is_digit] expects a string as argument.")
    return bool(chars) and all(ch in _DIGITS for ch in chars)


def is_numeric_string(text: Any) -> bool:
    """Return whether the string is an optional sign followed by digits and at most one dot."""
    chars = _text(text, "[is_numeric] expects a string as argument.")
    if not chars:
        return False
    body = chars[1:] if chars[0] in "+-" else chars
    if not body:
        return False
    if body.count(".") > 1:
        return False
    return all(ch in _DIGITS or ch == "." for ch in body)


def is_alpha(text: Any) -> bool:
    """Return whether the string is non-empty and made only of ASCII letters."""
    chars = _text(text, "[is_alpha] expects a string as argument.")
    return bool(chars) and all(ch in _LETTERS for ch in chars)


def is_alnum(text: Any) -> bool:
    """Return whether the string is non-empty and made only of ASCII letters and digits."""
    chars = _text(text, "[is_alnum] expects a string as argument.")
    return bool(chars) and all(ch in _LETTERS or ch in _DIGITS for ch in chars)