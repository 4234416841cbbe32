"""Type predicates and conversions between PiScript value types."""

from __future__ import annotations

from typing import Any

from . import values as _values
from .values import PiError, PiList, PiMap, PiString, as_number, as_string, is_numeric


def is_list(value: Any) -> bool:
    """Return whether the value is a list."""
    return isinstance(value, PiList)


def is_map(value: Any) -> bool:
    """Return whether the value is a map."""
    return isinstance(value, PiMap)


def is_num(value: Any) -> bool:
    """Return whether the value is a number."""
    return is_numeric(value)


def is_str(value: Any) -> bool:
    """Return whether the value is a string."""
    return isinstance(value, (PiString, str))


def is_bool(value: Any) -> bool:
    """Return whether the value is a boolean."""
    return isinstance(value, bool)


def as_num(value: Any) -> float:
    """Return a numeric value as a float; anything else is an error."""
    if not is_numeric(value):
        raise PiError("[as_num] argument is not numeric.")
    return as_number(value)


def as_str(value: Any) -> PiString:
    """Return the printed text of any value as a new string."""
    return PiString(as_string(value))


def as_bool(value: Any) -> bool:
    """Return the truth value of any value."""
    return _values.as_bool(value)