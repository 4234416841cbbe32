"""Builtins that search, copy, slice and reorder lists and strings."""

from __future__ import annotations

import random
from typing import Any

from .values import (
    PiError,
    PiList,
    PiMap,
    PiString,
    as_number,
    equals,
    is_numeric,
    normalize_index,
)


def _is_text(value: Any) -> bool:
    return isinstance(value, (PiString, str))


def _substring_position(name: str, text: Any, target: Any) -> int:
    """Return where target first occurs in text, or -1; an empty target never matches."""
    if not _is_text(target):
        raise PiError(f"[{name}] When searching a string, the value must also be a string.")
    haystack, needle = str(text), str(target)
    if not needle or len(needle) > len(haystack):
        return -1
    return haystack.find(needle)


def contains(collection: Any, target: Any) -> bool:
    """Return whether a list holds a value, a string holds a substring, or a map a key."""
    if isinstance(collection, PiList):
        return any(equals(item, target) for item in collection)
    if _is_text(collection):
        return _substring_position("contains", collection, target) >= 0
    if isinstance(collection, PiMap):
        return collection.has(target)
    raise PiError("[contains] First argument must be a list, string, or map.")


def index_of(collection: Any, target: Any) -> int:
    """Return the position of the first match in a list or string, or -1."""
    if isinstance(collection, PiList):
        return next(
            (position for position, item in enumerate(collection) if equals(item, target)),
            -1,
        )
    if _is_text(collection):
        return _substring_position("index_of", collection, target)
    raise PiError("[index_of] First argument must be a list or a string.")


def reverse(collection: Any) -> PiList | PiString:
    """Return a reversed copy of a list or string, leaving the original untouched."""
    if isinstance(collection, PiList):
        return PiList(list(reversed(collection.items)))
    if _is_text(collection):
        return PiString(str(collection)[::-1])
    raise PiError("[reverse] argument must be a list or a string.")


def shuffle(items: Any) -> PiList:
    """Shuffle a list in place and return it."""
    if not isinstance(items, PiList):
        raise PiError("[shuffle] argument must be a list.")
    random.shuffle(items.items)
    return items


def _with_flags(items: list, source: PiList) -> PiList:
    return PiList(items, is_numeric=source.is_numeric, is_matrix=source.is_matrix)


def copy(collection: Any) -> PiList | PiString:
    """Return a shallow copy of a list (keeping its flags) or a string."""
    if _is_text(collection):
        return PiString(str(collection))
    if isinstance(collection, PiList):
        return _with_flags(list(collection.items), collection)
    raise PiError("[copy] only works with lists or strings.")


def slice_of(collection: Any, start: Any, end: Any) -> PiList | PiString:
    """Return the elements from start to end, both inclusive; negative indices count from the end."""
    if not isinstance(collection, PiList) and not _is_text(collection):
        raise PiError("[slice] first argument must be a list or a string.")
    if not is_numeric(start) or not is_numeric(end):
        raise PiError("[slice] second and third arguments must be numbers.")
    size = len(collection)
    first = normalize_index(as_number(start), size)
    last = normalize_index(as_number(end), size)
    if first > last:
        raise PiError("[slice] start index must be less than or equal to end index.")
    if isinstance(collection, PiList):
        return _with_flags(collection.items[first : last + 1], collection)
    return PiString(str(collection)[first : last + 1])


def length(collection: Any) -> int | None:
    """Return the number of elements of a list, string or map; None for anything else."""
    if isinstance(collection, (PiList, PiMap)) or _is_text(collection):
        return len(collection)
    return None