"""Builtins that add, remove and reorder the elements of lists and strings."""

from __future__ import annotations

from typing import Any

from .values import (
    PiError,
    PiList,
    PiMap,
    PiString,
    as_number,
    as_string,
    normalize_index,
    type_name,
)


def _is_text(value: Any) -> bool:
    return isinstance(value, (PiString, str))


def pop(collection: Any) -> Any:
    """Remove and return the last element of a list or last character of a string."""
    if isinstance(collection, PiList):
        if not collection.items:
            raise PiError("[pop] Cannot pop from an empty list.")
        return collection.items.pop()
    if isinstance(collection, PiString):
        if not collection.chars:
            raise PiError("[pop] Cannot pop from an empty string.")
        last = collection.chars[-1]
        collection.chars = collection.chars[:-1]
        return PiString(last)
    raise PiError("[pop] Argument must be a list or a string.")


def push(target: Any, *args: Any) -> int:
    """Append values to a list, or single characters to a string; return the new length."""
    if not args:
        raise PiError("[push] expects at least two arguments.")
    if isinstance(target, PiList):
        target.items.extend(args)
        return len(target)
    if isinstance(target, PiString):
        for arg in args:
            if not _is_text(arg):
                raise PiError("[push] When pushing to a string, all values must be strings.")
            if len(str(arg)) != 1:
                raise PiError("[push] Only single-character strings can be pushed to a string.")
            target.chars += str(arg)
        return len(target)
    raise PiError("[push] First argument must be a list or a string.")


def peek(collection: Any) -> Any:
    """Return the last element or character without removing it."""
    if isinstance(collection, PiList):
        if not collection.items:
            raise PiError("[peek] Cannot peek from an empty list.")
        return collection.items[-1]
    if _is_text(collection):
        text = str(collection)
        if not text:
            raise PiError("[peek] Cannot peek from an empty string.")
        return PiString(text[-1])
    raise PiError("[peek] Argument must be a list or a string.")


def empty(collection: Any) -> bool:
    """Return whether a list, string or map has no elements."""
    if isinstance(collection, (PiList, PiMap)) or _is_text(collection):
        return len(collection) == 0
    raise PiError("[empty] Argument must be a list, string, or map.")


def sort(items: Any) -> None:
    """Sort a list of numbers or of strings in place, in ascending order."""
    if not isinstance(items, PiList):
        raise PiError("[sort] Argument must be a list.")
    if len(items) <= 1:
        return None
    kind = type_name(items.items[0])
    if kind not in ("number", "string"):
        raise PiError("[sort] List elements must all be numbers or strings.")
    if any(type_name(item) != kind for item in items.items[1:]):
        raise PiError("[sort] List elements must all be of the same type.")
    items.items.sort(key=as_number if kind == "number" else str)
    return None


def insert(collection: Any, index: Any, value: Any) -> Any:
    """Insert a value into a list, or a value's text into a string, at an index."""
    position = int(as_number(index))
    if isinstance(collection, PiList):
        if not 0 <= position <= len(collection):
            raise PiError("[insert] Index out of bounds for list.")
        collection.items.insert(position, value)
        return collection
    if isinstance(collection, PiString):
        text = as_string(value)
        position = normalize_index(position, len(collection))
        chars = collection.chars
        collection.chars = chars[:position] + text + chars[position:]
        return collection
    raise PiError("[insert] First argument must be a list or string.")


def remove(collection: Any, index: Any) -> Any:
    """Remove and return the element or character at an index."""
    position = int(as_number(index))
    if isinstance(collection, PiList):
        return collection.items.pop(normalize_index(position, len(collection)))
    if isinstance(collection, PiString):
        position = normalize_index(position, len(collection))
        chars = collection.chars
        collection.chars = chars[:position] + chars[position + 1:]
        return PiString(chars[position])
    raise PiError("[remove] First argument must be a list or string.")


def unshift(target: Any, *args: Any) -> int:
    """Prepend each value in turn to a list or string; return the new length.

    Every value goes to the front as it is taken, so the last one ends up first.
    """
    if not args:
        raise PiError("[unshift] expects at least two arguments: collection and values.")
    if isinstance(target, PiList):
        for arg in args:
            target.items.insert(0, arg)
        return len(target)
    if isinstance(target, PiString):
        if not all(_is_text(arg) for arg in args):
            raise PiError("[unshift] All values must be strings when prepending to a string.")
        target.chars = "".join(str(arg) for arg in reversed(args)) + target.chars
        return len(target)
    raise PiError("[unshift] First argument must be a list or a string.")


def append(target: Any, *args: Any) -> int:
    """Append values to a list, or strings to a string; return the new length."""
    if not args:
        raise PiError("[append] expects at least two arguments: collection and values.")
    if isinstance(target, PiList):
        target.items.extend(args)
        return len(target)
    if isinstance(target, PiString):
        if not all(_is_text(arg) for arg in args):
            raise PiError("[append] All values must be strings when appending to a string.")
        target.chars += "".join(str(arg) for arg in args)
        return len(target)
    raise PiError("[append] First argument must be a list or a string.")