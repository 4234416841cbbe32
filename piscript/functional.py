"""Higher-order builtins: map, filter, reduce and find."""

from __future__ import annotations

from typing import Any, Callable

from .values import PiError, PiList, PiString, as_bool, is_numeric


def _require(items: Any, fn: Any, usage: str) -> tuple[PiList, Callable]:
    if not isinstance(items, PiList) or not callable(fn):
        raise PiError(usage)
    return items, fn


def map_list(items: Any, fn: Any) -> PiList:
    """Return a new list of fn applied to each item."""
    source, func = _require(items, fn, "map(fn, list): expects a function and a list")
    results = [func(item) for item in source]
    return PiList(
        results,
        is_numeric=all(is_numeric(value) for value in results),
        is_matrix=False,
    )


def filter_list(items: Any, fn: Any) -> PiList:
    """Return a new list of the items for which fn returns a true value."""
    source, func = _require(items, fn, "filter(fn, list): expects a function and a list")
    kept = [item for item in source if as_bool(func(item))]
    return PiList(kept, is_numeric=source.is_numeric, is_matrix=False)


def reduce_list(items: Any, fn: Any, *args: Any) -> Any:
    """Fold the list from the left with fn(acc, item).

    With one extra argument it is the initial accumulator; otherwise the
    first item is.
    """
    source, func = _require(
        items,
        fn,
        "reduce(fn, list, [initial]): expects a function, a list, and optional initial value",
    )
    if len(args) == 1:
        acc = args[0]
        rest = source.items
    else:
        if not source.items:
            raise PiError("reduce(fn, list, [initial]): cannot reduce an empty list without an initial value")
        acc = source.items[0]
        rest = source.items[1:]
    for item in rest:
        acc = func(acc, item)
    return acc


def find(collection: Any, fn: Any) -> int:
    """Return the index of the first item (or character) fn accepts, or -1."""
    if not callable(fn):
        raise PiError("[find] expects two arguments: a function and a collection.")
    if isinstance(collection, PiList):
        elements = collection.items
    elif isinstance(collection, (PiString, str)):
        elements = [PiString(ch) for ch in str(collection)]
    else:
        raise PiError("[find] Second argument must be a list or a string.")
    for position, element in enumerate(elements):
        if as_bool(fn(element)):
            return position
    return -1