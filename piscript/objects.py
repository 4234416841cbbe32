"""Map builtins: cloning and listing keys and values."""

from __future__ import annotations

from typing import Any

from .values import PiError, PiList, PiMap, PiString


def _require_map(value: Any, name: str) -> PiMap:
    if not isinstance(value, PiMap):
        raise PiError(f"[{name}] expects a map as the first argument.")
    return value


def clone(mapping: Any) -> PiMap:
    """Return a new map with the same entries whose prototype is the original."""
    original = _require_map(mapping, "clone")
    return PiMap(dict(original.table), proto=original)


def values(mapping: Any) -> PiList:
    """Return the map's values in key order."""
    source = _require_map(mapping, "values")
    return PiList([source.table[key] for key in source.keys()])


def keys(mapping: Any) -> PiList:
    """Return the map's keys as strings."""
    source = _require_map(mapping, "keys")
    return PiList([PiString(key) for key in source.keys()])