"""Runtime values of the PiScript language and the conversions between them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator

UINT32_MAX = 0xFFFFFFFF
PI = math.pi
E = math.e


class PiError(Exception):
    """Raised when a PiScript operation is given values it cannot work with."""


class XorShift32:
    """The 32-bit xorshift generator used for random numbers."""

    def __init__(self, seed: int) -> None:
        self.state = seed & UINT32_MAX

    def next_uint(self) -> int:
        """Advance the generator and return the new 32-bit state."""
        x = self.state
        x ^= (x << 13) & UINT32_MAX
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MAX
        self.state = x
        return x

    def random(self) -> float:
        """Return a float in the closed range [0, 1]."""
        return self.next_uint() / UINT32_MAX


@dataclass
class PiString:
    """A mutable PiScript string."""

    chars: str = ""

    def __len__(self) -> int:
        return len(self.chars)

    def __str__(self) -> str:
        return self.chars


@dataclass(eq=False)
class PiList:
    """A PiScript list with its numeric and matrix flags.

    Flags left as None are inferred from the items when the list is built.
    """

    items: list = field(default_factory=list)
    is_numeric: bool | None = None
    is_matrix: bool | None = None
    rows: int | None = None
    cols: int | None = None

    def __post_init__(self) -> None:
        numeric, matrix, rows, cols = _infer_shape(self.items)
        if self.is_numeric is None:
            self.is_numeric = numeric
        if self.is_matrix is None:
            self.is_matrix = matrix
        if self.rows is None:
            self.rows = rows
        if self.cols is None:
            self.cols = cols

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


def _infer_shape(items: list) -> tuple[bool, bool, int, int]:
    if all(is_numeric(item) for item in items):
        return True, False, 1, len(items)
    if all(isinstance(row, PiList) and row.is_numeric and not row.is_matrix for row in items):
        widths = {len(row) for row in items}
        if len(widths) == 1:
            return True, True, len(items), widths.pop()
    return False, False, -1, -1


def _key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, PiString):
        return key.chars
    return as_string(key)


@dataclass(eq=False)
class PiMap:
    """A PiScript map from string keys to values, with an optional prototype."""

    table: dict = field(default_factory=dict)
    proto: PiMap | None = None

    def __len__(self) -> int:
        return len(self.table)

    def has(self, key: Any) -> bool:
        """Return whether the key is present in this map."""
        return _key(key) in self.table

    def get(self, key: Any) -> Any:
        """Return the value stored under the key, or None."""
        return self.table.get(_key(key))

    def set(self, key: Any, value: Any) -> None:
        """Store a value under the key."""
        self.table[_key(key)] = value

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return list(self.table)


def normalize_index(index: float, size: int) -> int:
    """Turn a possibly negative index into a position within a sequence of `size`."""
    position = int(index)
    if position < 0:
        position += size
    if not 0 <= position < size:
        raise PiError(f"Index {int(index)} out of bounds for size {size}.")
    return position


def itos(num: float) -> str:
    """Return the decimal text of an integer."""
    return str(int(num))


def is_numeric(value: Any) -> bool:
    """Return whether the value is a number (booleans are not)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_number(value: Any) -> float:
    """Convert a value to a float, raising PiError when it has no numeric meaning."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if is_numeric(value):
        return float(value)
    if value is None:
        return 0.0
    if isinstance(value, (PiString, str)):
        text = str(value).strip()
        try:
            return float(text)
        except ValueError:
            raise PiError(f"Cannot convert '{text}' to a number.") from None
    raise PiError(f"Cannot convert a {type_name(value)} to a number.")


def _format_number(num: float) -> str:
    if math.isfinite(num) and float(num).is_integer():
        return itos(num)
    return repr(float(num))


def as_string(value: Any) -> str:
    """Return the text a value prints as."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_numeric(value):
        return _format_number(value)
    if isinstance(value, (PiString, str)):
        return str(value)
    if isinstance(value, PiList):
        return "[" + ", ".join(as_string(item) for item in value) + "]"
    if isinstance(value, PiMap):
        pairs = (f"{key}: {as_string(val)}" for key, val in value.table.items())
        return "{" + ", ".join(pairs) + "}"
    if callable(value):
        return "<fn>"
    return str(value)


def as_bool(value: Any) -> bool:
    """Return the truth value: nil, false and zero are false."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_numeric(value):
        return value != 0
    return True


def type_name(value: Any) -> str:
    """Return the PiScript name of the value's type."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "bool"
    if is_numeric(value):
        return "number"
    if isinstance(value, (PiString, str)):
        return "string"
    if isinstance(value, PiList):
        return "list"
    if isinstance(value, PiMap):
        return "map"
    if callable(value):
        return "function"
    return "unknown"


def equals(a: Any, b: Any) -> bool:
    """Compare two values: by value for scalars and strings, by identity otherwise."""
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_numeric(a) and is_numeric(b):
        return float(a) == float(b)
    if isinstance(a, (PiString, str)) and isinstance(b, (PiString, str)):
        return str(a) == str(b)
    return a is b