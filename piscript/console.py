"""Console builtins: printing values, formatted output and reading input."""

from __future__ import annotations

import sys
from typing import Any

from .values import PiError, PiString, as_string

OUTPUT_LIMIT = 1024
INPUT_BUFFER_SIZE = 1024


def println(*args: Any) -> None:
    """Print the text of every argument, joined without separators, then a newline."""
    pieces = []
    length = 0
    for arg in args:
        text = as_string(arg)
        if length + len(text) >= OUTPUT_LIMIT:
            raise PiError("[println] Output string is too long.")
        pieces.append(text)
        length += len(text)
    sys.stdout.write("".join(pieces) + "\n")
    return None


def print_values(*args: Any) -> None:
    """Print the text of every argument with no separator and no newline."""
    if not args:
        raise PiError("[print] expects at least one argument.")
    sys.stdout.write("".join(as_string(arg) for arg in args))
    return None


def _format(fmt: str, args: tuple) -> str:
    out = []
    position = 0
    while position < len(fmt):
        ch = fmt[position]
        if (
            ch == "{"
            and position + 2 < len(fmt)
            and fmt[position + 1] in "0123456789"
            and fmt[position + 2] == "}"
        ):
            index = int(fmt[position + 1])
            if index >= len(args):
                raise PiError("[printf] argument index out of range.")
            out.append(as_string(args[index]))
            position += 3
        elif ch == "\\" and fmt[position + 1 : position + 2] == "n":
            out.append("\n")
            position += 2
        else:
            out.append(ch)
            position += 1
    return "".join(out)


def printf(fmt: Any, *args: Any) -> None:
    """Print a format string where {n} is replaced by argument n and \\n by a newline."""
    if not isinstance(fmt, (PiString, str)):
        raise PiError("[printf] expects a format string as the first argument.")
    sys.stdout.write(_format(str(fmt), args))
    return None


def input_line(prompt: Any) -> PiString:
    """Show a prompt, read one line from standard input and return it without its newline."""
    if not isinstance(prompt, (PiString, str)):
        raise PiError("[input] expects a single string argument as a prompt.")
    sys.stdout.write(str(prompt))
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise PiError("[input] Failed to read input.")
    line = line[: INPUT_BUFFER_SIZE - 1]
    if line.endswith("\n"):
        line = line[:-1]
    return PiString(line)