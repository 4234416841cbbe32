"""Matrix and vector builtins."""

from __future__ import annotations

from typing import Any

from .values import PiError, PiList, as_number, is_numeric


def _require_dims(rows: Any, cols: Any) -> tuple[int, int]:
    if not is_numeric(rows) or not is_numeric(cols):
        raise PiError("Expected two numbers (rows, cols)")
    return int(rows), int(cols)


def _filled(rows: int, cols: int, cell) -> PiList:
    items = [PiList([cell(i, j) for j in range(cols)]) for i in range(rows)]
    return PiList(items, is_numeric=True, is_matrix=True, rows=rows, cols=cols)


def size(matrix: Any) -> PiList:
    """Return [rows, cols] of a matrix."""
    if not isinstance(matrix, PiList) or not matrix.is_matrix:
        raise PiError("Expected a matrix (list of lists)")
    return PiList([matrix.rows, matrix.cols], is_numeric=True, is_matrix=True, rows=1, cols=2)


def zeros(rows: Any, cols: Any) -> PiList:
    """Return a rows x cols matrix of zeros."""
    r, c = _require_dims(rows, cols)
    return _filled(r, c, lambda i, j: 0.0)


def ones(rows: Any, cols: Any) -> PiList:
    """Return a rows x cols matrix of ones."""
    r, c = _require_dims(rows, cols)
    return _filled(r, c, lambda i, j: 1.0)


def eye(rows: Any, cols: Any) -> PiList:
    """Return a rows x cols identity matrix."""
    r, c = _require_dims(rows, cols)
    return _filled(r, c, lambda i, j: 1.0 if i == j else 0.0)


def _row(value: Any) -> PiList:
    if not isinstance(value, PiList):
        raise PiError("Matrix rows must be lists.")
    return value


def mult(a: Any, b: Any) -> PiList:
    """Return the matrix product a x b."""
    if not isinstance(a, PiList) or not isinstance(b, PiList):
        raise PiError("Expected two matrices (list of lists)")
    if not a.is_numeric or not b.is_numeric:
        raise PiError("Matrix multiplication requires numeric lists.")
    if a.cols == -1 or b.cols == -1:
        raise PiError("Matrix dimensions are not set properly.")
    if a.cols != b.rows:
        raise PiError("Matrix multiplication dimension mismatch.")

    b_rows = [_row(row) for row in b.items[: b.rows]]
    result = []
    for row_value in a.items[: a.rows]:
        row = _row(row_value).items
        result.append(
            PiList(
                [
                    sum(as_number(row[k]) * as_number(b_rows[k].items[j]) for k in range(a.cols))
                    for j in range(b.cols)
                ]
            )
        )
    return PiList(result)


def dot(a: Any, b: Any) -> float:
    """Return the dot product of two numeric vectors of equal length."""
    if not isinstance(a, PiList) or not isinstance(b, PiList):
        raise PiError("dot: Expected two numeric vectors (lists)")
    if not a.is_numeric or not b.is_numeric:
        raise PiError("dot: Vectors must be numeric")
    if len(a) != len(b):
        raise PiError("dot: Vectors must be of same length")
    return sum(as_number(x) * as_number(y) for x, y in zip(a, b))


def cross(a: Any, b: Any) -> PiList:
    """Return the cross product of two 3D numeric vectors."""
    if not isinstance(a, PiList) or not isinstance(b, PiList):
        raise PiError("cross: Expected two 3D numeric vectors")
    if not a.is_numeric or not b.is_numeric:
        raise PiError("cross: Vectors must be numeric")
    if len(a) != 3 or len(b) != 3:
        raise PiError("cross: Only 3D vectors supported")
    a1, a2, a3 = (as_number(v) for v in a)
    b1, b2, b3 = (as_number(v) for v in b)
    return PiList(
        [a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1],
        is_numeric=True,
        is_matrix=True,
    )


def is_mat(value: Any) -> bool:
    """Return whether a list is flagged as a matrix."""
    if not isinstance(value, PiList):
        raise PiError("Expected a matrix (list of lists)")
    return bool(value.is_matrix)