"""Light-weight kernels over flat row-major float lists."""

from __future__ import annotations

import operator
from typing import Any, Callable, List, Sequence, Tuple

from .errors import ShapeMismatch

Data = List[float]


def as_index(value: Any, what: str = "matrix indices") -> int:
    """Coerce an integer-like value (``int``, ``numpy.int64``, ...) to ``int``."""

    if isinstance(value, bool):
        raise TypeError(f"{what} must be integers, got bool")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{what} must be integers, got {type(value).__name__}") from exc


def ensure_shape(rows: Any, cols: Any) -> Tuple[int, int]:
    rows = as_index(rows, "matrix dimensions")
    cols = as_index(cols, "matrix dimensions")
    if rows < 1 or cols < 1:
        raise ShapeMismatch(
            f"matrix dimensions must be positive, got {rows}x{cols}",
            expected="rows >= 1 and cols >= 1",
            actual=(rows, cols),
        )
    return rows, cols


def ensure_length(values: Sequence[float], expected: int, what: str) -> None:
    if len(values) != expected:
        raise ShapeMismatch(
            f"{what} has length {len(values)}, expected {expected}",
            expected=expected,
            actual=len(values),
        )


def filled(rows: int, cols: int, value: float) -> Data:
    return [value] * (rows * cols)


def zeros(rows: int, cols: int) -> Data:
    return filled(rows, cols, 0.0)


def identity(n: int) -> Data:
    eye = zeros(n, n)
    for i in range(n):
        eye[i * n + i] = 1.0
    return eye


def diagonal(values: Sequence[float]) -> Data:
    n = len(values)
    out = zeros(n, n)
    for i, value in enumerate(values):
        out[i * n + i] = value
    return out


def row(data: Sequence[float], cols: int, index: int) -> Data:
    start = index * cols
    return list(data[start : start + cols])


def column(data: Sequence[float], rows: int, cols: int, index: int) -> Data:
    return [data[i * cols + index] for i in range(rows)]


def transpose(data: Sequence[float], rows: int, cols: int) -> Data:
    """Return ``data`` re-laid out so that entry ``(j, i)`` holds the old ``(i, j)``."""

    out: Data = []
    for j in range(cols):
        out.extend(column(data, rows, cols, j))
    return out


def insert_column(data: Sequence[float], rows: int, cols: int, values: Sequence[float]) -> Data:
    out: Data = []
    for i in range(rows):
        out.extend(row(data, cols, i))
        out.append(values[i])
    return out


def elementwise(left: Sequence[float], right: Sequence[float], op: Callable[[float, float], float]) -> Data:
    if len(left) != len(right):
        raise ShapeMismatch("matrix dimensions do not match", expected=len(left), actual=len(right))
    return [op(l_val, r_val) for l_val, r_val in zip(left, right)]


def scalar(data: Sequence[float], value: float, op: Callable[[float, float], float]) -> Data:
    return [op(entry, value) for entry in data]


def matmul(left: Sequence[float], right: Sequence[float], rows: int, inner: int, cols: int) -> Data:
    """Multiply a ``rows x inner`` matrix by an ``inner x cols`` matrix.

    Both operands and the result are flat row-major lists.
    """

    ensure_length(left, rows * inner, "left operand")
    ensure_length(right, inner * cols, "right operand")
    out = zeros(rows, cols)
    for i in range(rows):
        for j in range(cols):
            total = 0.0
            for k in range(inner):
                total += left[i * inner + k] * right[k * cols + j]
            out[i * cols + j] = total
    return out
