"""Dense row-major matrix of double-precision floats."""

from __future__ import annotations

import logging
import math
import operator
from numbers import Real
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from . import _matrix
from .errors import IndexOutOfBounds, ShapeMismatch
from .render import format_matrix

LOGGER = logging.getLogger(__name__)

Shape = Tuple[int, int]


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"matrix entries must be real numbers, got {type(value).__name__}")
    return float(value)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        # Python raises where IEEE 754 produces inf or nan.
        if math.isnan(left) or left == 0.0:
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Matrix:
    """A ``rows x cols`` grid of floats stored as one flat row-major list.

    Entry ``(i, j)`` lives at flat index ``i * cols + j``. Each instance owns
    its storage; copies are deep and no two matrices share a list.

    >>> m = Matrix(2, 2, [0.0, 1.0, -1.0, 0.0])
    >>> m += 1.0
    >>> m == Matrix(2, 2, [1.0, 2.0, 0.0, 1.0])
    True
    """

    __slots__ = ("_rows", "_cols", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, values: Iterable[float]) -> None:
        rows, cols = _matrix.ensure_shape(rows, cols)
        data = [_to_float(value) for value in values]
        _matrix.ensure_length(data, rows * cols, "values")
        self._rows = rows
        self._cols = cols
        self._data = data

    @classmethod
    def _from_data(cls, rows: int, cols: int, data: List[float]) -> "Matrix":
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._data = data
        return m

    # construction

    @classmethod
    def new(cls, rows: int, cols: int, values: Iterable[float]) -> "Matrix":
        """Build a matrix from a flat row-major sequence of ``rows * cols`` values."""

        return cls(rows, cols, values)

    @classmethod
    def with_value(cls, rows: int, cols: int, value: float) -> "Matrix":
        rows, cols = _matrix.ensure_shape(rows, cols)
        return cls._from_data(rows, cols, _matrix.filled(rows, cols, _to_float(value)))

    @classmethod
    def zero(cls, rows: int, cols: Optional[int] = None) -> "Matrix":
        """All-zero matrix; a single argument gives a square matrix."""

        return cls.with_value(rows, rows if cols is None else cols, 0.0)

    @classmethod
    def one(cls, rows: int, cols: Optional[int] = None) -> "Matrix":
        """All-one matrix; a single argument gives a square matrix."""

        return cls.with_value(rows, rows if cols is None else cols, 1.0)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        n, _ = _matrix.ensure_shape(n, n)
        return cls._from_data(n, n, _matrix.identity(n))

    @classmethod
    def diagonal(cls, values: Sequence[float]) -> "Matrix":
        """Square matrix with ``values[k]`` at ``(k, k)`` and zero elsewhere."""

        diag = [_to_float(value) for value in values]
        _matrix.ensure_shape(len(diag), len(diag))
        return cls._from_data(len(diag), len(diag), _matrix.diagonal(diag))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows."""

        rows = [list(r) for r in rows]
        if not rows:
            raise ShapeMismatch("a matrix needs at least one row", expected="rows >= 1", actual=0)
        width = len(rows[0])
        data: List[float] = []
        for index, r in enumerate(rows):
            if len(r) != width:
                raise ShapeMismatch(
                    f"row {index} has {len(r)} entries, expected {width}",
                    expected=width,
                    actual=len(r),
                )
            data.extend(r)
        return cls(len(rows), width, data)

    # introspection

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def shape(self) -> Shape:
        """Return ``(rows, cols)``."""

        return (self._rows, self._cols)

    def array(self) -> List[float]:
        """Return a copy of the flat row-major data."""

        return list(self._data)

    def to_rows(self) -> List[List[float]]:
        return [_matrix.row(self._data, self._cols, i) for i in range(self._rows)]

    def row(self, index: int) -> List[float]:
        index = _matrix.as_index(index)
        if not 0 <= index < self._rows:
            raise IndexOutOfBounds(index, self.shape())
        return _matrix.row(self._data, self._cols, index)

    def col(self, index: int) -> List[float]:
        index = _matrix.as_index(index)
        if not 0 <= index < self._cols:
            raise IndexOutOfBounds(index, self.shape())
        return _matrix.column(self._data, self._rows, self._cols, index)

    def copy(self) -> "Matrix":
        return self._from_data(self._rows, self._cols, list(self._data))

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.copy()

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be a (row, col) tuple")
        i, j = (_matrix.as_index(x) for x in key)
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexOutOfBounds(key, self.shape())
        return i * self._cols + j

    def __getitem__(self, key: Tuple[int, int]) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        offset = self._offset(key)
        self._data[offset] = _to_float(value)

    # transpose

    def transpose(self) -> None:
        """Transpose in place."""

        data = _matrix.transpose(self._data, self._rows, self._cols)
        self._rows, self._cols = self._cols, self._rows
        self._data = data

    def t(self) -> "Matrix":
        """Return the transpose, leaving this matrix untouched."""

        m = self.copy()
        m.transpose()
        return m

    # structural mutation

    def append_row(self, row: Sequence[float]) -> None:
        values = [_to_float(value) for value in row]
        if len(values) != self._cols:
            raise ShapeMismatch(
                f"row has {len(values)} entries, matrix has {self._cols} columns",
                expected=self._cols,
                actual=len(values),
            )
        self._data.extend(values)
        self._rows += 1
        LOGGER.debug("Appended row; shape is now %s", self.shape())

    def append_column(self, col: Sequence[float]) -> None:
        values = [_to_float(value) for value in col]
        if len(values) != self._rows:
            raise ShapeMismatch(
                f"column has {len(values)} entries, matrix has {self._rows} rows",
                expected=self._rows,
                actual=len(values),
            )
        self._data = _matrix.insert_column(self._data, self._rows, self._cols, values)
        self._cols += 1
        LOGGER.debug("Appended column; shape is now %s", self.shape())

    append_col = append_column

    # arithmetic

    def _combined(self, other: Any, op: Callable[[float, float], float]) -> Optional[List[float]]:
        if isinstance(other, Matrix):
            if other.shape() != self.shape():
                raise ShapeMismatch(
                    f"cannot combine {self._rows}x{self._cols} with {other._rows}x{other._cols}",
                    expected=self.shape(),
                    actual=other.shape(),
                )
            return _matrix.elementwise(self._data, other._data, op)
        if _is_scalar(other):
            return _matrix.scalar(self._data, float(other), op)
        return None

    def _binary(self, other: Any, op: Callable[[float, float], float]) -> "Matrix":
        data = self._combined(other, op)
        if data is None:
            return NotImplemented
        return self._from_data(self._rows, self._cols, data)

    def _inplace(self, other: Any, op: Callable[[float, float], float]) -> "Matrix":
        data = self._combined(other, op)
        if data is None:
            return NotImplemented
        self._data = data
        return self

    def __add__(self, other: Any) -> "Matrix":
        return self._binary(other, operator.add)

    def __sub__(self, other: Any) -> "Matrix":
        return self._binary(other, operator.sub)

    def __mul__(self, other: Any) -> "Matrix":
        """Entry-by-entry product; see :meth:`dot` for matrix multiplication."""

        return self._binary(other, operator.mul)

    def __truediv__(self, other: Any) -> "Matrix":
        return self._binary(other, _divide)

    def __iadd__(self, other: Any) -> "Matrix":
        return self._inplace(other, operator.add)

    def __isub__(self, other: Any) -> "Matrix":
        return self._inplace(other, operator.sub)

    def __imul__(self, other: Any) -> "Matrix":
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other: Any) -> "Matrix":
        return self._inplace(other, _divide)

    def dot(self, other: "Matrix") -> "Matrix":
        """Matrix product of ``self`` (m x n) and ``other`` (n x p).

        Entry ``(i, j)`` of the m x p result is ``sum(self[i, k] * other[k, j])``
        over ``k``.

        >>> a = Matrix(2, 2, [0.0, 1.0, 2.0, 3.0])
        >>> b = Matrix(2, 3, [4.0, 5.0, 6.0, 7.0, 8.0, 9.0])
        >>> a.dot(b).array()
        [7.0, 8.0, 9.0, 29.0, 34.0, 39.0]
        """

        if not isinstance(other, Matrix):
            raise TypeError(f"dot expects a Matrix, got {type(other).__name__}")
        if self._cols != other._rows:
            raise ShapeMismatch(
                f"cannot multiply {self._rows}x{self._cols} by {other._rows}x{other._cols}: "
                "inner dimensions differ",
                expected=self._cols,
                actual=other._rows,
            )
        LOGGER.debug("dot %s x %s", self.shape(), other.shape())
        data = _matrix.matmul(self._data, other._data, self._rows, self._cols, other._cols)
        return self._from_data(self._rows, other._cols, data)

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    # comparison and display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and all(a == b for a, b in zip(self._data, other._data))
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    def __str__(self) -> str:
        return format_matrix(self)
