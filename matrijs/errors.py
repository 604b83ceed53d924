"""Exceptions raised by :mod:`matrijs`."""

from __future__ import annotations

from typing import Any, Tuple


class MatrixError(Exception):
    """Base class for every error raised by the matrix container."""


class ShapeMismatch(MatrixError, ValueError):
    """Raised when an operation's dimensional precondition is violated.

    ``expected`` and ``actual`` describe the offending dimensions when the
    caller knows them; they are ``None`` otherwise.
    """

    def __init__(self, message: str, *, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfBounds(MatrixError, IndexError):
    """Raised on element, row, or column access outside the matrix."""

    def __init__(self, index: Any, shape: Tuple[int, int]) -> None:
        super().__init__(f"index {index!r} is out of bounds for shape {shape}")
        self.index = index
        self.shape = shape


class LiteralSyntaxError(MatrixError, ValueError):
    """Raised when a matrix literal cannot be parsed."""
