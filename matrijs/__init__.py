"""Dense 2D matrices of floats with elementwise arithmetic and dot products."""

from .errors import IndexOutOfBounds, LiteralSyntaxError, MatrixError, ShapeMismatch
from .literal import matrix, parse
from .matrix import Matrix

__version__ = "0.1.0"

__all__ = [
    "IndexOutOfBounds",
    "LiteralSyntaxError",
    "Matrix",
    "MatrixError",
    "ShapeMismatch",
    "matrix",
    "parse",
]
