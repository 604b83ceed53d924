"""Readable literal construction.

``matrix([0.0, 1.0], [-1.0, 0.0])`` and ``parse("0, 1; -1, 0")`` both build
the same :class:`~matrijs.matrix.Matrix` as
``Matrix.new(2, 2, [0.0, 1.0, -1.0, 0.0])``.
"""

from __future__ import annotations

from typing import List, Sequence

from .errors import LiteralSyntaxError
from .matrix import Matrix

ROW_SEPARATOR = ";"
COLUMN_SEPARATOR = ","


def matrix(*rows: Sequence[float]) -> Matrix:
    """Build a matrix from rows given as positional arguments."""

    return Matrix.from_rows(rows)


def _parse_entry(token: str, row_index: int) -> float:
    text = token.strip()
    if not text:
        raise LiteralSyntaxError(f"empty entry in row {row_index}")
    try:
        return float(text)
    except ValueError as exc:
        raise LiteralSyntaxError(f"invalid entry {text!r} in row {row_index}") from exc


def parse(text: str) -> Matrix:
    """Parse semicolon-separated rows of comma-separated numbers.

    >>> parse("0, 1; -1, 0").array()
    [0.0, 1.0, -1.0, 0.0]
    """

    chunks = text.strip().split(ROW_SEPARATOR)
    if len(chunks) > 1 and not chunks[-1].strip():
        chunks = chunks[:-1]
    rows: List[List[float]] = []
    for index, chunk in enumerate(chunks):
        if not chunk.strip():
            raise LiteralSyntaxError(f"row {index} is empty")
        rows.append([_parse_entry(token, index) for token in chunk.split(COLUMN_SEPARATOR)])
    return Matrix.from_rows(rows)
