"""Text and rich-table rendering of matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from rich.table import Table

from .config import RenderOptions

if TYPE_CHECKING:  # pragma: no cover
    from .matrix import Matrix


def _cells(matrix: "Matrix", precision: int) -> List[List[str]]:
    return [[f"{value:.{precision}f}" for value in row] for row in matrix.to_rows()]


def format_matrix(matrix: "Matrix", options: Optional[RenderOptions] = None) -> str:
    """Return a right-aligned grid, one line per row."""

    options = options or RenderOptions()
    cells = _cells(matrix, options.precision)
    width = max(len(cell) for row in cells for cell in row)
    return "\n".join("  ".join(cell.rjust(width) for cell in row) for row in cells)


def to_table(matrix: "Matrix", options: Optional[RenderOptions] = None) -> Table:
    options = options or RenderOptions()
    rows, cols = matrix.shape()
    table = Table(title=options.title, caption=f"{rows} x {cols}", show_header=True)
    for j in range(cols):
        table.add_column(str(j), justify="right")
    for row in _cells(matrix, options.precision):
        table.add_row(*row)
    return table
