"""Typer-powered command-line interface for quick matrix arithmetic."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_LOG_LEVEL, DEFAULT_PRECISION, RenderOptions, parse_log_level
from .errors import MatrixError
from .literal import matrix, parse
from .matrix import Matrix
from .render import to_table

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    help="Dense matrix arithmetic from the command line. Matrices are written as '0, 1; 2, 3'.",
    no_args_is_help=True,
)
console = Console()


class Operation(str, Enum):
    add = "add"
    sub = "sub"
    mul = "mul"
    div = "div"


@app.callback()
def configure(
    ctx: typer.Context,
    precision: int = typer.Option(
        DEFAULT_PRECISION,
        "--precision",
        help="Digits printed after the decimal point.",
        min=0,
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        help="Logging level name, e.g. DEBUG or INFO.",
    ),
) -> None:
    """Shared rendering and logging options."""

    try:
        level = parse_log_level(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")
    ctx.obj = RenderOptions(precision=precision)


def _fail(exc: MatrixError) -> typer.Exit:
    console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=1)


def _read(literal: str) -> Matrix:
    try:
        return parse(literal)
    except MatrixError as exc:
        raise _fail(exc) from exc


def _show(ctx: typer.Context, m: Matrix, title: Optional[str] = None) -> None:
    options: RenderOptions = ctx.obj or RenderOptions()
    console.print(to_table(m, RenderOptions(precision=options.precision, title=title)))


@app.command("show")
def show(ctx: typer.Context, literal: str = typer.Argument(..., help="Matrix literal.")) -> None:
    """Print a matrix and its shape."""

    _show(ctx, _read(literal), title="matrix")


@app.command("transpose")
def transpose(ctx: typer.Context, literal: str = typer.Argument(..., help="Matrix literal.")) -> None:
    """Print the transpose of a matrix."""

    _show(ctx, _read(literal).t(), title="transpose")


@app.command("dot")
def dot(
    ctx: typer.Context,
    left: str = typer.Argument(..., help="Left matrix literal (m x n)."),
    right: str = typer.Argument(..., help="Right matrix literal (n x p)."),
) -> None:
    """Print the matrix product LEFT . RIGHT."""

    a, b = _read(left), _read(right)
    try:
        product = a.dot(b)
    except MatrixError as exc:
        raise _fail(exc) from exc
    _show(ctx, product, title="dot")


@app.command("elementwise")
def elementwise(
    ctx: typer.Context,
    operation: Operation = typer.Argument(..., help="Operation applied entry by entry."),
    left: str = typer.Argument(..., help="Left matrix literal."),
    right: str = typer.Argument(..., help="Right matrix literal or a scalar."),
) -> None:
    """Combine a matrix with another matrix of the same shape, or with a scalar."""

    a = _read(left)
    try:
        b: float | Matrix = float(right)
    except ValueError:
        b = _read(right)
    try:
        if operation is Operation.add:
            result = a + b
        elif operation is Operation.sub:
            result = a - b
        elif operation is Operation.mul:
            result = a * b
        else:
            result = a / b
    except MatrixError as exc:
        raise _fail(exc) from exc
    _show(ctx, result, title=operation.value)


@app.command("identity")
def identity(ctx: typer.Context, size: int = typer.Argument(..., help="Number of rows and columns.")) -> None:
    """Print the identity matrix of the given size."""

    try:
        m = Matrix.identity(size)
    except MatrixError as exc:
        raise _fail(exc) from exc
    _show(ctx, m, title="identity")


@app.command("diagonal")
def diagonal(ctx: typer.Context, values: str = typer.Argument(..., help="Comma-separated diagonal entries.")) -> None:
    """Print a square matrix with VALUES on the diagonal."""

    _show(ctx, Matrix.diagonal(_read(values).array()), title="diagonal")


@app.command("demo")
def demo(ctx: typer.Context) -> None:
    """Walk through construction, scalar math, dot products, and appends."""

    m = matrix([0.0, 1.0], [-1.0, 0.0])
    _show(ctx, m, title="m")
    m += 1.0
    m *= -10.0
    _show(ctx, m, title="(m + 1) * -10")

    a = matrix([0.0, 1.0], [2.0, 3.0])
    b = matrix([4.0, 5.0, 6.0], [7.0, 8.0, 9.0])
    i = Matrix.identity(2)
    console.print(f"identity . a == a: [bold]{i.dot(a) == a}[/bold]")
    _show(ctx, a.dot(b), title="a . b")

    ones = Matrix.one(2, 2)
    ones.append_row([0.0, 0.0])
    _show(ctx, ones, title="ones with appended row")
    console.print(f"shape: [cyan]{ones.shape()}[/cyan]")


def main() -> None:
    """Entry point for ``python -m matrijs``."""

    app()


if __name__ == "__main__":
    main()
