from __future__ import annotations

import logging

import pytest
from rich.console import Console

from matrijs import matrix
from matrijs.config import DEFAULT_PRECISION, RenderOptions, parse_log_level
from matrijs.render import format_matrix, to_table


def test_format_matrix_aligns_columns() -> None:
    m = matrix([1.0, -20.5], [3.5, 4.0])
    assert format_matrix(m, RenderOptions(precision=1)) == "  1.0  -20.5\n  3.5    4.0"


def test_str_uses_default_precision() -> None:
    assert str(matrix([1.0])) == "1." + "0" * DEFAULT_PRECISION


def test_to_table_has_one_column_per_matrix_column() -> None:
    table = to_table(matrix([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]), RenderOptions(title="m"))
    assert len(table.columns) == 3
    assert table.row_count == 2
    assert table.title == "m"

    console = Console(record=True, width=80)
    console.print(table)
    text = console.export_text()
    assert "6.0000" in text
    assert "2 x 3" in text


def test_render_options_validate_precision() -> None:
    with pytest.raises(ValueError):
        RenderOptions(precision=-1)


@pytest.mark.parametrize(
    "value,expected",
    [(None, logging.WARNING), ("", logging.WARNING), ("debug", logging.DEBUG), (" Info ", logging.INFO)],
)
def test_parse_log_level(value, expected) -> None:
    assert parse_log_level(value) == expected


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        parse_log_level("chatty")
