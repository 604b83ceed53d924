from __future__ import annotations

import math

import pytest

from matrijs import Matrix, ShapeMismatch


def test_new_round_trips_flat_data() -> None:
    values = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    m = Matrix.new(2, 3, values)
    assert m.array() == values
    assert m.shape() == (2, 3)
    assert (m.rows, m.cols) == (2, 3)


def test_new_rejects_wrong_length() -> None:
    with pytest.raises(ShapeMismatch) as info:
        Matrix.new(2, 2, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    assert info.value.expected == 4
    assert info.value.actual == 6


def test_new_copies_input() -> None:
    values = [1.0, 2.0]
    m = Matrix.new(1, 2, values)
    values[0] = 99.0
    assert m[0, 0] == 1.0


def test_integers_are_stored_as_floats() -> None:
    m = Matrix.new(1, 2, [1, 2])
    assert all(isinstance(v, float) for v in m.array())


@pytest.mark.parametrize("bad", [True, "1.0", None])
def test_non_real_entries_are_rejected(bad) -> None:
    with pytest.raises(TypeError):
        Matrix.new(1, 2, [1.0, bad])


@pytest.mark.parametrize("rows,cols", [(0, 2), (2, 0), (0, 0), (-1, 3)])
def test_degenerate_shapes_are_rejected(rows: int, cols: int) -> None:
    with pytest.raises(ShapeMismatch):
        Matrix.new(rows, cols, [])
    with pytest.raises(ShapeMismatch):
        Matrix.zero(rows, cols)


def test_degenerate_square_constructors_are_rejected() -> None:
    with pytest.raises(ShapeMismatch):
        Matrix.identity(0)
    with pytest.raises(ShapeMismatch):
        Matrix.diagonal([])


def test_with_value() -> None:
    m = Matrix.with_value(2, 3, math.pi)
    assert m.shape() == (2, 3)
    assert m.array() == [math.pi] * 6


def test_zero_and_one() -> None:
    assert Matrix.zero(2, 2) == Matrix.new(2, 2, [0.0] * 4)
    assert Matrix.one(2, 3) == Matrix.new(2, 3, [1.0] * 6)


def test_square_convenience() -> None:
    assert Matrix.zero(3) == Matrix.zero(3, 3)
    assert Matrix.one(2) == Matrix.one(2, 2)


def test_identity() -> None:
    expected = Matrix.new(3, 3, [
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        0.0, 0.0, 1.0,
    ])
    assert Matrix.identity(3) == expected


def test_diagonal() -> None:
    values = [1.0, 3.0, 1.0, 2.0]
    d = Matrix.diagonal(values)
    assert d.shape() == (4, 4)
    for i in range(4):
        for j in range(4):
            assert d[i, j] == (values[i] if i == j else 0.0)


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ShapeMismatch):
        Matrix.from_rows([[1.0, 2.0], [3.0]])
    with pytest.raises(ShapeMismatch):
        Matrix.from_rows([])


def test_copy_is_independent(square: Matrix) -> None:
    other = square.copy()
    other[0, 0] = 42.0
    assert square[0, 0] == 0.0
    assert other != square


def test_integer_like_dimensions_are_accepted() -> None:
    np = pytest.importorskip("numpy")
    m = Matrix.new(np.int64(2), np.int64(1), [1.0, 2.0])
    assert m.shape() == (2, 1)
    assert type(m.rows) is int
    assert Matrix.identity(np.int32(2)) == Matrix.identity(2)
    assert Matrix.zero(np.int64(3)).shape() == (3, 3)


@pytest.mark.parametrize("rows", [2.0, "2", True])
def test_non_integer_dimensions_are_rejected(rows) -> None:
    with pytest.raises(TypeError):
        Matrix.zero(rows, 2)
