from __future__ import annotations

from random import Random

import pytest

from matrijs import Matrix


def random_matrix(rows: int, cols: int, seed: int) -> Matrix:
    rng = Random(seed)
    return Matrix.new(rows, cols, [rng.uniform(-5.0, 5.0) for _ in range(rows * cols)])


@pytest.fixture()
def square() -> Matrix:
    return Matrix.new(3, 3, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0])


@pytest.fixture()
def wide() -> Matrix:
    return Matrix.new(2, 3, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
