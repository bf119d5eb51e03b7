"""Tests for the augmented matrix used in Gauss-Jordan inversion."""

import numpy as np
import pytest

from selectivity.polyhist.numeric.matrix import AugmentedMatrix


def test_inverse_of_regular_matrix():
    """Reducing [M | I] leaves the inverse of M on the right."""
    reduction = AugmentedMatrix([[4.0, 7.0], [2.0, 6.0]])
    assert reduction.gauss_jordan()
    np.testing.assert_allclose(reduction.inverse(), [[0.6, -0.7], [-0.2, 0.4]])
    np.testing.assert_allclose(reduction.rows[:, :2], np.eye(2), atol=1e-12)


def test_zero_pivot_stops_without_row_swaps():
    """An exactly-zero diagonal pivot fails even when the matrix is invertible."""
    reduction = AugmentedMatrix([[0.0, 1.0], [1.0, 0.0]])
    assert not reduction.gauss_jordan()


def test_row_operations():
    reduction = AugmentedMatrix([[2.0, 4.0], [3.0, 5.0]])
    reduction.normalize_row(0, reduction.pivot(0))
    np.testing.assert_allclose(reduction.rows[0], [1.0, 2.0, 0.5, 0.0])
    reduction.eliminate_column(0)
    np.testing.assert_allclose(reduction.rows[1], [0.0, -1.0, -1.5, 1.0])
    np.testing.assert_allclose(reduction.rows[0], [1.0, 2.0, 0.5, 0.0])


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        AugmentedMatrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
