# matrix.py
"""Augmented matrix with the explicit row operations of Gauss-Jordan inversion."""

import numpy as np


class AugmentedMatrix:
    """The block matrix [M | I] for a square matrix M.

    Reducing the left block to the identity leaves M's inverse in the right
    block. Elimination is deliberately unpivoted: rows are processed in
    order and never swapped.
    """

    def __init__(self, square):
        square = np.asarray(square, dtype=float)
        if square.ndim != 2 or square.shape[0] != square.shape[1]:
            raise ValueError(f"Expected a square matrix, got shape {square.shape}")
        self.size = square.shape[0]
        self.rows = np.hstack([square, np.eye(self.size)])

    def pivot(self, i):
        return self.rows[i, i]

    def normalize_row(self, i, divisor):
        """Divide every entry of row i by divisor."""
        self.rows[i] = self.rows[i] / divisor

    def eliminate_column(self, pivot_row):
        """Subtract multiples of pivot_row so column pivot_row is zero in every other row."""
        source = self.rows[pivot_row]
        for j in range(self.size):
            if j == pivot_row:
                continue
            factor = self.rows[j, pivot_row]
            self.rows[j] = self.rows[j] - factor * source

    def gauss_jordan(self):
        """Reduce the left block to the identity in place.

        Returns False as soon as a diagonal pivot is exactly zero; the matrix
        is left partially reduced in that case.
        """
        for i in range(self.size):
            pivot = self.pivot(i)
            if pivot == 0:
                return False
            self.normalize_row(i, pivot)
            self.eliminate_column(i)
        return True

    def inverse(self):
        return self.rows[:, self.size:].copy()

    def __repr__(self):
        return f"AugmentedMatrix[{self.size}x{2 * self.size}]"
