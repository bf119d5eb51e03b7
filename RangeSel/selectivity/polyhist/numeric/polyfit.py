# polyfit.py
"""Least-squares polynomial fitting through the normal equations."""
import logging

import numpy as np

from selectivity.polyhist import config
from selectivity.polyhist.structures import FitResult, FitStatus
from .matrix import AugmentedMatrix

logger = logging.getLogger(__name__)


def moment_system(x, y, order):
    """
    Builds the normal equations of a least-squares polynomial fit.

    Args:
        x: Sample coordinates (histogram bin centers).
        y: Sample values (bin frequencies).
        order: Polynomial order k.

    Returns:
        Tuple (moments, rhs): the (k+1)x(k+1) matrix of power sums
        moments[i][j] = sum(x**(i+j)) and the vector rhs[j] = sum(y * x**j).
    """
    powers = np.vander(x, 2 * order + 1, increasing=True)
    power_sums = powers.sum(axis=0)
    idx = np.arange(order + 1)
    moments = power_sums[np.add.outer(idx, idx)]
    rhs = powers[:, :order + 1].T @ y
    return moments, rhs


def polyfit(x, y, order, max_order=config.MAX_POLY_ORDER):
    """
    Fits a polynomial of the given order to (x, y) samples by least squares.

    The moment matrix is inverted with unpivoted Gauss-Jordan elimination and
    multiplied by the right-hand side. This is only well behaved for small
    orders and x coordinates of moderate magnitude.

    Returns:
        FitResult with coefficients[i] multiplying x**i, or a failure status.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape or x.ndim != 1:
        raise ValueError(f"x and y must be 1-D and equal length, got {x.shape} and {y.shape}")
    if order < 0:
        raise ValueError(f"Polynomial order must be non-negative, got {order}")

    if len(x) <= order:
        logger.debug("Cannot fit order %d to %d samples", order, len(x))
        return FitResult(FitStatus.INSUFFICIENT_SAMPLES)
    if order > max_order:
        logger.debug("Order %d exceeds maximum %d", order, max_order)
        return FitResult(FitStatus.ORDER_TOO_LARGE)

    moments, rhs = moment_system(x, y, order)
    reduction = AugmentedMatrix(moments)
    if not reduction.gauss_jordan():
        logger.debug("Singular moment matrix for %d samples, order %d", len(x), order)
        return FitResult(FitStatus.SINGULAR_SYSTEM)

    coefficients = reduction.inverse() @ rhs
    return FitResult(FitStatus.OK, coefficients)
