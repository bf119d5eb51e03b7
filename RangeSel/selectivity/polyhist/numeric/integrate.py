# integrate.py
"""Evaluation and definite integration of fitted polynomials."""

import numpy as np

from selectivity.polyhist import config


def evaluate_polynomial(coefficients, x):
    """Sum of coefficients[i] * x**i; x may be a scalar or a numpy array."""
    s = 0.0
    for i, c in enumerate(coefficients):
        s = s + (x ** i) * c
    return s


def trapezoidal(coefficients, a, b, panels=config.TRAPEZOID_PANELS):
    """Composite trapezoidal approximation of the polynomial's integral over [a, b]."""
    if panels < 1:
        raise ValueError(f"Panel count must be at least 1, got {panels}")
    if a == b:
        return 0.0

    h = (b - a) / panels
    s = evaluate_polynomial(coefficients, a) + evaluate_polynomial(coefficients, b)
    interior = a + np.arange(1, panels) * h
    s += 2 * np.sum(evaluate_polynomial(coefficients, interior))
    return float((h / 2) * s)
