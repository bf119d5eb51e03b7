# fractions.py
"""Selectivity fractions computed from polynomial density fits of histograms.

Each histogram is given as bin centers (x) and bin frequencies (y) together
with the domain [min, max] assumed to hold all of its mass. The fitted curve
stands in for the value density; a fraction is the mass over the predicate's
interval divided by the mass over the whole domain.

Results are not clamped. When a fit fails or a histogram carries no mass the
operation returns its fallback instead.
"""
import logging
import math

from selectivity.polyhist import config
from selectivity.polyhist.numeric.integrate import trapezoidal
from selectivity.polyhist.numeric.polyfit import polyfit

logger = logging.getLogger(__name__)


def _fit(x, y, order):
    result = polyfit(x, y, order)
    if not result.ok:
        logger.warning("Polynomial fit failed (%s) for %d samples", result.status.value, len(x))
        return None
    return result.coefficients


def _usable_mass(total):
    return math.isfinite(total) and total != 0


def join_overlap_fraction(xa, ya, domain_a, xb, yb, domain_b,
                          order=config.POLY_ORDER, panels=config.TRAPEZOID_PANELS,
                          fallback=config.DEFAULT_AREA_SEL):
    """
    Estimates the fraction of row pairs whose values fall in both domains' overlap.

    Each side's share of mass inside the overlap window is computed on its own
    fit and the two shares are multiplied, treating the sides as independent.

    Returns:
        0.0 when the domains do not intersect, the fallback when either fit
        fails or either histogram has zero total mass.
    """
    min_a, max_a = domain_a
    min_b, max_b = domain_b
    start = max(min_a, min_b)
    end = min(max_a, max_b)
    if start >= end:
        logger.debug("No intersection between [%f, %f] and [%f, %f]", min_a, max_a, min_b, max_b)
        return 0.0

    coefs_a = _fit(xa, ya, order)
    coefs_b = _fit(xb, yb, order)
    if coefs_a is None or coefs_b is None:
        return fallback

    total_a = trapezoidal(coefs_a, min_a, max_a, panels)
    total_b = trapezoidal(coefs_b, min_b, max_b, panels)
    if not (_usable_mass(total_a) and _usable_mass(total_b)):
        logger.warning("Histogram without usable mass (total_a=%s, total_b=%s)", total_a, total_b)
        return fallback

    intersect_a = trapezoidal(coefs_a, start, end, panels)
    intersect_b = trapezoidal(coefs_b, start, end, panels)
    result = (intersect_a / total_a) * (intersect_b / total_b)

    logger.debug("Overlap window [%f, %f]: total_a=%f total_b=%f intersect_a=%f intersect_b=%f -> %f",
                 start, end, total_a, total_b, intersect_a, intersect_b, result)
    return result


def left_of_fraction(x, y, domain, threshold,
                     order=config.POLY_ORDER, panels=config.TRAPEZOID_PANELS,
                     fallback=config.DEFAULT_POSITION_SEL):
    """Estimates the fraction of mass lying left of threshold."""
    min_v, max_v = domain
    if threshold < min_v:
        return 0.0
    if threshold > max_v:
        return 1.0

    coefs = _fit(x, y, order)
    if coefs is None:
        return fallback

    total = trapezoidal(coefs, min_v, max_v, panels)
    if not _usable_mass(total):
        logger.warning("Histogram without usable mass (total=%s)", total)
        return fallback

    partial = trapezoidal(coefs, min_v, threshold, panels)
    logger.debug("Calculating [%f, %f] / [%f, %f]: %f / %f", min_v, threshold, min_v, max_v, partial, total)
    return partial / total


def overlap_fraction(x, y, domain, const_lower, const_upper,
                     order=config.POLY_ORDER, panels=config.TRAPEZOID_PANELS,
                     fallback=config.DEFAULT_AREA_SEL):
    """
    Estimates the fraction of mass overlapping the constant range [const_lower, const_upper].

    A query range entirely outside the domain gives 0.0 and one strictly
    containing the domain gives 1.0 without fitting. Otherwise the query range
    is clamped to the domain before integrating.
    """
    min_v, max_v = domain
    if const_upper < min_v or const_lower > max_v:
        return 0.0
    if const_lower < min_v and const_upper > max_v:
        return 1.0

    lower = max(min_v, const_lower)
    upper = min(max_v, const_upper)

    coefs = _fit(x, y, order)
    if coefs is None:
        return fallback

    total = trapezoidal(coefs, min_v, max_v, panels)
    if not _usable_mass(total):
        logger.warning("Histogram without usable mass (total=%s)", total)
        return fallback

    partial = trapezoidal(coefs, lower, upper, panels)
    logger.debug("Calculating [%f, %f] / [%f, %f]: %f / %f", lower, upper, min_v, max_v, partial, total)
    return partial / total
