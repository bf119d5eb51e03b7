# main_estimator.py
"""Planner-facing estimator backed by polynomial fits of range histograms."""
import logging

from ..ConstantEstimator import ConstantEstimator
from .estimator import fractions
from . import config

logger = logging.getLogger(__name__)


class PolyHistEstimator(ConstantEstimator):
    """Facade turning catalog histograms into clamped operator selectivities.

    Overlap and left-of operators are estimated from the histograms in the
    catalog. Columns without statistics, and operators without a histogram
    formula, get the constant estimates.

    Bin centers are synthesized relative to an origin and then divided by the
    span being estimated, so the fitter always sees coordinates in [0, 1].
    Fractions are ratios of integrals and do not depend on that scale.
    """

    def __init__(self, hist_catalog, order=config.POLY_ORDER, panels=config.TRAPEZOID_PANELS):
        super().__init__()
        if hist_catalog is None:
            raise ValueError("Histogram catalog cannot be None")
        self.hist_catalog = hist_catalog
        self.order = order
        self.panels = panels

    def _lookup(self, column):
        hist = self.hist_catalog.get(*column)
        if hist is None:
            logger.debug("No histogram available for %s.%s", *column)
        return hist

    def _samples(self, hist, origin, scale):
        """Bin centers, counts and domain of hist in units of scale from origin."""
        start, end = hist.domain(origin)
        return hist.bin_centers(origin) / scale, hist.counts, (start / scale, end / scale)

    def overlap_sel(self, column, const_lower, const_upper):
        fallback = super().overlap_sel(column, const_lower, const_upper)
        hist = self._lookup(column)
        if hist is None or hist.histogram_width <= 0:
            return fallback

        origin, scale = hist.lower_bound, hist.histogram_width
        x, y, domain = self._samples(hist, origin, scale)
        result = fractions.overlap_fraction(
            x, y, domain, (const_lower - origin) / scale, (const_upper - origin) / scale,
            order=self.order, panels=self.panels, fallback=fallback)
        return self.clamp(result, fallback)

    def overlap_join_sel(self, left, right):
        fallback = super().overlap_join_sel(left, right)
        hist1 = self._lookup(left)
        hist2 = self._lookup(right)
        if hist1 is None or hist2 is None:
            return fallback

        # Both histograms are measured from the smaller lower bound
        origin = min(hist1.lower_bound, hist2.lower_bound)
        scale = max(hist1.domain(origin)[1], hist2.domain(origin)[1])
        if scale <= 0:
            return fallback

        logger.debug("Joining two histograms: [%f, %f] && [%f, %f]",
                     *hist1.domain(0.0), *hist2.domain(0.0))
        result = fractions.join_overlap_fraction(
            *self._samples(hist1, origin, scale),
            *self._samples(hist2, origin, scale),
            order=self.order, panels=self.panels, fallback=fallback)
        return self.clamp(result, fallback)

    def left_of_sel(self, column, const_value):
        fallback = super().left_of_sel(column, const_value)
        hist = self._lookup(column)
        if hist is None or hist.histogram_width <= 0:
            return fallback

        origin, scale = hist.lower_bound, hist.histogram_width
        x, y, domain = self._samples(hist, origin, scale)
        result = fractions.left_of_fraction(
            x, y, domain, (const_value - origin) / scale,
            order=self.order, panels=self.panels, fallback=fallback)
        return self.clamp(result, fallback)
