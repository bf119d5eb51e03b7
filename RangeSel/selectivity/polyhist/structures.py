# structures.py
"""Data structures (fit results, range histograms) for the PolyHist estimator."""

from enum import Enum

import numpy as np


class FitStatus(Enum):
    """Outcome of a least-squares polynomial fit."""
    OK = "ok"
    INSUFFICIENT_SAMPLES = "insufficient_samples"  # sample count <= order
    ORDER_TOO_LARGE = "order_too_large"            # order above the configured ceiling
    SINGULAR_SYSTEM = "singular_system"            # zero pivot while inverting the moment matrix


class FitResult:
    """Coefficients of a fitted polynomial, or the reason there are none.

    coefficients[i] multiplies x**i. Coefficients are only present when the
    status is FitStatus.OK.
    """
    def __init__(self, status, coefficients=None):
        self.status = status
        self.coefficients = coefficients

    @property
    def ok(self):
        return self.status is FitStatus.OK

    @property
    def order(self):
        if self.coefficients is None:
            return None
        return len(self.coefficients) - 1

    def __repr__(self):
        if not self.ok:
            return f"FitResult[{self.status.value}]"
        coefs = ", ".join(f"{c:.4g}" for c in self.coefficients)
        return f"FitResult[ok, order={self.order}, coefs=({coefs})]"


class RangeHistogram:
    """Equi-width histogram statistics collected for a range-typed column.

    counts holds one frequency per bin; bins are bin_width wide and start at
    lower_bound, the smallest range lower bound seen. histogram_width is the
    total width covered, so the histogram's domain is
    [lower_bound, lower_bound + histogram_width].
    """
    def __init__(self, counts, bin_width, avg_bins_per_range, histogram_width, lower_bound=0.0):
        self.counts = np.asarray(counts, dtype=float)
        self.bin_width = float(bin_width)
        self.avg_bins_per_range = float(avg_bins_per_range)
        self.histogram_width = float(histogram_width)
        self.lower_bound = float(lower_bound)

    @property
    def num_bins(self):
        return len(self.counts)

    def _offset(self, origin):
        if origin is None:
            return 0.0
        return self.lower_bound - origin

    def bin_centers(self, origin=None):
        """Bin center coordinates measured from origin (default: own lower bound)."""
        base = self._offset(origin) + self.bin_width / 2
        return base + self.bin_width * np.arange(self.num_bins)

    def domain(self, origin=None):
        """(min, max) interval assumed to hold all of the histogram's mass."""
        start = self._offset(origin)
        return start, start + self.histogram_width

    def __repr__(self):
        return (f"RangeHistogram[{self.lower_bound:.2f}+{self.histogram_width:.2f}], "
                f"Bins:{self.num_bins}, Width:{self.bin_width:.2f}, "
                f"AvgBins:{self.avg_bins_per_range:.2f}")
