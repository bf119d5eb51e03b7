# stats_builder.py
"""Offline statistics generation: equi-width histograms over range columns."""
import logging

import numpy as np

from .structures import RangeHistogram
from .catalog.hist_catalog import HistogramCatalog
from . import config

logger = logging.getLogger(__name__)


class StatsBuilder:
    """Builds equi-width range histograms from raw range bounds."""

    def __init__(self, num_bins=config.DEFAULT_NUM_BINS):
        if num_bins < 1:
            raise ValueError(f"Number of bins must be at least 1, got {num_bins}")
        self.num_bins = num_bins

    def build_all(self, dataset):
        """Builds a catalog from {(table, column): (lowers, uppers)}; unusable columns are skipped."""
        catalog = HistogramCatalog()
        for (table, column), (lowers, uppers) in dataset.items():
            histogram = self.build_histogram(lowers, uppers)
            if histogram is None:
                logger.info("Skipping column %s.%s: no usable ranges", table, column)
                continue
            logger.debug("Built histogram for %s.%s: %r", table, column, histogram)
            catalog.set(table, column, histogram)
        return catalog

    def build_histogram(self, lowers, uppers):
        """
        Builds the histogram of a single range column.

        The histogram spans [min(lowers), max(uppers)] split into num_bins
        equal bins. A bin counts every range that overlaps it, so a wide range
        contributes to several bins.

        Returns:
            RangeHistogram, or None for empty input or a zero-width span.
        """
        lowers = np.asarray(lowers, dtype=float)
        uppers = np.asarray(uppers, dtype=float)
        if lowers.shape != uppers.shape:
            raise ValueError("Lower and upper bound arrays must have the same shape")
        if lowers.size == 0:
            return None
        if np.any(lowers > uppers):
            raise ValueError("Every range must satisfy lower <= upper")

        min_val = lowers.min()
        width = uppers.max() - min_val
        if width <= 0:
            return None

        bin_width = width / self.num_bins
        last_bin = self.num_bins - 1
        first = np.clip(np.floor((lowers - min_val) / bin_width), 0, last_bin).astype(int)
        last = np.clip(np.ceil((uppers - min_val) / bin_width) - 1, 0, last_bin).astype(int)
        last = np.maximum(first, last)

        # +1 where a range starts covering bins, -1 just past where it stops
        deltas = np.zeros(self.num_bins + 1)
        np.add.at(deltas, first, 1)
        np.add.at(deltas, last + 1, -1)
        counts = np.cumsum(deltas[:-1])

        avg_bins = float(np.mean(last - first + 1))
        return RangeHistogram(counts, bin_width, avg_bins, width, min_val)
