"""Shared fixtures for the selectivity estimator tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from selectivity.polyhist.catalog.hist_catalog import HistogramCatalog
from selectivity.polyhist.structures import RangeHistogram


def uniform_histogram(lower_bound, width=8.0, num_bins=7, count=10.0):
    return RangeHistogram([count] * num_bins, width / num_bins, 1.0, width, lower_bound)


@pytest.fixture
def uniform_samples():
    """Seven equally spaced bins of count 10 covering [0, 8]."""
    hist = uniform_histogram(0.0)
    return hist.bin_centers(), hist.counts, hist.domain()


@pytest.fixture
def linear_samples():
    """Seven bins over [0, 8] whose counts grow linearly."""
    hist = RangeHistogram(5.0 * np.arange(1, 8), 8.0 / 7, 1.0, 8.0, 0.0)
    return hist.bin_centers(), hist.counts, hist.domain()


@pytest.fixture
def catalog():
    hist_catalog = HistogramCatalog()
    hist_catalog.set("a", "r", uniform_histogram(0.0))
    hist_catalog.set("b", "r", uniform_histogram(4.0))
    hist_catalog.set("c", "r", uniform_histogram(100.0))
    hist_catalog.set("d", "r", uniform_histogram(50.0))
    return hist_catalog


@pytest.fixture
def make_histogram():
    """Factory for uniform histograms: make_histogram(lower_bound, width=8.0, num_bins=7)."""
    return uniform_histogram
