"""Tests for fit results and range histogram geometry."""

import numpy as np

from selectivity.polyhist.structures import FitResult, FitStatus, RangeHistogram


def test_bin_centers_from_own_lower_bound():
    hist = RangeHistogram([1, 2, 3, 4], 2.0, 1.5, 8.0, lower_bound=10.0)
    np.testing.assert_allclose(hist.bin_centers(), [1.0, 3.0, 5.0, 7.0])
    assert hist.domain() == (0.0, 8.0)


def test_bin_centers_from_shared_origin():
    """Histograms joined together are measured from the smaller lower bound."""
    hist = RangeHistogram([1, 2, 3], 2.0, 1.0, 6.0, lower_bound=14.0)
    np.testing.assert_allclose(hist.bin_centers(origin=10.0), [5.0, 7.0, 9.0])
    assert hist.domain(origin=10.0) == (4.0, 10.0)


def test_histogram_counts_become_floats():
    hist = RangeHistogram([1, 2], 1.0, 1.0, 2.0)
    assert hist.counts.dtype == float
    assert hist.num_bins == 2


def test_fit_result_status():
    ok = FitResult(FitStatus.OK, np.array([1.0, 2.0, 3.0]))
    failed = FitResult(FitStatus.SINGULAR_SYSTEM)
    assert ok.ok and ok.order == 2
    assert not failed.ok and failed.order is None
    assert "singular_system" in repr(failed)
