"""Tests for building equi-width range histograms."""

import numpy as np
import pytest

from selectivity.polyhist.stats_builder import StatsBuilder


def test_bins_count_every_overlapping_range():
    hist = StatsBuilder(num_bins=5).build_histogram([0.0, 0.0, 5.0], [10.0, 2.0, 10.0])

    np.testing.assert_allclose(hist.counts, [2, 1, 2, 2, 2])
    assert hist.bin_width == pytest.approx(2.0)
    assert hist.histogram_width == pytest.approx(10.0)
    assert hist.lower_bound == 0.0
    assert hist.avg_bins_per_range == pytest.approx(3.0)


def test_point_ranges_on_the_edges():
    hist = StatsBuilder(num_bins=2).build_histogram([0.0, 10.0], [0.0, 10.0])
    np.testing.assert_allclose(hist.counts, [1, 1])


def test_unusable_input():
    builder = StatsBuilder(num_bins=4)
    assert builder.build_histogram([], []) is None
    assert builder.build_histogram([3.0, 3.0], [3.0, 3.0]) is None


def test_invalid_input():
    builder = StatsBuilder(num_bins=4)
    with pytest.raises(ValueError):
        builder.build_histogram([0.0, 1.0], [1.0])
    with pytest.raises(ValueError):
        builder.build_histogram([2.0], [1.0])
    with pytest.raises(ValueError):
        StatsBuilder(num_bins=0)


def test_build_all_skips_unusable_columns():
    dataset = {
        ("t", "good"): (np.array([0.0, 2.0]), np.array([4.0, 8.0])),
        ("t", "empty"): (np.array([]), np.array([])),
    }
    catalog = StatsBuilder(num_bins=4).build_all(dataset)

    assert catalog.get("t", "good") is not None
    assert catalog.get("t", "empty") is None
    assert len(catalog) == 1
