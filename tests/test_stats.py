"""
Unit tests for distribution statistics.
"""

import math

import pytest

from content_bench.stats import DistributionSummary, percentile, summarize


DATASETS = [
    [42.0],
    [100.0, 200.0, 300.0, 400.0],
    [5.5, 1.25, 9.0, 3.0, 3.0, 7.75, 0.0],
    [float(x) for x in range(1, 101)],
    [25012.7, 23891.2, 27344.9, 22105.3, 26000.0, 24999.9],
]


class TestEmptyInput:
    """The empty sequence is a defined degenerate case."""

    def test_all_fields_zero(self):
        summary = summarize([])
        assert summary == DistributionSummary()
        assert summary.sample_count == 0
        assert summary.min == summary.max == summary.mean == 0
        assert summary.p50 == summary.p95 == summary.p99 == summary.std_dev == 0

    def test_accepts_generator(self):
        assert summarize(x for x in []).sample_count == 0


class TestKnownValues:
    """Exact results for hand-computed inputs."""

    def test_four_sample_scenario(self):
        summary = summarize([100.0, 200.0, 300.0, 400.0])
        assert summary.min == 100.0
        assert summary.max == 400.0
        assert summary.mean == 250.0
        assert summary.p50 == 300.0
        assert summary.p95 == 400.0
        assert summary.p99 == 400.0
        assert summary.sample_count == 4

    def test_population_std_dev(self):
        summary = summarize([100.0, 200.0, 300.0, 400.0])
        assert summary.std_dev == pytest.approx(math.sqrt(12500.0))

    def test_single_value(self):
        summary = summarize([7.0])
        assert summary.min == summary.max == summary.p50 == summary.p95 == summary.p99 == 7.0
        assert summary.std_dev == 0

    def test_hundred_values_percentiles(self):
        summary = summarize([float(x) for x in range(1, 101)])
        assert summary.p50 == 51.0
        assert summary.p95 == 96.0
        assert summary.p99 == 100.0

    def test_repeated_values_mean_stays_in_range(self):
        summary = summarize([0.1, 0.1, 0.1])
        assert summary.min <= summary.mean <= summary.max

    def test_percentile_clamps_to_last_index(self):
        assert percentile([1.0, 2.0], 0.99) == 2.0
        assert percentile([1.0, 2.0], 1.0) == 2.0


class TestInvariants:
    """Properties that hold for any non-empty input."""

    @pytest.mark.parametrize("values", DATASETS)
    def test_ordering(self, values):
        s = summarize(values)
        assert s.min <= s.p50 <= s.p95 <= s.p99 <= s.max
        assert s.min <= s.mean <= s.max

    @pytest.mark.parametrize("values", DATASETS)
    def test_permutation_invariant(self, values):
        forward = summarize(values)
        assert summarize(list(reversed(values))) == forward
        assert summarize(sorted(values)) == forward
        rotated = values[len(values) // 2:] + values[:len(values) // 2]
        assert summarize(rotated) == forward

    def test_does_not_round_internally(self):
        summary = summarize([1.0, 2.0, 2.0])
        assert summary.mean == pytest.approx(5.0 / 3.0)
        assert summary.mean != 1.67


class TestRounding:
    """Rounding happens only when asked for."""

    def test_rounded_mean_and_std_dev(self):
        summary = summarize([1.0, 2.0, 2.0]).rounded()
        assert summary.mean == 1.67
        assert summary.std_dev == 0.47
        assert summary.min == 1.0
        assert summary.sample_count == 3

    def test_to_dict_uses_report_keys(self):
        data = summarize([100.0, 200.0, 300.0, 400.0]).to_dict()
        assert set(data) == {"min", "max", "avg", "p50", "p95", "p99", "stdDev", "samples"}
        assert data["avg"] == 250.0
        assert data["samples"] == 4
        assert DistributionSummary.from_dict(data) == summarize([100.0, 200.0, 300.0, 400.0])
