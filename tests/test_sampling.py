"""
Unit tests for per content type sampling.
"""

import pytest

from content_bench.sampling import SampleCollector, throughput_per_minute


class TestTrialCounts:
    """Warmup trials run but never reach the statistics."""

    def test_retains_exactly_iterations(self, scripted_operation):
        operation = scripted_operation([17.0, 3.0, 250.0, 91.5, 4.0])
        result = SampleCollector(operation).collect("slides", iterations=5, warmup=0)
        assert result.latency.sample_count == 5
        assert result.memory.sample_count == 5
        assert len(operation.calls) == 5

    def test_warmup_values_excluded(self, scripted_operation):
        operation = scripted_operation([9999.0, 8888.0, 7777.0, 100.0, 200.0])
        result = SampleCollector(operation).collect("slides", iterations=2, warmup=3)
        assert len(operation.calls) == 5
        assert result.latency.sample_count == 2
        assert result.latency.min == 100.0
        assert result.latency.max == 200.0

    def test_warmup_memory_excluded(self, scripted_operation):
        operation = scripted_operation([100.0], memory_mb=[999.0, 998.0, 5.0, 6.0])
        result = SampleCollector(operation).collect("slides", iterations=2, warmup=2)
        assert result.memory.sample_count == 2
        assert result.memory.min == 5.0
        assert result.memory.max == 6.0
        assert result.memory.mean == 5.5

    def test_warmup_failures_do_not_count(self, scripted_operation):
        # trials 1-2 are warmup and fail, the rest succeed
        operation = scripted_operation([100.0], succeeded=lambda n: n > 2)
        result = SampleCollector(operation).collect("slides", iterations=4, warmup=2)
        assert result.success_rate == 100.0

    def test_operation_called_with_content_type(self, scripted_operation):
        operation = scripted_operation([100.0])
        SampleCollector(operation).collect("research-analysis", iterations=2, warmup=1)
        assert operation.calls == ["research-analysis"] * 3


class TestRates:
    """Success rate and throughput derivation."""

    def test_always_succeeds(self, scripted_operation):
        result = SampleCollector(scripted_operation([100.0])).collect("slides", 7, 0)
        assert result.success_rate == 100.0

    def test_always_fails(self, scripted_operation):
        result = SampleCollector(scripted_operation([100.0], succeeded=False)).collect("slides", 7, 0)
        assert result.success_rate == 0.0

    def test_partial_success_rounded(self, scripted_operation):
        operation = scripted_operation([100.0], succeeded=lambda n: n != 2)
        result = SampleCollector(operation).collect("slides", 3, 0)
        assert result.success_rate == 66.67

    def test_four_sample_scenario(self, scripted_operation):
        operation = scripted_operation([100.0, 200.0, 300.0, 400.0])
        result = SampleCollector(operation).collect("slides", iterations=4, warmup=0)
        assert result.content_type == "slides"
        assert result.iterations == 4
        assert result.warmup_iterations == 0
        assert result.latency.min == 100.0
        assert result.latency.max == 400.0
        assert result.latency.mean == 250.0
        assert result.latency.p50 == 300.0
        assert result.success_rate == 100.0
        assert result.throughput == 240.0

    def test_throughput_from_unrounded_mean(self, scripted_operation):
        operation = scripted_operation([1000.0, 2000.0, 2000.0])
        result = SampleCollector(operation).collect("slides", 3, 0)
        # mean is 1666.666..., 1000 / mean * 60 = 36.0 exactly
        assert result.throughput == 36.0

    @pytest.mark.parametrize("mean", [0, 0.0, -1.0])
    def test_throughput_undefined_is_zero(self, mean):
        assert throughput_per_minute(mean) == 0.0


class TestVerbose:
    """Verbose output is a side channel only."""

    def test_prints_each_trial(self, scripted_operation, capsys):
        operation = scripted_operation([100.0, 200.0, 300.0], succeeded=lambda n: n != 3)
        SampleCollector(operation, verbose=True).collect("slides", iterations=2, warmup=1)
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "  [warmup] slides: 100ms OK",
            "  [1/2] slides: 200ms OK",
            "  [2/2] slides: 300ms ERROR",
        ]

    def test_quiet_by_default(self, scripted_operation, capsys):
        SampleCollector(scripted_operation([100.0])).collect("slides", 2, 1)
        assert capsys.readouterr().out == ""

    def test_same_result_either_way(self, scripted_operation):
        quiet = SampleCollector(scripted_operation([100.0, 300.0])).collect("slides", 4, 1)
        loud = SampleCollector(scripted_operation([100.0, 300.0]), verbose=True).collect("slides", 4, 1)
        assert quiet == loud


class TestFailures:
    """Exceptions from the operation are not swallowed."""

    def test_operation_exception_propagates(self):
        def operation(content_type):
            raise RuntimeError("generator crashed")

        with pytest.raises(RuntimeError, match="generator crashed"):
            SampleCollector(operation).collect("slides", 3, 0)
