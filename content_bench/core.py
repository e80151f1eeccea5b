"""
Core benchmark orchestration.

Runs every configured content type through a SampleCollector, rolls the
per-type results up into an overall summary and assembles the report.
"""

import statistics
import time
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from .constants import REPORT_PRECISION, STATUS_INFO, STATUS_OK, STATUS_WARN
from .models import BenchmarkReport, ContentTypeResult, OverallSummary, RunConfiguration
from .sampling import SampleCollector
from .stats import summarize


class BenchmarkError(Exception):
    """Raised when benchmark execution fails."""
    pass


class OperationError(BenchmarkError):
    """Raised when a trial cannot be executed at all."""
    pass


def summarize_overall(results: Sequence[ContentTypeResult],
                      total_duration_ms: int) -> OverallSummary:
    """
    Roll per content type results into an overall summary.

    The overall latency distribution is rebuilt from each type's mean
    repeated sample_count times, not from the raw trial latencies, so
    overall percentiles are percentiles of per-type means.

    Args:
        results: Per content type results (unrounded)
        total_duration_ms: Wall-clock duration of the whole run

    Returns:
        OverallSummary with unweighted average rates
    """
    reconstructed: List[float] = []
    for result in results:
        reconstructed.extend([result.latency.mean] * result.latency.sample_count)

    if results:
        avg_success = statistics.mean(r.success_rate for r in results)
        avg_throughput = statistics.mean(r.throughput for r in results)
    else:
        avg_success = avg_throughput = 0.0

    return OverallSummary(
        latency=summarize(reconstructed),
        average_success_rate=round(avg_success, REPORT_PRECISION),
        average_throughput=round(avg_throughput, REPORT_PRECISION),
        total_duration_ms=total_duration_ms,
    )


class BenchmarkRunner:
    """
    Sequential benchmark orchestration across content types.

    The work itself is delegated to an injected operation; environment
    metadata comes from collector objects exposing get_system_info().
    """

    def __init__(self, operation, collectors: Optional[List[Any]] = None):
        """
        Initialize benchmark runner.

        Args:
            operation: Callable taking a content type and returning a Sample
            collectors: Environment collectors queried at report time
        """
        self.operation = operation
        self.collectors = collectors if collectors is not None else []

    def collect_environment(self) -> Dict[str, Any]:
        """
        Query every collector for environment metadata.

        Collectors without a get_system_info() method are skipped.

        Returns:
            Merged dictionary of all collector results
        """
        environment: Dict[str, Any] = {}
        for collector in self.collectors:
            if hasattr(collector, "get_system_info"):
                environment.update(collector.get_system_info())
        return environment

    def run(self, config: RunConfiguration) -> BenchmarkReport:
        """
        Execute the complete benchmark.

        Any exception raised by the operation aborts the whole run; there
        is no per content type isolation.

        Args:
            config: Run configuration

        Returns:
            BenchmarkReport with rounded distributions
        """
        print("Content generation performance benchmark")
        print(f"Benchmark configuration: {STATUS_INFO} "
              f"({config.iterations} iterations, {config.warmup} warmup per content type)")
        print(f"Content types: {', '.join(config.content_types)}")

        collector = SampleCollector(self.operation, verbose=config.verbose)
        results: List[ContentTypeResult] = []

        start_time = time.perf_counter()
        for content_type in config.content_types:
            print()
            print(f"Benchmarking: {content_type}")
            result = collector.collect(content_type, config.iterations, config.warmup)
            results.append(result)

            status = STATUS_OK if result.success_rate == 100 else STATUS_WARN
            print(f"  Avg latency: {result.latency.mean:.2f}ms")
            print(f"  P95 latency: {result.latency.p95:.2f}ms")
            print(f"  Success rate: {status} ({result.success_rate}%)")
            print(f"  Throughput: {result.throughput} req/min")
        total_duration_ms = int(round((time.perf_counter() - start_time) * 1000))

        overall = summarize_overall(results, total_duration_ms)

        return BenchmarkReport(
            timestamp=datetime.now(timezone.utc).isoformat(),
            configuration=config,
            results=tuple(r.rounded() for r in results),
            overall=replace(overall, latency=overall.latency.rounded()),
            environment=self.collect_environment(),
        )
