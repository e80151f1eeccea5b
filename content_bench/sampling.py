"""
Per content type sampling: warmup trials followed by measured trials.
"""

from typing import List

from .constants import REPORT_PRECISION, STATUS_ERROR, STATUS_OK
from .models import ContentTypeResult, Sample
from .stats import summarize


def throughput_per_minute(mean_latency_ms: float) -> float:
    """Operations per minute implied by a mean latency; 0.0 when undefined."""
    if mean_latency_ms <= 0:
        return 0.0
    return 1000 / mean_latency_ms * 60


class SampleCollector:
    """
    Drive one content type through warmup and measured trials.

    Trials run strictly one after another so each trial's resource usage
    is attributable to it alone.
    """

    def __init__(self, operation, verbose: bool = False):
        """
        Initialize sample collector.

        Args:
            operation: Callable taking a content type and returning a Sample
            verbose: Print one progress line per trial
        """
        self.operation = operation
        self.verbose = verbose

    def _report_trial(self, content_type: str, prefix: str, sample: Sample) -> None:
        status = STATUS_OK if sample.succeeded else STATUS_ERROR
        print(f"  {prefix} {content_type}: {sample.latency_ms:.0f}ms {status}")

    def collect(self, content_type: str, iterations: int, warmup: int) -> ContentTypeResult:
        """
        Run warmup + measured trials for a content type.

        Warmup trials invoke the operation but never reach the statistics.

        Args:
            content_type: Label passed to the operation
            iterations: Number of measured trials
            warmup: Number of discarded leading trials

        Returns:
            ContentTypeResult with unrounded distributions
        """
        samples: List[Sample] = []

        for trial in range(iterations + warmup):
            sample = self.operation(content_type)
            is_warmup = trial < warmup
            if not is_warmup:
                samples.append(sample)

            if self.verbose:
                prefix = "[warmup]" if is_warmup else f"[{trial - warmup + 1}/{iterations}]"
                self._report_trial(content_type, prefix, sample)

        latency = summarize(s.latency_ms for s in samples)
        memory = summarize(s.memory_mb for s in samples)
        succeeded = sum(1 for s in samples if s.succeeded)

        # Denominator is the configured count, not len(samples)
        success_rate = succeeded / iterations * 100 if iterations > 0 else 0.0

        return ContentTypeResult(
            content_type=content_type,
            iterations=iterations,
            warmup_iterations=warmup,
            latency=latency,
            memory=memory,
            success_rate=round(success_rate, REPORT_PRECISION),
            throughput=round(throughput_per_minute(latency.mean), REPORT_PRECISION),
        )
