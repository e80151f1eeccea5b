"""
Distribution statistics for benchmark samples.

Percentiles use nearest rank by truncation: the value at index
floor(N * k) of the sorted samples, clamped to the last element.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable

from .constants import REPORT_PRECISION


@dataclass(frozen=True)
class DistributionSummary:
    """Summary of a sequence of samples. All fields are zero when empty."""

    min: float = 0
    max: float = 0
    mean: float = 0
    p50: float = 0
    p95: float = 0
    p99: float = 0
    std_dev: float = 0
    sample_count: int = 0

    def rounded(self, ndigits: int = REPORT_PRECISION) -> "DistributionSummary":
        """Return a copy with the averaged fields rounded for reporting."""
        return replace(
            self,
            mean=round(self.mean, ndigits),
            std_dev=round(self.std_dev, ndigits),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "avg": self.mean,
            "p50": self.p50,
            "p95": self.p95,
            "p99": self.p99,
            "stdDev": self.std_dev,
            "samples": self.sample_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DistributionSummary":
        return cls(
            min=data["min"],
            max=data["max"],
            mean=data["avg"],
            p50=data["p50"],
            p95=data["p95"],
            p99=data["p99"],
            std_dev=data["stdDev"],
            sample_count=data["samples"],
        )


def percentile(sorted_values, rank: float) -> float:
    """Nearest-rank percentile of an already sorted, non-empty sequence."""
    index = min(int(math.floor(len(sorted_values) * rank)), len(sorted_values) - 1)
    return sorted_values[index]


def summarize(values: Iterable[float]) -> DistributionSummary:
    """
    Compute a distribution summary.

    Args:
        values: Samples in any order

    Returns:
        DistributionSummary with population standard deviation. An empty
        input gives the zeroed summary.
    """
    ordered = sorted(values)
    count = len(ordered)
    if count == 0:
        return DistributionSummary()

    # fsum can still land one ulp outside the sample range
    mean = min(max(math.fsum(ordered) / count, ordered[0]), ordered[-1])
    variance = sum((x - mean) ** 2 for x in ordered) / count

    return DistributionSummary(
        min=ordered[0],
        max=ordered[-1],
        mean=mean,
        p50=percentile(ordered, 0.5),
        p95=percentile(ordered, 0.95),
        p99=percentile(ordered, 0.99),
        std_dev=math.sqrt(variance),
        sample_count=count,
    )
