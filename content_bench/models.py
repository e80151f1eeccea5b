"""
Benchmark data model.

Attribute names are Python style; to_dict()/from_dict() map them onto the
camelCase keys of the persisted report so older reports stay comparable.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .constants import CONTENT_TYPES, DEFAULT_ITERATIONS, DEFAULT_WARMUP
from .stats import DistributionSummary


@dataclass(frozen=True)
class RunConfiguration:
    """Parameters of one benchmark run."""

    iterations: int = DEFAULT_ITERATIONS
    warmup: int = DEFAULT_WARMUP
    content_types: Tuple[str, ...] = CONTENT_TYPES
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "content_types", tuple(self.content_types))
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {self.warmup}")
        if not self.content_types:
            raise ValueError("at least one content type is required")
        if len(set(self.content_types)) != len(self.content_types):
            raise ValueError(f"duplicate content types: {', '.join(self.content_types)}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iterations": self.iterations,
            "warmupIterations": self.warmup,
            "contentTypes": list(self.content_types),
            "verbose": self.verbose,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfiguration":
        return cls(
            iterations=data["iterations"],
            warmup=data["warmupIterations"],
            content_types=tuple(data["contentTypes"]),
            verbose=data.get("verbose", False),
        )


@dataclass(frozen=True)
class Sample:
    """Outcome of a single trial."""

    latency_ms: float
    memory_mb: float
    succeeded: bool


@dataclass(frozen=True)
class ContentTypeResult:
    """Measured statistics for one content type."""

    content_type: str
    iterations: int
    warmup_iterations: int
    latency: DistributionSummary
    memory: DistributionSummary
    success_rate: float
    throughput: float

    def rounded(self) -> "ContentTypeResult":
        return ContentTypeResult(
            content_type=self.content_type,
            iterations=self.iterations,
            warmup_iterations=self.warmup_iterations,
            latency=self.latency.rounded(),
            memory=self.memory.rounded(),
            success_rate=self.success_rate,
            throughput=self.throughput,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contentType": self.content_type,
            "iterations": self.iterations,
            "warmupIterations": self.warmup_iterations,
            "latency": self.latency.to_dict(),
            "memory": self.memory.to_dict(),
            "successRate": self.success_rate,
            "throughput": self.throughput,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentTypeResult":
        return cls(
            content_type=data["contentType"],
            iterations=data["iterations"],
            warmup_iterations=data["warmupIterations"],
            latency=DistributionSummary.from_dict(data["latency"]),
            memory=DistributionSummary.from_dict(data["memory"]),
            success_rate=data["successRate"],
            throughput=data["throughput"],
        )


@dataclass(frozen=True)
class OverallSummary:
    """Roll-up across all content types of a run."""

    latency: DistributionSummary
    average_success_rate: float
    average_throughput: float
    total_duration_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "latency": self.latency.to_dict(),
            "averageSuccessRate": self.average_success_rate,
            "averageThroughput": self.average_throughput,
            "totalDuration": self.total_duration_ms,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverallSummary":
        return cls(
            latency=DistributionSummary.from_dict(data["latency"]),
            average_success_rate=data["averageSuccessRate"],
            average_throughput=data["averageThroughput"],
            total_duration_ms=data["totalDuration"],
        )


@dataclass(frozen=True)
class BenchmarkReport:
    """Everything a run persists: configuration, results and environment."""

    timestamp: str
    configuration: RunConfiguration
    results: Tuple[ContentTypeResult, ...]
    overall: OverallSummary
    environment: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "configuration": self.configuration.to_dict(),
            "results": [result.to_dict() for result in self.results],
            "overall": self.overall.to_dict(),
            "environment": self.environment,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkReport":
        return cls(
            timestamp=data["timestamp"],
            configuration=RunConfiguration.from_dict(data["configuration"]),
            results=tuple(ContentTypeResult.from_dict(r) for r in data["results"]),
            overall=OverallSummary.from_dict(data["overall"]),
            environment=dict(data.get("environment", {})),
        )
