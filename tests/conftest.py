"""
Pytest configuration and shared fixtures.

Provides deterministic operations so statistics can be asserted exactly.
"""

import pytest

from content_bench.models import Sample


class ScriptedOperation:
    """
    Operation replaying fixed latencies; records every content type it is called with.

    memory_mb is either a constant or a sequence replayed per trial.
    """

    def __init__(self, latencies, succeeded=True, memory_mb=128.0):
        self.latencies = list(latencies)
        self.succeeded = succeeded
        self.memory_mb = memory_mb if isinstance(memory_mb, (int, float)) else list(memory_mb)
        self.calls = []

    def __call__(self, content_type):
        latency = self.latencies[len(self.calls) % len(self.latencies)]
        if isinstance(self.memory_mb, list):
            memory = self.memory_mb[len(self.calls) % len(self.memory_mb)]
        else:
            memory = self.memory_mb
        self.calls.append(content_type)
        succeeded = self.succeeded(len(self.calls)) if callable(self.succeeded) else self.succeeded
        return Sample(latency_ms=latency, memory_mb=memory, succeeded=succeeded)


class StaticCollector:
    """Environment collector returning a fixed dictionary."""

    def __init__(self, info):
        self.info = info

    def get_system_info(self):
        return dict(self.info)


@pytest.fixture
def scripted_operation():
    """Factory for ScriptedOperation instances."""
    return ScriptedOperation


@pytest.fixture
def static_environment() -> StaticCollector:
    """Collector standing in for the real platform probes."""
    return StaticCollector({"platform": "linux", "arch": "x86_64", "memoryTotal": "16000MB"})


@pytest.fixture
def per_type_operation():
    """Operation whose latency depends on the content type."""
    latencies = {"slides": 100.0, "document": 300.0, "roadmap": 500.0}

    def operation(content_type):
        return Sample(latency_ms=latencies[content_type], memory_mb=120.0, succeeded=True)

    return operation
