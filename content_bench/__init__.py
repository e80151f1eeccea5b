"""
Benchmark harness for content generation performance.

Samples latency, memory and success of a work-producing operation across
content types and writes a JSON report for regression comparison.
"""

from .core import BenchmarkRunner, BenchmarkError, OperationError, summarize_overall
from .models import BenchmarkReport, ContentTypeResult, OverallSummary, RunConfiguration, Sample
from .operations import HttpOperation, SimulatedOperation
from .report import load_report, print_summary, save_report
from .sampling import SampleCollector
from .stats import DistributionSummary, summarize
from .constants import (
    CONTENT_TYPES,
    STATUS_OK,
    STATUS_WARN,
    STATUS_ERROR,
    STATUS_INFO,
    EXIT_SUCCESS,
    EXIT_FAILURE,
    EXIT_INVALID_USAGE
)

__all__ = [
    'BenchmarkRunner',
    'BenchmarkError',
    'OperationError',
    'summarize_overall',
    'BenchmarkReport',
    'ContentTypeResult',
    'OverallSummary',
    'RunConfiguration',
    'Sample',
    'HttpOperation',
    'SimulatedOperation',
    'load_report',
    'print_summary',
    'save_report',
    'SampleCollector',
    'DistributionSummary',
    'summarize',
    'CONTENT_TYPES',
    'STATUS_OK',
    'STATUS_WARN',
    'STATUS_ERROR',
    'STATUS_INFO',
    'EXIT_SUCCESS',
    'EXIT_FAILURE',
    'EXIT_INVALID_USAGE'
]
