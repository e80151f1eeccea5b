"""
Report persistence and console summary.
"""

import json
from pathlib import Path
from typing import Union

from .core import BenchmarkError
from .models import BenchmarkReport


def save_report(report: BenchmarkReport, filename: Union[str, Path]) -> str:
    """
    Save a benchmark report to a JSON file, replacing any previous one.

    Args:
        report: Completed benchmark report
        filename: Output path

    Returns:
        Path to saved report file

    Raises:
        BenchmarkError: If file cannot be saved
    """
    try:
        filepath = Path(filename)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2)
            f.write("\n")
        print(f"\nResults saved: {filename}")
        return str(filename)
    except (IOError, OSError) as e:
        raise BenchmarkError(f"Failed to save results to {filename}: {e}")


def load_report(filename: Union[str, Path]) -> BenchmarkReport:
    """
    Load a report written by save_report.

    Raises:
        BenchmarkError: If the file is missing or not a valid report
    """
    try:
        with open(filename, "r", encoding="utf-8") as f:
            data = json.load(f)
        return BenchmarkReport.from_dict(data)
    except (IOError, OSError) as e:
        raise BenchmarkError(f"Failed to read results from {filename}: {e}")
    except (ValueError, KeyError, TypeError) as e:
        raise BenchmarkError(f"Invalid benchmark report {filename}: {e}")


def print_summary(report: BenchmarkReport) -> None:
    """
    Print a per content type results table.

    Args:
        report: Completed benchmark report
    """
    print()
    print("=" * 72)
    print("Benchmark Results Summary")
    print("=" * 72)

    env = report.environment
    if env:
        print(f"\nPlatform: {env.get('platform', '?')}/{env.get('arch', '?')}, "
              f"Python {env.get('pythonVersion', '?')}, memory {env.get('memoryTotal', '?')}")
        if "cpu" in env:
            print(f"CPU: {env['cpu'].get('cpu_model', 'unknown')}")

    print("\n" + "-" * 72)
    print(f"{'Content type':<20} {'Avg (ms)':>12} {'P95 (ms)':>12} {'Success':>10} {'Req/min':>12}")
    print("-" * 72)

    for result in report.results:
        print(f"{result.content_type:<20} {result.latency.mean:>12.2f} {result.latency.p95:>12.2f} "
              f"{result.success_rate:>9.2f}% {result.throughput:>12.2f}")

    overall = report.overall
    print("-" * 72)
    print(f"{'Overall':<20} {overall.latency.mean:>12.2f} {overall.latency.p95:>12.2f} "
          f"{overall.average_success_rate:>9.2f}% {overall.average_throughput:>12.2f}")
    print(f"\nTotal duration: {overall.total_duration_ms}ms")
    print("=" * 72)
