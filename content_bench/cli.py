"""
Command line entry point for the content generation benchmark.

Usage:
    content-bench --iterations 20 --output results/baseline.json
    content-bench --content-type slides --warmup 0 --verbose
    content-bench --url http://localhost:3000 --iterations 3
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .collectors import default_collectors
from .constants import (
    CONTENT_TYPES,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_ITERATIONS,
    DEFAULT_OUTPUT,
    DEFAULT_WARMUP,
    EXIT_FAILURE,
    EXIT_SUCCESS,
)
from .core import BenchmarkError, BenchmarkRunner
from .models import RunConfiguration
from .operations import DEFAULT_PROMPT, HttpOperation, SimulatedOperation
from .report import print_summary, save_report


def positive_int(value: str) -> int:
    """argparse type accepting integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def non_negative_int(value: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="content-bench",
        description="Latency, memory and throughput benchmark for content generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simulated benchmark of all content types
  content-bench --iterations 20 --output results/baseline.json

  # Single content type with per-trial progress
  content-bench --content-type slides --warmup 0 --verbose

  # Benchmark a running server
  content-bench --url http://localhost:3000 --iterations 3 --research-file notes.md
        """
    )

    parser.add_argument(
        "--iterations",
        type=positive_int,
        default=DEFAULT_ITERATIONS,
        help=f"Measured trials per content type (default: {DEFAULT_ITERATIONS})"
    )

    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output JSON filename (default: {DEFAULT_OUTPUT})"
    )

    parser.add_argument(
        "--content-type",
        help="Content type to benchmark (default: all of %s)" % ", ".join(CONTENT_TYPES)
    )

    parser.add_argument(
        "--warmup",
        type=non_negative_int,
        default=DEFAULT_WARMUP,
        help=f"Warmup trials, excluded from statistics (default: {DEFAULT_WARMUP})"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print one line per trial"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the simulated operation (default: unseeded)"
    )

    parser.add_argument(
        "--url",
        help="Benchmark a running content server at this base URL instead of simulating"
    )

    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help="Prompt sent with --url requests"
    )

    parser.add_argument(
        "--research-file",
        action="append",
        type=Path,
        default=[],
        help="Research file uploaded with --url requests (repeatable)"
    )

    parser.add_argument(
        "--timeout",
        type=positive_int,
        default=DEFAULT_HTTP_TIMEOUT,
        help=f"HTTP request timeout in seconds (default: {DEFAULT_HTTP_TIMEOUT})"
    )

    return parser


def build_configuration(args: argparse.Namespace) -> RunConfiguration:
    content_types = (args.content_type,) if args.content_type else CONTENT_TYPES
    return RunConfiguration(
        iterations=args.iterations,
        warmup=args.warmup,
        content_types=content_types,
        verbose=args.verbose,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to execute the benchmark.

    Returns:
        Exit code: 0 for success, 1 for failure.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = build_configuration(args)

        if args.url:
            operation = HttpOperation(
                args.url,
                prompt=args.prompt,
                research_files=args.research_file,
                timeout=args.timeout,
            )
            if not operation.wait_for_api():
                print("ERROR: API not responding", file=sys.stderr)
                return EXIT_FAILURE
        else:
            operation = SimulatedOperation(seed=args.seed)

        runner = BenchmarkRunner(operation, collectors=default_collectors())
        report = runner.run(config)

        print_summary(report)
        save_report(report, args.output)

        return EXIT_SUCCESS

    except BenchmarkError as e:
        print(f"ERROR: Benchmark failed: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Benchmark interrupted by user", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
