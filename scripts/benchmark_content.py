#!/usr/bin/env python3
"""
Content generation benchmark.

Usage (run from repo root):
    python scripts/benchmark_content.py --iterations 10 --output benchmark_results.json
    python scripts/benchmark_content.py --content-type slides --verbose
"""

import sys
from pathlib import Path

# Add repo root to Python path for package import
sys.path.insert(0, str(Path(__file__).parent.parent))

from content_bench.cli import main


if __name__ == "__main__":
    sys.exit(main())
