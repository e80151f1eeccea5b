"""
Status, exit code and default constants shared by the benchmark tools.

Status words keep console output consistent between the runner,
the collectors and the command line entry point.
"""

# Status indicators
STATUS_OK = "OK"
STATUS_WARN = "WARN"
STATUS_ERROR = "ERROR"
STATUS_INFO = "INFO"

# Exit codes (Unix standard)
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID_USAGE = 2

# Content types known to the content generation server, in run order
CONTENT_TYPES = ("roadmap", "slides", "document", "research-analysis")

DEFAULT_ITERATIONS = 10
DEFAULT_WARMUP = 2
DEFAULT_OUTPUT = "benchmark_results.json"
DEFAULT_HTTP_TIMEOUT = 300

# Decimal places used for averaged values in reports
REPORT_PRECISION = 2
