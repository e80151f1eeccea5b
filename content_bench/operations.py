"""
Work-producing operations invoked once per benchmark trial.

An operation is any callable taking a content type and returning a Sample.
SimulatedOperation stands in for the generation server; HttpOperation
drives a running server through its regenerate endpoint.
"""

import random
import time
from pathlib import Path
from typing import List, Optional, Sequence

import requests

from .constants import DEFAULT_HTTP_TIMEOUT, STATUS_ERROR, STATUS_OK, STATUS_WARN
from .core import OperationError
from .models import Sample


# Typical generation latency per content type in milliseconds
BASE_LATENCY_MS = {
    "roadmap": 45000,
    "slides": 25000,
    "document": 30000,
    "research-analysis": 55000,
}
DEFAULT_BASE_LATENCY_MS = 35000
MIN_LATENCY_MS = 5000
LATENCY_VARIANCE = 0.3
FAILURE_RATE = 0.05

DEFAULT_PROMPT = "Create a project roadmap and supporting material from the attached research."
DEFAULT_RESEARCH = (
    "Research notes\n\n"
    "Phase 1: discovery and requirements, two months.\n"
    "Phase 2: build and integration, four months.\n"
    "Phase 3: rollout and training, two months.\n"
)


class SimulatedOperation:
    """
    Random-variance stand-in for content generation.

    Latency varies uniformly by +/-15% around a per-type base, roughly 5%
    of trials fail, and memory is drawn between 100 and 150 MB.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def __call__(self, content_type: str) -> Sample:
        base = BASE_LATENCY_MS.get(content_type, DEFAULT_BASE_LATENCY_MS)
        variance = (self._random.random() - 0.5) * base * LATENCY_VARIANCE
        latency = max(MIN_LATENCY_MS, base + variance)
        succeeded = self._random.random() > FAILURE_RATE
        memory = 100 + self._random.random() * 50
        return Sample(latency_ms=latency, memory_mb=memory, succeeded=succeeded)


def process_rss_mb() -> float:
    """
    Resident set size of this process in MB, read from /proc/self/status.

    Returns 0.0 where /proc is unavailable.
    """
    try:
        with open("/proc/self/status") as f:
            for line in f:
                if line.startswith("VmRSS:"):
                    return int(line.split()[1]) / 1024
    except (OSError, ValueError, IndexError):
        pass
    return 0.0


class HttpOperation:
    """
    Trial against a running content server.

    Each call POSTs the prompt and research files to
    /api/content/regenerate/<content_type> and times the round trip.
    """

    def __init__(self, base_url: str, prompt: str = DEFAULT_PROMPT,
                 research_files: Optional[Sequence[Path]] = None,
                 timeout: float = DEFAULT_HTTP_TIMEOUT):
        """
        Initialize the HTTP operation.

        Args:
            base_url: Server root, e.g. http://localhost:3000
            prompt: Prompt form field sent with every request
            research_files: Files uploaded as researchFiles (built-in notes if empty)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.prompt = prompt
        self.research_files = [Path(p) for p in research_files or []]
        self.timeout = timeout

    def wait_for_api(self, max_attempts: int = 10, interval: float = 2.0) -> bool:
        """
        Wait for the server to answer.

        Returns:
            True once any HTTP response is received, False after max_attempts
        """
        print(f"API connection check: {self.base_url}")

        for attempt in range(1, max_attempts + 1):
            try:
                requests.get(self.base_url, timeout=2)
                print(f"API status: {STATUS_OK} (connected after {attempt} attempts)")
                return True
            except requests.RequestException:
                pass

            if attempt % 5 == 0:
                print(f"API connection: {STATUS_WARN} (attempt {attempt}/{max_attempts})")

            time.sleep(interval)

        print(f"API status: {STATUS_ERROR} (timeout after {max_attempts} attempts)")
        return False

    def _files(self) -> List[tuple]:
        if not self.research_files:
            return [("researchFiles", ("research.md", DEFAULT_RESEARCH.encode("utf-8"), "text/markdown"))]
        return [
            ("researchFiles", (path.name, path.read_bytes(), "text/plain"))
            for path in self.research_files
        ]

    def __call__(self, content_type: str) -> Sample:
        url = f"{self.base_url}/api/content/regenerate/{content_type}"
        files = self._files()

        start_time = time.perf_counter()
        try:
            response = requests.post(
                url,
                data={"prompt": self.prompt},
                files=files,
                timeout=self.timeout,
            )
        except requests.Timeout:
            latency = (time.perf_counter() - start_time) * 1000
            return Sample(latency_ms=latency, memory_mb=process_rss_mb(), succeeded=False)
        except requests.RequestException as e:
            raise OperationError(f"Request to {url} failed: {e}") from e
        latency = (time.perf_counter() - start_time) * 1000

        succeeded = response.status_code == 200
        if succeeded:
            try:
                body = response.json()
                succeeded = isinstance(body, dict) and body.get("status") == "completed"
            except ValueError:
                succeeded = False

        return Sample(latency_ms=latency, memory_mb=process_rss_mb(), succeeded=succeeded)
