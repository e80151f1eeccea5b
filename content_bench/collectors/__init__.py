"""
Environment collectors for benchmark reports.

Available collectors:
- PlatformCollector: Python version, platform and architecture
- MemoryCollector: Total memory via /proc/meminfo
- CPUInfoCollector: CPU model and core counts via /proc/cpuinfo
"""

from .system import PlatformCollector
from .meminfo import MemoryCollector
from .cpuinfo import CPUInfoCollector

__all__ = [
    'PlatformCollector',
    'MemoryCollector',
    'CPUInfoCollector'
]


def default_collectors():
    """Collectors used for every report."""
    return [PlatformCollector(), MemoryCollector(), CPUInfoCollector()]
