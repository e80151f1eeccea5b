"""
Total memory collector.

Reads MemTotal from /proc/meminfo.
"""

import os
from typing import Any, Dict, Optional


class MemoryCollector:
    """
    Report total physical memory in the "<MB>MB" form used by reports.

    Falls back to sysconf page counts where /proc/meminfo is absent.
    """

    def __init__(self, meminfo_path: str = "/proc/meminfo"):
        self.meminfo_path = meminfo_path

    def _meminfo_total_kb(self) -> Optional[int]:
        try:
            with open(self.meminfo_path, "r") as f:
                for line in f:
                    if line.startswith("MemTotal:"):
                        return int(line.split()[1])
        except (OSError, ValueError, IndexError):
            pass
        return None

    def _sysconf_total_kb(self) -> Optional[int]:
        try:
            return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES") // 1024
        except (ValueError, OSError, AttributeError):
            return None

    def get_system_info(self) -> Dict[str, Any]:
        """
        Collect total memory.

        Returns:
            Dictionary containing:
            - memoryTotal: Total memory rounded to whole MB, e.g. "15890MB"
        """
        total_kb = self._meminfo_total_kb()
        if total_kb is None:
            total_kb = self._sysconf_total_kb()
        if total_kb is None:
            return {}
        return {"memoryTotal": f"{round(total_kb / 1024)}MB"}
