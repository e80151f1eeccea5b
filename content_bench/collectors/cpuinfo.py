"""
CPU information collector.

Detects CPU model and core/thread counts from /proc/cpuinfo.
"""

from typing import Dict, Any


class CPUInfoCollector:
    """
    Collect CPU configuration from /proc/cpuinfo.

    Absent or unreadable files yield no entry rather than an error.
    """

    def __init__(self, cpuinfo_path: str = "/proc/cpuinfo"):
        self.cpuinfo_path = cpuinfo_path

    def get_system_info(self) -> Dict[str, Any]:
        """
        Collect CPU information.

        Returns:
            Dictionary containing:
            - cpu_model: CPU model name
            - cpu_threads: Number of threads (logical CPUs)
            - cpu_cores: Number of distinct physical core ids
        """
        info = {}
        cores = set()

        try:
            with open(self.cpuinfo_path, "r") as f:
                for line in f:
                    if line.startswith("model name"):
                        if "cpu_model" not in info:
                            info["cpu_model"] = line.split(":", 1)[1].strip()
                    elif line.startswith("core id"):
                        cores.add(int(line.split(":")[1].strip()))
                    elif line.startswith("processor"):
                        # Count logical CPUs
                        info["cpu_threads"] = info.get("cpu_threads", 0) + 1

            if cores:
                info["cpu_cores"] = len(cores)

        except (OSError, ValueError, IndexError):
            pass

        return {"cpu": info} if info else {}
