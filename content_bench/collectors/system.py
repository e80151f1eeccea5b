"""
Interpreter and platform descriptors.
"""

import platform
import sys
from typing import Any, Dict


class PlatformCollector:
    """Collect the platform, architecture and Python version."""

    def get_system_info(self) -> Dict[str, Any]:
        return {
            "pythonVersion": platform.python_version(),
            "platform": sys.platform,
            "arch": platform.machine(),
        }
