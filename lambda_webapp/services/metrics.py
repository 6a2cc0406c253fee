"""Process metrics reported by the health endpoint.

POSIX only: memory figures come from the ``resource`` module, which Windows
lacks. The Lambda runtime is Linux.
"""

import resource
import sys
import time

_STARTED_AT = time.monotonic()


class ProcessMetrics:
    """Uptime and memory usage of the current process."""

    def __init__(self, started_at: float = _STARTED_AT):
        self.started_at = started_at

    def uptime(self) -> float:
        """Seconds since the module was first imported."""
        return round(time.monotonic() - self.started_at, 3)

    def memory_usage(self) -> dict[str, int]:
        """Resident set size figures in bytes."""
        usage = resource.getrusage(resource.RUSAGE_SELF)
        # ru_maxrss is kilobytes on Linux and bytes on macOS
        scale = 1 if sys.platform == "darwin" else 1024
        memory = {"maxRss": usage.ru_maxrss * scale}
        rss = _current_rss()
        if rss is not None:
            memory["rss"] = rss
        return memory


def _current_rss() -> int | None:
    try:
        with open("/proc/self/statm", encoding="ascii") as statm:
            resident_pages = int(statm.read().split()[1])
    except (OSError, ValueError, IndexError):
        return None
    return resident_pages * resource.getpagesize()
