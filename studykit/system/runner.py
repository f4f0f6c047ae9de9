"""Runs monitors side by side and shows their latest readings."""

from __future__ import annotations

import sys
import threading
from typing import Callable, Dict, List, Optional

from .monitors import (
    CpuMonitor,
    DiskMonitor,
    MemoryMonitor,
    Monitor,
    NetworkMonitor,
    SystemStat,
)


class StatBoard:
    """Thread-safe table of the latest reading from each monitor."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._stats: Dict[str, SystemStat] = {}

    def update(self, stat: SystemStat) -> None:
        with self._lock:
            self._stats[stat.name] = stat

    def snapshot(self) -> Dict[str, SystemStat]:
        with self._lock:
            return dict(self._stats)

    def render(self) -> str:
        """One "[name]: value" line per monitor followed by a separator."""
        lines = [f"[{stat.name}]: {stat.value}" for stat in self.snapshot().values()]
        lines.append("-----")
        return "\n".join(lines)


def run_monitoring(
    monitor: Monitor,
    stop: threading.Event,
    publish: Callable[[SystemStat], None],
    interval: float = 1.0,
) -> int:
    """Publish a reading every interval until stopped; return how many were published."""
    published = 0
    while not stop.wait(interval):
        usage = monitor.check_usage()
        publish(SystemStat(name=monitor.name, value=usage.value))
        published += 1
    print("Monitoring stopped.")
    return published


def main(argv: Optional[list] = None) -> int:
    """Sample system usage and print the board every five seconds until interrupted."""
    interval = 1.0
    monitors: List[Monitor] = [
        CpuMonitor(interval),
        MemoryMonitor(interval),
        NetworkMonitor(interval),
        DiskMonitor(interval),
    ]
    board = StatBoard()
    stop = threading.Event()

    def show() -> None:
        while not stop.wait(5.0):
            print(board.render(), flush=True)

    threads = [
        threading.Thread(
            target=run_monitoring, args=(m, stop, board.update, interval), daemon=True
        )
        for m in monitors
    ]
    threads.append(threading.Thread(target=show, daemon=True))
    for thread in threads:
        thread.start()
    try:
        while any(t.is_alive() for t in threads):
            for thread in threads:
                thread.join(timeout=0.5)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        for thread in threads:
            thread.join(timeout=interval * 2 + 1)
    return 0


if __name__ == "__main__":
    sys.exit(main())