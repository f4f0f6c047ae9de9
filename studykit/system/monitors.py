"""Monitors that sample CPU, memory, network and disk usage."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

import psutil

ALERT_THRESHOLD = 60.0


@dataclass(frozen=True)
class SystemStat:
    """The latest reading of one monitor."""

    name: str
    value: str


@dataclass(frozen=True)
class Usage:
    """A formatted reading and whether it crossed the alert threshold."""

    value: str
    alert: bool = False


class Monitor(ABC):
    """Something that can be sampled for a usage reading."""

    name: ClassVar[str] = ""

    def __init__(self, interval: float = 1.0) -> None:
        self.interval = interval

    @abstractmethod
    def check_usage(self) -> Usage:
        """Take one reading."""


class CpuMonitor(Monitor):
    name = "CPU"

    def check_usage(self) -> Usage:
        """Average CPU load over the monitor's interval."""
        try:
            percent = psutil.cpu_percent(interval=self.interval, percpu=False)
        except Exception:
            return Usage("N/A", False)
        return Usage(f"{percent:.2f}%", percent > ALERT_THRESHOLD)


class MemoryMonitor(Monitor):
    name = "Memory"

    def check_usage(self) -> Usage:
        try:
            stat = psutil.virtual_memory()
        except Exception as exc:
            return Usage(
                f"[Memory Monitor] Could not retrieve Memory info: {exc} \n", False
            )
        return Usage(f"{stat.percent:.2f}%", stat.percent > ALERT_THRESHOLD)


class NetworkMonitor(Monitor):
    name = "Network"

    def check_usage(self) -> Usage:
        """Total kilobytes sent and received; never raises an alert."""
        try:
            counters = psutil.net_io_counters(pernic=False)
        except Exception as exc:
            return Usage(
                f"[Network Monitor] Could not retrieve Network info: {exc} \n", False
            )
        if counters is None:
            return Usage("N/A", False)
        return Usage(
            f"Send: {counters.bytes_sent // 1024} KB, "
            f"Recv: {counters.bytes_recv // 1024} KB",
            False,
        )


class DiskMonitor(Monitor):
    name = "Disk"

    def __init__(self, interval: float = 1.0, path: Optional[str] = None) -> None:
        super().__init__(interval)
        if path is None:
            path = "C:\\" if sys.platform == "win32" else "/"
        self.path = path

    def check_usage(self) -> Usage:
        try:
            stat = psutil.disk_usage(self.path)
        except Exception as exc:
            return Usage(
                f"[Disk Monitor] Could not retrieve Disk info: {exc} \n", False
            )
        return Usage(f"{stat.percent:.2f}% used", stat.percent > ALERT_THRESHOLD)