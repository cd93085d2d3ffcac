"""System metrics read from the Linux ``/proc`` filesystem."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass
from typing import Iterable

__all__ = [
    "Metric",
    "CpuTimes",
    "CpuMetric",
    "RamMetric",
    "cpu_sort_key",
    "core_usage",
    "extract_label",
    "extract_statistic",
]

_CPU_PREFIX = "cpu"
_TOTAL_CPU_ID = -1


class Metric(ABC):
    """A named source of statistics, each value rendered as text."""

    name: str = ""

    @abstractmethod
    def calculate(self) -> dict[str, str]:
        """Take a fresh reading and return statistic name to value."""


@dataclass(frozen=True)
class CpuTimes:
    """Cumulative jiffies a CPU spent in each state."""

    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0

    @classmethod
    def from_fields(cls, fields: Iterable[str]) -> "CpuTimes":
        """Build from the numeric columns of a ``/proc/stat`` cpu line."""
        numbers = [int(field) for field in list(fields)[:8]]
        return cls(*numbers)


def cpu_sort_key(label: str) -> tuple[int, int]:
    """Order ``cpu`` first, then ``cpu0``, ``cpu1``, ... numerically."""
    if len(label) == len(_CPU_PREFIX):
        return (len(label), 0)
    return (len(label), int(label[len(_CPU_PREFIX):]))


def core_usage(current: CpuTimes, previous: CpuTimes) -> str:
    """Busy share between two readings, formatted as a percentage."""
    delta = CpuTimes(*(c - p for c, p in zip(astuple(current), astuple(previous))))
    idle = delta.idle + delta.iowait
    busy = delta.user + delta.nice + delta.system + delta.irq + delta.softirq + delta.steal
    total = max(idle + busy, 1)
    return f"{100.0 * busy / total:.6f}%"


class CpuMetric(Metric):
    """Per-core CPU usage; core id -1 stands for the aggregate ``cpu`` line."""

    name = "CPU"

    def __init__(self, cores: Iterable[int], stat_path: str = "/proc/stat") -> None:
        self._cores = set(cores)
        self._stat_path = stat_path
        self._current = self._read()

    def _is_needed(self, label: str) -> bool:
        if label == _CPU_PREFIX:
            return _TOTAL_CPU_ID in self._cores
        return int(label[len(_CPU_PREFIX):]) in self._cores

    def _read(self) -> dict[str, CpuTimes]:
        try:
            with open(self._stat_path, encoding="ascii") as stat:
                lines = stat.read().splitlines()
        except OSError:
            return {}
        data: dict[str, CpuTimes] = {}
        for line in lines:
            if not line.startswith(_CPU_PREFIX):
                continue
            label, *fields = line.split()
            if self._is_needed(label):
                data[label] = CpuTimes.from_fields(fields)
        return dict(sorted(data.items(), key=lambda item: cpu_sort_key(item[0])))

    def calculate(self) -> dict[str, str]:
        previous, self._current = self._current, self._read()
        return {
            label: core_usage(self._current[label], times)
            for label, times in previous.items()
        }


def extract_label(line: str) -> str:
    """Text before the first colon, or an empty string."""
    label, colon, _ = line.partition(":")
    return label if colon else ""


def extract_statistic(line: str) -> str:
    """Text after the first space with leading whitespace removed."""
    _, space, rest = line.partition(" ")
    if not space or not rest:
        return ""
    return rest.lstrip()


class RamMetric(Metric):
    """Selected fields of ``/proc/meminfo``."""

    name = "RAM"

    def __init__(self, stats: Iterable[str], meminfo_path: str = "/proc/meminfo") -> None:
        self._stats = set(stats)
        self._meminfo_path = meminfo_path

    def calculate(self) -> dict[str, str]:
        try:
            with open(self._meminfo_path, encoding="ascii") as meminfo:
                lines = meminfo.read().splitlines()
        except OSError:
            return {}
        values: dict[str, str] = {}
        for line in lines:
            label = extract_label(line)
            if label in self._stats:
                values[label] = extract_statistic(line)
        return values