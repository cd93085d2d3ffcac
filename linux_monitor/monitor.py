"""Periodic sampling of metrics and publishing of their latest readings."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Sequence

from .config import ConfigData, ConfigError, parse_config
from .metrics import CpuMetric, Metric, RamMetric
from .output import ConsoleOutputer, FileOutputer, Outputer

__all__ = ["Monitor", "main"]

DEFAULT_CONFIG_PATH = "../test.json"


class Monitor:
    """Samples every metric on its own thread and feeds the readings to outputers.

    Each metric is recalculated once per period; a separate thread hands the
    most recent reading of every metric to every outputer once per period.
    """

    def __init__(self, config: ConfigData | None = None) -> None:
        config = config if config is not None else ConfigData()
        self._metrics: list[Metric] = []
        self._outputers: list[Outputer] = []
        self._owned: list[FileOutputer] = []
        self._latest: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()
        self._stopping = threading.Event()
        self._threads: list[threading.Thread] = []
        self.period_ms: int = config.period

        if config.cpu_needed():
            self._metrics.append(CpuMetric(config.cpu_ids()))
        if config.ram_needed():
            self._metrics.append(RamMetric(config.memory_specs()))
        if config.console_needed():
            self._outputers.append(ConsoleOutputer())
        log_path = config.log_path()
        if log_path:
            log = FileOutputer(log_path)
            self._owned.append(log)
            self._outputers.append(log)

    @classmethod
    def from_file(cls, path: str) -> "Monitor":
        """Build a monitor from a JSON configuration file."""
        return cls(parse_config(path))

    @property
    def metrics(self) -> tuple[Metric, ...]:
        return tuple(self._metrics)

    @property
    def outputers(self) -> tuple[Outputer, ...]:
        return tuple(self._outputers)

    @property
    def running(self) -> bool:
        return bool(self._threads) and not self._stopping.is_set()

    @property
    def latest(self) -> dict[str, dict[str, str]]:
        """A snapshot of the most recent reading of each metric."""
        with self._lock:
            return {name: dict(values) for name, values in self._latest.items()}

    def add_metric(self, metric: Metric) -> None:
        self._metrics.append(metric)

    def add_outputer(self, outputer: Outputer) -> None:
        self._outputers.append(outputer)

    @property
    def _interval(self) -> float:
        return self.period_ms / 1000.0

    def _sample(self, metric: Metric) -> None:
        while not self._stopping.is_set():
            values = metric.calculate()
            with self._lock:
                self._latest[metric.name] = values
            self._stopping.wait(self._interval)

    def _publish(self) -> None:
        while not self._stopping.is_set():
            for metric in self._metrics:
                with self._lock:
                    values = self._latest.get(metric.name)
                    if values is None:
                        continue
                    for outputer in self._outputers:
                        outputer.set_metric(metric.name, values)
            self._stopping.wait(self._interval)

    def run(self) -> None:
        """Start sampling and publishing in background threads."""
        if self.running:
            raise RuntimeError("monitor is already running")
        self._stopping.clear()
        self._threads = [
            threading.Thread(target=self._sample, args=(metric,), daemon=True)
            for metric in self._metrics
        ]
        self._threads.append(threading.Thread(target=self._publish, daemon=True))
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Signal every thread to finish and wait for them."""
        self._stopping.set()
        for thread in self._threads:
            if thread is not threading.current_thread():
                thread.join()
        self._threads = []

    def __enter__(self) -> "Monitor":
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()
        for log in self._owned:
            log.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the monitor until a line is read from standard input."""
    parser = argparse.ArgumentParser(description="Monitor CPU and memory usage.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_PATH,
                        help="path of the JSON configuration")
    args = parser.parse_args(argv)

    try:
        monitor = Monitor.from_file(args.config)
    except (ConfigError, OSError) as error:
        print(f"Error {error}", file=sys.stderr)
        return 1

    with monitor:
        monitor.run()
        sys.stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())