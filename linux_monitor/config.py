"""Reading the JSON monitor configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "ConfigError",
    "MetricConfig",
    "OutputConfig",
    "ConfigData",
    "parse_config",
]

DEFAULT_PERIOD = 30


class ConfigError(Exception):
    """The configuration could not be read or is malformed."""


@dataclass
class MetricConfig:
    """One entry of the ``metrics`` list."""

    type: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class OutputConfig:
    """One entry of the ``outputs`` list."""

    type: str
    params: dict[str, Any] = field(default_factory=dict)


def _param(params: dict[str, Any], key: str, kind: type, entry: str) -> Any:
    try:
        value = params[key]
    except KeyError:
        raise ConfigError(f"{entry} entry has no '{key}'") from None
    if not isinstance(value, kind):
        raise ConfigError(f"'{key}' of {entry} entry must be {kind.__name__}")
    return value


@dataclass
class ConfigData:
    """Parsed configuration: sampling period in milliseconds, metrics and outputs."""

    period: int = DEFAULT_PERIOD
    metrics: list[MetricConfig] = field(default_factory=list)
    outputs: list[OutputConfig] = field(default_factory=list)

    def _metric(self, kind: str) -> MetricConfig | None:
        return next((m for m in self.metrics if m.type == kind), None)

    def _output(self, kind: str) -> OutputConfig | None:
        return next((o for o in self.outputs if o.type == kind), None)

    def cpu_ids(self) -> list[int]:
        """Core ids of the first ``cpu`` metric, or an empty list."""
        metric = self._metric("cpu")
        if metric is None:
            return []
        ids = _param(metric.params, "ids", list, "cpu")
        if not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
            raise ConfigError("'ids' of cpu entry must hold integers")
        return list(ids)

    def memory_specs(self) -> list[str]:
        """Field names of the first ``memory`` metric, or an empty list."""
        metric = self._metric("memory")
        if metric is None:
            return []
        specs = _param(metric.params, "spec", list, "memory")
        if not all(isinstance(s, str) for s in specs):
            raise ConfigError("'spec' of memory entry must hold strings")
        return list(specs)

    def log_path(self) -> str:
        """Path of the first ``log`` output, or an empty string."""
        output = self._output("log")
        if output is None:
            return ""
        return _param(output.params, "path", str, "log")

    def console_needed(self) -> bool:
        return self._output("console") is not None

    def cpu_needed(self) -> bool:
        return self._metric("cpu") is not None

    def ram_needed(self) -> bool:
        return self._metric("memory") is not None


def _entries(document: dict[str, Any], key: str) -> list[tuple[str, dict[str, Any]]]:
    items = document.get(key, [])
    if not isinstance(items, list):
        raise ConfigError(f"'{key}' must be a list")
    entries = []
    for item in items:
        if not isinstance(item, dict):
            raise ConfigError(f"entries of '{key}' must be objects")
        entries.append((_param(item, "type", str, key), item))
    return entries


def parse_config(path: str) -> ConfigData:
    """Load a configuration file; raise ConfigError if it cannot be used."""
    try:
        with open(path, encoding="utf-8") as file:
            document = json.load(file)
    except OSError:
        raise ConfigError(f"Cannot open config file: {path}") from None
    except json.JSONDecodeError as error:
        raise ConfigError(f"Invalid JSON in {path}: {error}") from None
    if not isinstance(document, dict):
        raise ConfigError("configuration must be a JSON object")

    config = ConfigData()
    settings = document.get("settings")
    if isinstance(settings, dict) and "period" in settings:
        period = settings["period"]
        if not isinstance(period, int) or isinstance(period, bool):
            raise ConfigError("'period' must be an integer")
        config.period = period

    config.metrics = [MetricConfig(kind, params) for kind, params in _entries(document, "metrics")]
    config.outputs = [OutputConfig(kind, params) for kind, params in _entries(document, "outputs")]
    return config