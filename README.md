# linux_monitor

A small monitor for Linux. It samples CPU load and memory statistics at a
fixed period and writes the latest values to the console, a log file, or
both. CPU usage is computed from `/proc/stat`; memory figures are read from
`/proc/meminfo`.

## Installation

```
pip install .
```

## Configuration

The monitor is driven by a JSON file:

```json
{
  "settings": {"period": 1000},
  "metrics": [
    {"type": "cpu", "ids": [-1, 0, 1]},
    {"type": "memory", "spec": ["MemTotal", "MemFree", "MemAvailable"]}
  ],
  "outputs": [
    {"type": "console"},
    {"type": "log", "path": "monitor.log"}
  ]
}
```

- `settings.period` is the interval in milliseconds (default 30). Each
  metric is sampled once per period, and the latest readings are written
  out once per period.
- A `cpu` metric lists the cores to watch by number; `-1` selects the
  aggregate `cpu` line. Each core is reported as the share of busy time
  since the previous sample, formatted like `12.500000%`.
- A `memory` metric lists the `/proc/meminfo` labels to report. Values are
  given as the kernel prints them, for example `16318480 kB`.
- A `console` output prints to standard output. A `log` output writes to
  the given file, which is truncated when the monitor starts.

Only the first `cpu` metric, the first `memory` metric and the first `log`
output are used; entries of any other type are read but ignored.
`parse_config` raises `ConfigError` when the file cannot be opened, is not
valid JSON, or has entries of the wrong shape (a missing `type`, a
non-integer `period`, and so on).

## Running

```
linux-monitor path/to/config.json
```

Without an argument the configuration is read from `../test.json`. The
monitor keeps sampling and printing until a line is read from standard
input (or input ends). If the configuration cannot be used, the command
prints `Error ...` to standard error and exits with status 1.

Each metric is printed as a block: its name (`CPU` or `RAM`) on one line,
then every statistic as `name: value` on the next, followed by a blank
line. Metrics with no values are not printed.

## Using it from Python

```python
from linux_monitor.config import parse_config
from linux_monitor.monitor import Monitor

with Monitor(parse_config("config.json")) as monitor:
    monitor.run()
    ...
    print(monitor.latest)
```

- `Monitor(config)` builds the metrics and outputs a `ConfigData`
  describes; `Monitor.from_file(path)` does the same from a file. `run()`
  starts one background thread per metric and one that publishes readings,
  and `stop()` ends them. Leaving the `with` block stops the monitor and
  closes its log file.
- `Monitor.latest` is a snapshot of the most recent reading of each metric.
  `metrics`, `outputers`, `running` and `period_ms` describe its state.
- `Monitor.add_metric` and `Monitor.add_outputer` attach more metrics and
  outputs: `CpuMetric(cores, stat_path="/proc/stat")`,
  `RamMetric(stats, meminfo_path="/proc/meminfo")`,
  `ConsoleOutputer(stream=None)`, `FileOutputer(path)`, or your own
  subclasses of `Metric` (with a `name` and a `calculate()` method) and
  `Outputer` (with `set_metric(name, values)`).
- If a `/proc` file cannot be read, the metric returns an empty reading.

## What it does not do

The package reports CPU usage and memory figures only, to standard output
or a single log file. It has no other metrics or output kinds, keeps no
history beyond the latest reading, and does not run as a background
service.

## Tests

```
pip install ".[test]"
pytest
```