import pytest

from linux_monitor.metrics import (
    CpuMetric,
    CpuTimes,
    Metric,
    RamMetric,
    core_usage,
    cpu_sort_key,
    extract_label,
    extract_statistic,
)

STAT_BEFORE = """cpu  100 0 100 800 0 0 0 0 0 0
cpu0 50 0 50 400 0 0 0 0 0 0
cpu1 50 0 50 400 0 0 0 0 0 0
cpu10 10 0 10 10 0 0 0 0 0 0
intr 12345
"""

STAT_AFTER = """cpu  200 0 200 1000 0 0 0 0 0 0
cpu0 100 0 100 400 0 0 0 0 0 0
cpu1 100 0 100 500 0 0 0 0 0 0
cpu10 20 0 20 20 0 0 0 0 0 0
intr 12399
"""

MEMINFO = """MemTotal:       16314436 kB
MemFree:         1234567 kB
MemAvailable:    7654321 kB
HugePages_Total:       0
"""


def test_cpu_sort_key_orders_numerically():
    assert cpu_sort_key("cpu") < cpu_sort_key("cpu1")
    assert cpu_sort_key("cpu1") < cpu_sort_key("cpu2")
    assert cpu_sort_key("cpu2") < cpu_sort_key("cpu10")
    labels = ["cpu10", "cpu2", "cpu", "cpu1"]
    keys = {label: cpu_sort_key(label) for label in labels}
    assert sorted(labels, key=keys.__getitem__) == ["cpu", "cpu1", "cpu2", "cpu10"]


def test_core_usage_half_busy():
    previous = CpuTimes(user=0, idle=0)
    current = CpuTimes(user=50, idle=50)
    assert core_usage(current, previous) == "50.000000%"


def test_core_usage_no_change_is_zero():
    times = CpuTimes(1, 2, 3, 4, 5, 6, 7, 8)
    assert core_usage(times, times) == "0.000000%"


def test_core_usage_fully_busy():
    previous = CpuTimes()
    current = CpuTimes(system=40)
    assert core_usage(current, previous) == "100.000000%"


def test_cpu_times_from_fields_ignores_extra_columns():
    times = CpuTimes.from_fields(["1", "2", "3", "4", "5", "6", "7", "8", "9", "10"])
    assert times == CpuTimes(1, 2, 3, 4, 5, 6, 7, 8)


def test_cpu_metric_selects_and_orders_cores(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(STAT_BEFORE)
    metric = CpuMetric([10, -1, 1], stat_path=str(stat))
    stat.write_text(STAT_AFTER)
    result = metric.calculate()
    assert list(result) == ["cpu", "cpu1", "cpu10"]
    assert all(value.endswith("%") for value in result.values())
    assert metric.name == "CPU"


def test_cpu_metric_values_match_core_usage(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(STAT_BEFORE)
    metric = CpuMetric([0], stat_path=str(stat))
    stat.write_text(STAT_AFTER)
    expected = core_usage(
        CpuTimes(100, 0, 100, 400), CpuTimes(50, 0, 50, 400)
    )
    assert metric.calculate() == {"cpu0": expected}


def test_cpu_metric_missing_file_gives_empty(tmp_path):
    metric = CpuMetric([0], stat_path=str(tmp_path / "absent"))
    assert metric.calculate() == {}


def test_cpu_metric_is_a_metric(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(STAT_BEFORE)
    assert isinstance(CpuMetric([0], stat_path=str(stat)), Metric)
    assert CpuMetric([0], stat_path=str(stat)).calculate() == {"cpu0": "0.000000%"}


def test_extract_label():
    assert extract_label("MemTotal:       16314436 kB") == "MemTotal"
    assert extract_label("no colon here") == ""


def test_extract_statistic():
    assert extract_statistic("MemTotal:       16314436 kB") == "16314436 kB"
    assert extract_statistic("nospace") == ""
    assert extract_statistic("trailing ") == ""


def test_ram_metric_reads_requested_stats(tmp_path):
    meminfo = tmp_path / "meminfo"
    meminfo.write_text(MEMINFO)
    metric = RamMetric(["MemTotal", "MemFree", "Unknown"], meminfo_path=str(meminfo))
    assert metric.calculate() == {"MemTotal": "16314436 kB", "MemFree": "1234567 kB"}
    assert metric.name == "RAM"


def test_ram_metric_missing_file_gives_empty(tmp_path):
    metric = RamMetric(["MemTotal"], meminfo_path=str(tmp_path / "absent"))
    assert metric.calculate() == {}


def test_metric_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Metric()