[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linux_monitor"
version = "0.1.0"
description = "Periodic CPU and memory monitor for Linux that reports to the console or a log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "cpu", "memory", "procfs", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linux-monitor = "linux_monitor.monitor:main"

[tool.hatch.build.targets.wheel]
packages = ["linux_monitor"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
