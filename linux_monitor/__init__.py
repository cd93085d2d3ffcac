"""Periodic CPU and memory monitoring for Linux, reported to the console or a log file."""

__version__ = "0.1.0"