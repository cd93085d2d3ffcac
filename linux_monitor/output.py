"""Destinations that metric readings are written to."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Mapping, TextIO

__all__ = ["Outputer", "ConsoleOutputer", "FileOutputer", "format_metric"]


def format_metric(name: str, values: Mapping[str, str]) -> str:
    """Render one metric block; empty readings render as nothing."""
    if not values:
        return ""
    body = "".join(f"{stat}: {value}   " for stat, value in values.items())
    return f"{name}\n{body}\n\n"


class Outputer(ABC):
    """Receives the latest reading of a metric."""

    @abstractmethod
    def set_metric(self, name: str, values: Mapping[str, str]) -> None:
        """Publish the values of the metric called ``name``."""


class ConsoleOutputer(Outputer):
    """Writes readings to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def set_metric(self, name: str, values: Mapping[str, str]) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(format_metric(name, values))


class FileOutputer(Outputer):
    """Writes readings to a file, truncating it on open."""

    def __init__(self, path: str) -> None:
        self._file = open(path, "w", encoding="utf-8")

    def set_metric(self, name: str, values: Mapping[str, str]) -> None:
        self._file.write(format_metric(name, values))

    def close(self) -> None:
        """Flush and close the file."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def __enter__(self) -> "FileOutputer":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()