"""
Error types raised while loading the source CSV files.

All of them are fatal for a chart run; `build_chart.main` turns them into a
message on stderr and a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path


class RateDataError(Exception):
    """Base class for problems with one source file."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)
        self.message = message

    def __str__(self) -> str:
        return f"Failed to read CSV {self.path.name}: {self.message}"


class FileError(RateDataError):
    """The file is missing or cannot be read."""


class ParseError(RateDataError):
    """A row has a malformed date or the CSV structure is broken."""


class EmptyDataError(RateDataError):
    """The file parsed cleanly but yielded no usable observations."""
