"""
Loading utilities for Bundesbank Euribor CSV exports.

This module:
- Skips the fixed metadata preamble at the top of each export.
- Parses `date,rate[,...]` rows into `Observation` records.
- Treats ".", "" and any "no value" text as missing, carrying the last valid
  rate forward over such rows (rows before the first valid rate are dropped).
- Provides `load_series_set`, which loads all five tenors in pipeline order
  and stops at the first file that fails.
"""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from datetime import date, datetime
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, Optional

import pandas as pd

from .config import DATA_DIR, PREAMBLE_LINES
from .errors import EmptyDataError, FileError, ParseError
from .tenors import Tenor

DATE_FORMAT = "%Y-%m-%d"

# Plain decimal or exponent notation, inf and nan; no digit separators
RATE_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.ASCII | re.IGNORECASE,
)


@dataclass(frozen=True)
class Observation:
    """One daily quote: calendar date and rate in percent."""

    date: date
    rate: float


@dataclass(frozen=True)
class RateSeries:
    """Observations of one tenor, in file order."""

    tenor: Tenor
    observations: tuple[Observation, ...]
    source: Optional[Path] = None

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def first(self) -> Observation:
        return self.observations[0]

    @property
    def last(self) -> Observation:
        return self.observations[-1]

    def rate_by_date(self) -> dict[date, float]:
        """Date lookup; a repeated date keeps its last rate."""
        return {obs.date: obs.rate for obs in self.observations}

    def to_series(self) -> pd.Series:
        """Return the observations as a float Series on a DatetimeIndex."""
        index = pd.DatetimeIndex([obs.date for obs in self.observations], name="Date")
        return pd.Series(
            [obs.rate for obs in self.observations],
            index=index,
            name=self.tenor.label,
            dtype=float,
        )


SeriesSet = dict[Tenor, RateSeries]


def is_missing_marker(text: str) -> bool:
    """True for the placeholders Bundesbank uses instead of a quote."""
    return text == "." or text == "" or "no value" in text.lower()


def _next_rate(last_valid: Optional[float], text: str) -> Optional[float]:
    """
    Advance the carry-forward state by one raw rate field.

    Returns the parsed rate when `text` is numeric, otherwise the previous
    valid rate (which may still be None).
    """
    if is_missing_marker(text) or not RATE_PATTERN.fullmatch(text):
        return last_valid
    return float(text)


def parse_rows(rows: Iterable[list[str]]) -> Iterator[Observation]:
    """
    Fold raw CSV records (preamble already removed) into observations.

    Records with fewer than two fields are skipped without touching the
    carried rate. A malformed date raises ValueError.
    """
    last_valid: Optional[float] = None
    for row in rows:
        if len(row) < 2:
            continue
        day = datetime.strptime(row[0], DATE_FORMAT).date()
        last_valid = _next_rate(last_valid, row[1].strip())
        if last_valid is not None:
            yield Observation(day, last_valid)


def load_rate_series(path: Path | str, tenor: Tenor) -> RateSeries:
    """
    Load one Bundesbank Euribor CSV file.

    Parameters
    ----------
    path : Path or str
        CSV file with a 9-line metadata preamble followed by `date,rate` rows.
    tenor : Tenor
        Tenor the file holds.

    Returns
    -------
    RateSeries
        Non-empty series in file order.

    Raises
    ------
    FileError
        The file is missing or unreadable.
    ParseError
        A row carries a malformed date, or the CSV itself is malformed.
    EmptyDataError
        No row produced an observation.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            records = islice(csv.reader(f), PREAMBLE_LINES, None)
            observations = tuple(parse_rows(records))
    except OSError as exc:
        raise FileError(path, exc.strerror or str(exc)) from exc
    except (csv.Error, ValueError) as exc:
        raise ParseError(path, str(exc)) from exc

    if not observations:
        raise EmptyDataError(path, "No valid rates found in the CSV file")

    return RateSeries(tenor=tenor, observations=observations, source=path)


def load_series_set(data_dir: Path | str = DATA_DIR, verbose: bool = True) -> SeriesSet:
    """
    Load all five tenors from `data_dir`, in pipeline order.

    The first failing file aborts the whole load.
    """
    data_dir = Path(data_dir)
    series_set: SeriesSet = {}
    for tenor in Tenor:
        path = data_dir / tenor.spec.filename
        if verbose:
            print(f"Reading {path.name}...")
        series = load_rate_series(path, tenor)
        if verbose:
            print(describe_series(series))
        series_set[tenor] = series
    return series_set


def describe_series(series: RateSeries) -> str:
    """Short console summary: record count plus first and last record."""
    return "\n".join(
        [
            f"Total records: {len(series)}",
            "First record:",
            f" Date: {series.first.date}, Rate: {series.first.rate}",
            "Last record:",
            f" Date: {series.last.date}, Rate: {series.last.rate}",
            "",
        ]
    )
