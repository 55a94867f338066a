"""
Forward realized average rates for the five Euribor tenors.

For every calendar day between the earliest first observation and the latest
last observation (across all tenors), each tenor is sampled forward from that
day at its own reset cadence (every 7 days for 1w, 30 for 1m, ...). Samples
are limited to a window of `window_days` that shrinks near the end of the
data. Each sampled rate is weighted by the number of days it nominally covers,
clipped at the data end:

    avg(d) = sum(rate(c) * w(c)) / sum(w(c)),  w(c) = min(P, end - c + 1)

A day with no sampled observation gets 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Tuple

import numpy as np
import pandas as pd

from .load_rates import RateSeries, SeriesSet
from .tenors import Tenor


@dataclass(frozen=True)
class AveragingResult:
    """
    Output of `calculate_average_rates`.

    averages : DataFrame indexed by every calendar day in [start, end], one
        column per tenor label in pipeline order.
    time_mark : end date minus `window_days`; display-only reference point.
    """

    averages: pd.DataFrame
    time_mark: date
    window_days: int

    @property
    def dates(self) -> pd.DatetimeIndex:
        return self.averages.index

    @property
    def start(self) -> date:
        return self.averages.index[0].date()

    @property
    def end(self) -> date:
        return self.averages.index[-1].date()


def _check_series_set(series_set: SeriesSet) -> None:
    missing = [tenor.label for tenor in Tenor if tenor not in series_set]
    if missing:
        raise ValueError(f"Series set is missing tenors: {', '.join(missing)}")
    empty = [tenor.label for tenor in Tenor if len(series_set[tenor]) == 0]
    if empty:
        raise ValueError(f"Series set has empty tenors: {', '.join(empty)}")


def date_span(series_set: SeriesSet) -> Tuple[date, date]:
    """Earliest first-observation date and latest last-observation date."""
    _check_series_set(series_set)
    start = min(series_set[tenor].first.date for tenor in Tenor)
    end = max(series_set[tenor].last.date for tenor in Tenor)
    return start, end


def averaged_time_mark(end: date, window_days: int) -> date:
    """
    Date from which on the forward window is cut short by the data end.

    Windows reaching past the calendar range clamp to date.min (or date.max
    for negative windows).
    """
    try:
        return end - timedelta(days=window_days)
    except OverflowError:
        return date.min if window_days > 0 else date.max


def _dense_rates(series: RateSeries, start: date, n_days: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Lay one tenor's observations on the day grid starting at `start`.

    Returns (rates, present); `present` marks days with an observation.
    """
    rates = np.zeros(n_days, dtype=float)
    present = np.zeros(n_days, dtype=bool)
    for day, rate in series.rate_by_date().items():
        offset = (day - start).days
        if 0 <= offset < n_days:
            rates[offset] = rate
            present[offset] = True
    return rates, present


def forward_average(
    rates: np.ndarray,
    present: np.ndarray,
    period_days: int,
    window_days: int,
) -> np.ndarray:
    """
    Forward period-weighted average for one tenor on a dense day grid.

    Parameters
    ----------
    rates, present : np.ndarray, shape (n_days,)
        Rate per grid day and a mask of days that carry an observation.
    period_days : int
        Sampling step and nominal weight of each sample.
    window_days : int
        Requested forward window; shortened to the days left on the grid.

    Returns
    -------
    np.ndarray, shape (n_days,)
        Averaged rate per day, 0.0 where no sample fell inside the window.
    """
    n_days = len(rates)
    out = np.zeros(n_days, dtype=float)
    for i in range(n_days):
        window = min(window_days, n_days - i)
        if window <= 0:
            continue
        candidates = np.arange(i, i + window, period_days)
        hits = candidates[present[candidates]]
        if hits.size == 0:
            continue
        # days from each sample through the grid end, inclusive
        weights = np.minimum(period_days, n_days - hits)
        out[i] = float(np.dot(rates[hits], weights)) / float(weights.sum())
    return out


def calculate_average_rates(series_set: SeriesSet, window_days: int) -> AveragingResult:
    """
    Compute the forward realized average for every tenor and calendar day.

    Parameters
    ----------
    series_set : dict
        Mapping Tenor -> RateSeries holding all five non-empty tenors.
    window_days : int
        Averaging window W in days.

    Returns
    -------
    AveragingResult
        One row per day from start to end inclusive, plus the time mark.
    """
    start, end = date_span(series_set)
    n_days = (end - start).days + 1

    columns = {}
    for tenor in Tenor:
        rates, present = _dense_rates(series_set[tenor], start, n_days)
        columns[tenor.label] = forward_average(rates, present, tenor.period_days, window_days)

    index = pd.date_range(start=start, periods=n_days, freq="D", name="Date")
    averages = pd.DataFrame(columns, index=index)
    return AveragingResult(
        averages=averages,
        time_mark=averaged_time_mark(end, window_days),
        window_days=window_days,
    )
