"""
Matplotlib rendition of the Euribor cost chart.

Mirrors the HTML chart (solid averaged lines, dotted daily lines, dashed
time-mark line) as a static Figure so notebooks can show or save it without
a browser.
"""

from __future__ import annotations

import matplotlib.pyplot as plt

from .averaging import AveragingResult
from .chart_styles import MARKER_NAME, mpl_style, trace_name
from .load_rates import SeriesSet
from .render_chart import max_rate
from .tenors import Tenor


def plot_rates_figure(
    series_set: SeriesSet,
    result: AveragingResult,
    figsize: tuple[float, float] = (12, 6),
):
    """
    Plot raw daily rates against the forward realized averages.

    Returns
    -------
    matplotlib.figure.Figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    for tenor in Tenor:
        ax.plot(
            result.dates,
            result.averages[tenor.label].to_numpy(),
            label=trace_name("average", tenor, result.window_days),
            **mpl_style("average", tenor),
        )
        daily = series_set[tenor].to_series()
        ax.plot(
            daily.index,
            daily.to_numpy(),
            label=trace_name("daily", tenor, result.window_days),
            **mpl_style("daily", tenor),
        )

    mark = result.time_mark
    ax.plot([mark, mark], [0, max_rate(series_set)], label=MARKER_NAME, **mpl_style("marker"))

    ax.set_title(
        f"Euribor rates' {result.window_days}-day forward realized cost (average interest rate)"
    )
    ax.set_xlabel("Date")
    ax.set_ylabel("Interest rate (%)")
    ax.legend(loc="upper right", fontsize="small", ncol=2)
    ax.grid(True, linestyle="--", alpha=0.4)
    fig.tight_layout()
    return fig
