"""
Chart rendering for the Euribor cost chart.

Builds a library-neutral chart spec (list of trace dicts with x/y arrays and
line styling) and embeds it, together with layout and config, into a static
HTML page that loads Plotly from its CDN.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from .averaging import AveragingResult
from .chart_styles import MARKER_NAME, MARKER_TRACE_TYPE, SERIES_TRACE_TYPE, style, trace_name
from .config import PLOTLY_CDN_URL
from .load_rates import SeriesSet
from .tenors import Tenor

DATE_FORMAT = "%Y-%m-%d"

CHART_CONFIG: dict[str, Any] = {
    "scrollZoom": True,
    "modeBarButtonsToAdd": [
        "drawline",
        "drawopenpath",
        "drawclosedpath",
        "drawcircle",
        "drawrect",
        "eraseshape",
    ],
}

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Euribor Rates Chart</title>
    <script src="__PLOTLY_CDN_URL__"></script>
    <style>
        #chart { width: 100%; height: 800px; }
    </style>
</head>
<body>
    <div id="chart"></div>
    <script>
        var data = __CHART_DATA__;
        var layout = __CHART_LAYOUT__;
        var config = __CHART_CONFIG__;

        Plotly.newPlot('chart', data, layout, config);
    </script>
</body>
</html>
"""


def _fmt(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def max_rate(series_set: SeriesSet) -> float:
    """Highest observed rate across all tenors (height of the marker line)."""
    return max(
        (obs.rate for tenor in Tenor for obs in series_set[tenor].observations),
        default=float("-inf"),
    )


def create_chart_data(series_set: SeriesSet, result: AveragingResult) -> list[dict[str, Any]]:
    """
    Build the trace list: per tenor an averaged and a daily trace, then the
    vertical time-mark line.
    """
    x_avg = [_fmt(ts) for ts in result.dates]
    traces: list[dict[str, Any]] = []

    for tenor in Tenor:
        series = series_set[tenor]
        traces.append(
            {
                "x": x_avg,
                "y": [float(v) for v in result.averages[tenor.label]],
                "type": SERIES_TRACE_TYPE,
                "mode": "lines",
                "name": trace_name("average", tenor, result.window_days),
                "line": style("average", tenor),
            }
        )
        traces.append(
            {
                "x": [_fmt(obs.date) for obs in series.observations],
                "y": [obs.rate for obs in series.observations],
                "type": SERIES_TRACE_TYPE,
                "mode": "lines",
                "name": trace_name("daily", tenor, result.window_days),
                "line": style("daily", tenor),
            }
        )

    # isoformat keeps four-digit years for clamped marks
    mark = result.time_mark.isoformat()
    traces.append(
        {
            "x": [mark, mark],
            "y": [0, max_rate(series_set)],
            "type": MARKER_TRACE_TYPE,
            "mode": "lines",
            "name": MARKER_NAME,
            "line": style("marker"),
            "showlegend": True,
        }
    )
    return traces


def chart_layout(window_days: int) -> dict[str, Any]:
    return {
        "title": {
            "text": f"Euribor rates' {window_days}-day forward realized cost (average interest rate)"
        },
        "showlegend": True,
        "xaxis": {
            "title": {"text": "Date"},
            "type": "date",
            "rangeslider": {"visible": True},
        },
        "yaxis": {
            "title": {"text": "Interest rate (%)"},
            "dtick": 0.5,
        },
        "dragmode": "zoom",
    }


def generate_html(chart_data: list[dict[str, Any]], window_days: int) -> str:
    """
    Embed the chart spec into the HTML page.

    `chart_data` is serialized as-is; layout and config are fixed apart from
    the window length in the title.
    """
    return (
        HTML_TEMPLATE
        .replace("__PLOTLY_CDN_URL__", PLOTLY_CDN_URL)
        .replace("__CHART_LAYOUT__", json.dumps(chart_layout(window_days)))
        .replace("__CHART_CONFIG__", json.dumps(CHART_CONFIG))
        .replace("__CHART_DATA__", json.dumps(chart_data))
    )
