"""
One-shot script that builds the Euribor cost chart.

Usage (from the directory holding the Bundesbank CSV downloads):

    python -m euribor_cost.build_chart [days]

This will:
1. Load the five Euribor tenor files (1w, 1m, 3m, 6m, 12m).
2. Compute the `days`-day forward realized average rate (default 360).
3. Write `euribor_cost_chart.html` next to the data, overwriting any old copy.

There are no flags, not even -h. A non-numeric `days` falls back to the
default. Any load failure aborts the run before the output file is touched.
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from .averaging import calculate_average_rates
from .config import DATA_DIR, DEFAULT_WINDOW_DAYS, OUTPUT_HTML, SOURCE_URL
from .errors import RateDataError
from .load_rates import load_series_set
from .render_chart import create_chart_data, generate_html


WINDOW_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
WINDOW_LIMIT = 2**63


def _window_arg(text: str) -> int:
    if not WINDOW_PATTERN.fullmatch(text):
        return DEFAULT_WINDOW_DAYS
    days = int(text)
    if not -WINDOW_LIMIT <= days < WINDOW_LIMIT:
        return DEFAULT_WINDOW_DAYS
    return days


def parse_window_days(argv: Optional[Sequence[str]] = None) -> int:
    """Read the optional averaging window from the command line."""
    parser = argparse.ArgumentParser(
        description="Chart Euribor daily rates against their forward realized average.",
        epilog=f"Download the daily Euribor CSV files from {SOURCE_URL}",
        add_help=False,
    )
    parser.add_argument(
        "days",
        nargs="?",
        type=_window_arg,
        default=DEFAULT_WINDOW_DAYS,
        help=f"Forward averaging window in days (default {DEFAULT_WINDOW_DAYS}).",
    )
    # anything beyond the single positional is ignored
    args, _ = parser.parse_known_args(argv)
    return args.days


def build_chart(
    window_days: int = DEFAULT_WINDOW_DAYS,
    data_dir: Path | str = DATA_DIR,
    output_path: Path | str | None = None,
) -> Path:
    """
    Run the full pipeline and return the path of the written HTML file.

    `output_path` defaults to OUTPUT_HTML inside `data_dir`.
    """
    data_dir = Path(data_dir)
    output_path = Path(output_path) if output_path is not None else data_dir / OUTPUT_HTML

    print("Reading CSV files...\n")
    series_set = load_series_set(data_dir)

    print(f"Calculating average rates for the forward period of {window_days} days...")
    result = calculate_average_rates(series_set, window_days)

    print("Creating chart data...")
    chart_data = create_chart_data(series_set, result)

    print("Generating HTML content...")
    html = generate_html(chart_data, window_days)

    print("Writing HTML file...")
    output_path.write_text(html, encoding="utf-8")

    print(f"✓ Chart created successfully: {output_path}")
    return output_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the process exit code."""
    window_days = parse_window_days(argv)
    try:
        build_chart(window_days)
    except RateDataError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
