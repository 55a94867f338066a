"""
Configuration for the Euribor cost chart.

Centralises file names and fixed constants. Source files are expected in the
current working directory, where the user saved the Bundesbank downloads.
"""

from pathlib import Path

# Source CSVs and output are resolved relative to the directory the tool runs in
DATA_DIR = Path(".")
OUTPUT_HTML = Path("euribor_cost_chart.html")

# Bundesbank CSV exports start with a fixed metadata block
PREAMBLE_LINES = 9

DEFAULT_WINDOW_DAYS = 360

PLOTLY_CDN_URL = "https://cdn.plot.ly/plotly-2.35.2.min.js"

SOURCE_URL = (
    "https://www.bundesbank.de/en/statistics/money-and-capital-markets/"
    "interest-rates-and-yields/money-market-rates-651538"
)
