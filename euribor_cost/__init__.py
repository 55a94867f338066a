"""
Euribor forward realized cost chart.

This package contains the pieces needed to turn pre-downloaded Bundesbank
Euribor CSV files into an interactive HTML chart:
- Loading the five daily tenor series (1w, 1m, 3m, 6m, 12m)
- Computing the forward period-weighted average rate for each tenor
- Rendering raw and averaged series as a Plotly chart spec embedded in HTML

All code is plain Python on top of the NumPy/Pandas stack.
"""
