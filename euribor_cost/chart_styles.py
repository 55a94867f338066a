"""
Central styling for the Euribor cost chart.

Use style(role, tenor) for every trace. Colours come from the tenor registry;
roles only add width and dash pattern, so the averaged (solid) and daily
(dotted) lines of one tenor always share a colour.
"""

from __future__ import annotations

from .tenors import Tenor

# --- Base line styles (Plotly `line` dicts) ---
AVERAGE_STYLE = {
    "width": 2,
}

DAILY_STYLE = {
    "width": 1,
    "dash": "dot",
}

MARKER_STYLE = {
    "color": "gray",
    "width": 1,
    "dash": "dash",
}

ROLE_BASES = {
    "average": AVERAGE_STYLE,
    "daily": DAILY_STYLE,
    "marker": MARKER_STYLE,
}

# Line trace type used for the (long) rate series
SERIES_TRACE_TYPE = "scattergl"
MARKER_TRACE_TYPE = "scatter"

MARKER_NAME = "Full forward data end point"

# Matplotlib equivalents of the Plotly dash names
MPL_LINESTYLES = {
    "solid": "-",
    "dot": ":",
    "dash": "--",
}


def style(role: str, tenor: Tenor | None = None) -> dict:
    """
    Return a Plotly `line` dict for one trace.

    - role: "average" | "daily" | "marker"
    - tenor: required for "average" and "daily", ignored for "marker"

    Example: {"line": style("daily", Tenor.M03)}
    """
    base = ROLE_BASES.get(role)
    if base is None:
        raise ValueError(f"Unknown role: {role}")
    if role == "marker":
        return dict(base)
    if tenor is None:
        raise ValueError(f"Role {role!r} needs a tenor")
    return {"color": tenor.spec.color, **base}


def trace_name(role: str, tenor: Tenor, window_days: int) -> str:
    """Legend entry for a tenor trace."""
    if role == "average":
        return f"{tenor.label} ({window_days}d rlz avg)"
    if role == "daily":
        return f"{tenor.label} (daily value)"
    raise ValueError(f"Unknown role: {role}")


def mpl_style(role: str, tenor: Tenor | None = None) -> dict:
    """Translate style(role, tenor) into ax.plot(...) kwargs."""
    line = style(role, tenor)
    return {
        "color": line["color"],
        "linewidth": line["width"],
        "linestyle": MPL_LINESTYLES[line.get("dash", "solid")],
    }
