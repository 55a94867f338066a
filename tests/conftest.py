"""Shared fixtures: Bundesbank-style Euribor CSV files in a temp directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from euribor_cost.tenors import Tenor

PREAMBLE = [
    ",BBIG1.D.D0.EUR.MMKT.EURIBOR.X.BID._Z",
    ",Euribor / rate",
    "unit,% p.a.",
    "unit multiplier,one",
    "last update,2024-07-01 10:00:00",
    "source,Bundesbank",
    ",",
    "comment,",
    "BBK_STD_DATE,BBK_STD_VALUE",
]


def write_rate_csv(path: Path, rows: Iterable[str]) -> Path:
    """Write a 9-line preamble followed by `rows` to `path`."""
    path.write_text("\n".join([*PREAMBLE, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def rate_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing one CSV under tmp_path."""

    def _make(rows: Iterable[str], name: str = "rates.csv") -> Path:
        return write_rate_csv(tmp_path / name, rows)

    return _make


@pytest.fixture
def data_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing all five tenor files; `overrides` maps Tenor -> rows."""

    def _make(rows: Iterable[str], overrides: dict | None = None) -> Path:
        rows = list(rows)
        overrides = overrides or {}
        for tenor in Tenor:
            write_rate_csv(tmp_path / tenor.spec.filename, overrides.get(tenor, rows))
        return tmp_path

    return _make
