"""
Tenor registry for the five Euribor series.

One record per tenor keeps the nominal period, display label, chart colour
and source filename together. Iterating `Tenor` gives the pipeline order
(1w first, 12m last).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tenor(Enum):
    W01 = "W01"
    M01 = "M01"
    M03 = "M03"
    M06 = "M06"
    M12 = "M12"

    @property
    def spec(self) -> TenorSpec:
        return TENOR_SPECS[self]

    @property
    def period_days(self) -> int:
        return TENOR_SPECS[self].period_days

    @property
    def label(self) -> str:
        return TENOR_SPECS[self].label


@dataclass(frozen=True)
class TenorSpec:
    """Fixed attributes of one Euribor tenor."""

    period_days: int
    label: str
    color: str
    filename: str


def _bundesbank_filename(code: str) -> str:
    return f"BBIG1.D.D0.EUR.MMKT.EURIBOR.{code}.BID._Z.csv"


TENOR_SPECS: dict[Tenor, TenorSpec] = {
    Tenor.W01: TenorSpec(7, "1w", "#1f77b4", _bundesbank_filename("W01")),
    Tenor.M01: TenorSpec(30, "1m", "#ff7f0e", _bundesbank_filename("M01")),
    Tenor.M03: TenorSpec(90, "3m", "#2ca02c", _bundesbank_filename("M03")),
    Tenor.M06: TenorSpec(180, "6m", "#d62728", _bundesbank_filename("M06")),
    Tenor.M12: TenorSpec(360, "12m", "#9467bd", _bundesbank_filename("M12")),
}
