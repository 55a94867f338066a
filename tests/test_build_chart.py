"""End-to-end tests for the chart build script."""

from __future__ import annotations

import json
import re

import pytest

from euribor_cost.build_chart import build_chart, main, parse_window_days
from euribor_cost.config import DEFAULT_WINDOW_DAYS, OUTPUT_HTML
from euribor_cost.errors import EmptyDataError, ParseError
from euribor_cost.tenors import Tenor

THREE_DAY_ROWS = ["2024-01-01,1.0", "2024-01-02,.", "2024-01-03,2.0"]


def _chart_data(html: str) -> list:
    match = re.search(r"var data = (.*);\n", html)
    assert match is not None
    return json.loads(match.group(1))


@pytest.mark.unit
@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], DEFAULT_WINDOW_DAYS),
        (["180"], 180),
        (["-5"], -5),
        # non-numeric input is tolerated and falls back to the default
        (["abc"], DEFAULT_WINDOW_DAYS),
        (["3.5"], DEFAULT_WINDOW_DAYS),
        (["90", "ignored"], 90),
        (["1_000"], DEFAULT_WINDOW_DAYS),
        ([" 30"], DEFAULT_WINDOW_DAYS),
        (["99999999999999999999"], DEFAULT_WINDOW_DAYS),
        (["+7"], 7),
        (["-h"], DEFAULT_WINDOW_DAYS),
        (["--help", "30"], 30),
    ],
)
def test_parse_window_days(argv, expected) -> None:
    assert parse_window_days(argv) == expected


@pytest.mark.integration
def test_three_day_scenario(data_dir, tmp_path) -> None:
    directory = data_dir(THREE_DAY_ROWS)
    output = build_chart(2, data_dir=directory)

    assert output == directory / OUTPUT_HTML
    traces = _chart_data(output.read_text(encoding="utf-8"))

    averaged = traces[0::2][: len(Tenor)]
    for trace in averaged:
        assert trace["name"].endswith("(2d rlz avg)")
        assert len(trace["y"]) == 3
        assert trace["y"][-1] == 2.0
        assert trace["y"][0] == 1.0

    daily = traces[1]
    assert daily["x"] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert daily["y"] == [1.0, 1.0, 2.0]
    assert traces[-1]["x"] == ["2024-01-01", "2024-01-01"]
    assert traces[-1]["y"] == [0, 2.0]


@pytest.mark.integration
def test_existing_output_is_overwritten(data_dir) -> None:
    directory = data_dir(THREE_DAY_ROWS)
    (directory / OUTPUT_HTML).write_text("stale", encoding="utf-8")

    build_chart(30, data_dir=directory)

    assert (directory / OUTPUT_HTML).read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


@pytest.mark.integration
def test_malformed_date_aborts_without_output(data_dir) -> None:
    directory = data_dir(THREE_DAY_ROWS, overrides={Tenor.M06: ["2024-01-01,1.0", "2024-13-40,1.1"]})

    with pytest.raises(ParseError):
        build_chart(30, data_dir=directory)
    assert not (directory / OUTPUT_HTML).exists()


@pytest.mark.integration
def test_empty_file_aborts_without_output(data_dir) -> None:
    directory = data_dir(THREE_DAY_ROWS, overrides={Tenor.M12: ["2024-01-01,."]})

    with pytest.raises(EmptyDataError):
        build_chart(30, data_dir=directory)
    assert not (directory / OUTPUT_HTML).exists()


@pytest.mark.integration
def test_main_writes_chart_in_working_directory(data_dir, monkeypatch, capsys) -> None:
    directory = data_dir(THREE_DAY_ROWS)
    monkeypatch.chdir(directory)

    assert main(["45"]) == 0

    html = (directory / OUTPUT_HTML).read_text(encoding="utf-8")
    assert "45-day forward realized cost" in html
    assert "Chart created successfully" in capsys.readouterr().out


@pytest.mark.integration
def test_main_reports_missing_file_and_fails(data_dir, monkeypatch, capsys) -> None:
    directory = data_dir(THREE_DAY_ROWS)
    (directory / Tenor.W01.spec.filename).unlink()
    monkeypatch.chdir(directory)

    assert main([]) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error: Failed to read CSV BBIG1.D.D0.EUR.MMKT.EURIBOR.W01.BID._Z.csv")
    assert not (directory / OUTPUT_HTML).exists()


@pytest.mark.integration
def test_huge_window_still_writes_chart(data_dir) -> None:
    directory = data_dir(THREE_DAY_ROWS)
    output = build_chart(parse_window_days(["1000000"]), data_dir=directory)

    traces = _chart_data(output.read_text(encoding="utf-8"))
    assert traces[0]["name"] == "1w (1000000d rlz avg)"
    assert traces[0]["y"] == [1.0, 1.0, 2.0]
    assert traces[-1]["x"] == ["0001-01-01", "0001-01-01"]
