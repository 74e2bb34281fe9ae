"""Tests for the command line entry point."""

import pandas as pd
import pytest

from src.airport_network import cli
from tests.helpers import airport_row, route_row, write_csv


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


@pytest.fixture
def dataset(tmp_path, airports_header, routes_header):
    airports = write_csv(
        tmp_path / "airports.csv",
        airports_header,
        [airport_row("A", 0.0, 0.0), airport_row("B", 0.0, 1.0), airport_row("C", 0.0, 2.0)],
    )
    routes = write_csv(
        tmp_path / "routes.csv",
        routes_header,
        [route_row("A", "B"), route_row("B", "C"), route_row("C", "Q")],
    )
    return airports, routes


def test_run_with_explicit_source(dataset, tmp_path, capsys):
    out = tmp_path / "out"
    code = cli.main([
        "--airports", str(dataset[0]),
        "--routes", str(dataset[1]),
        "--output-dir", str(out),
        "--source", "A",
        "--pairs", "2",
        "--seed", "1",
    ])

    assert code == 0
    stdout = capsys.readouterr().out
    assert "Total number of routes loaded: 2" in stdout
    assert "Total number of invalid routes: 1" in stdout
    assert "Average distance from A" in stdout
    assert stdout.count("Distance between Airport") == 2
    assert (out / "adjacency.txt").exists()
    assert (out / "valid_routes.csv").exists()
    assert (out / "airports.csv").exists()
    assert (out / "edges.csv").exists()
    assert "Reachable airports from A: 2 of 2" in stdout
    assert "A[C:" in (out / "distances_A.txt").read_text(encoding="utf-8")


def test_run_with_sampling_and_hops(dataset, tmp_path, capsys):
    out = tmp_path / "out"
    code = cli.main([
        "--airports", str(dataset[0]),
        "--routes", str(dataset[1]),
        "--output-dir", str(out),
        "--samples", "2",
        "--seed", "7",
        "--hops",
    ])
    assert code == 0
    reports = list(out.glob("distances_*.txt"))
    assert len(reports) == 2
    stdout = capsys.readouterr().out
    assert stdout.count("Average hops from") == 2
    assert "Average distance from" not in stdout
    for report in reports:
        assert "Average hops from" in report.read_text(encoding="utf-8").splitlines()[-1]


def test_exports_coordinates_and_edges(dataset, tmp_path):
    out = tmp_path / "out"
    assert cli.main([
        "--airports", str(dataset[0]),
        "--routes", str(dataset[1]),
        "--output-dir", str(out),
        "--source", "A",
    ]) == 0

    airports = pd.read_csv(out / "airports.csv")
    assert list(airports["iata"]) == ["A", "B", "C"]
    edges = pd.read_csv(out / "edges.csv")
    assert len(edges) == 4
    assert set(edges["airport"]) == {"A", "B", "C"}


def test_out_of_range_airport_row_is_skipped(tmp_path, airports_header, routes_header, capsys):
    airports = write_csv(
        tmp_path / "airports.csv",
        airports_header,
        [airport_row("A", 95.0, 10.0), airport_row("B", 0.0, 1.0), airport_row("C", 0.0, 2.0)],
    )
    routes = write_csv(
        tmp_path / "routes.csv",
        routes_header,
        [route_row("A", "B"), route_row("B", "C")],
    )
    code = cli.main([
        "--airports", str(airports),
        "--routes", str(routes),
        "--output-dir", str(tmp_path / "out"),
        "--source", "B",
    ])

    assert code == 0
    stdout = capsys.readouterr().out
    assert "Total number of routes loaded: 1" in stdout
    assert "Total number of invalid routes: 1" in stdout


def test_missing_input_exits_with_error(tmp_path):
    code = cli.main([
        "--airports", str(tmp_path / "nope.csv"),
        "--routes", str(tmp_path / "nope2.csv"),
        "--output-dir", str(tmp_path / "out"),
    ])
    assert code == 1


def test_unknown_unit_exits_with_error(dataset, tmp_path):
    code = cli.main([
        "--airports", str(dataset[0]),
        "--routes", str(dataset[1]),
        "--output-dir", str(tmp_path / "out"),
        "--unit", "parsecs",
    ])
    assert code == 2


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.source == []
    assert args.pairs == 0
    assert args.hops is False
