import io
from pathlib import Path

import pytest
import main
from symbol_graph import SymbolGraph

ROUTES_FILE = Path(__file__).parent / "routes.txt"


@pytest.fixture
def routes():
    return SymbolGraph(str(ROUTES_FILE), " ")


def test_lookup_prints_neighbors(routes, capsys):
    main.lookup_loop(routes, io.StringIO("JFK\nquit\nORD\n"))
    out = capsys.readouterr().out

    assert "JFK: ORD ATL MCO" in out
    assert "ORD:" not in out


def test_lookup_reports_unknown_names(routes, capsys):
    main.lookup_loop(routes, io.StringIO("SFO\n\nLAX\n"))
    out = capsys.readouterr().out

    assert "SFO is not in the graph" in out
    assert "LAX: " in out


def test_main_missing_file(tmp_path, capsys):
    code = main.main(str(tmp_path / "nope.txt"), " ")

    assert code == 1
    assert "Cannot open routes file" in capsys.readouterr().out
