"""Tests for the command line front end and the benchmark scripts."""

import json

import pytest

from aima_search.benchmarks import plot_results, run_all
from aima_search.cli import main


class TestCli:
    """Test the solve and list subcommands."""

    def test_list(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "Recursive Best First Avoiding Loops" in out
        assert "hill x bidirectional" in out

    def test_solve_default(self, capsys):
        assert main(["solve"]) == 0
        out = capsys.readouterr().out
        assert "A* (Graph Search): solved" in out
        assert "cost=418" in out

    def test_solve_json(self, capsys):
        assert main(["solve", "--strategy", "bfs", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert data["cost"] == 450.0
        assert data["actions"] == ["Sibiu", "Fagaras", "Bucharest"]

    def test_solve_grid_bidirectional(self, capsys):
        assert main(["solve", "--problem", "grid", "--strategy", "bfs", "--mode", "bidirectional",
                     "--rows", "3", "--cols", "3"]) == 0
        assert "cost=4" in capsys.readouterr().out

    def test_solve_failure_exit_code(self, capsys):
        argv = ["solve", "--problem", "grid", "--rows", "2", "--cols", "2",
                "--wall", "0,1", "--wall", "1,0", "--strategy", "bfs"]
        assert main(argv) == 1
        assert "failed (no_solution)" in capsys.readouterr().out

    def test_failure_json_has_no_infinity(self, capsys):
        argv = ["solve", "--problem", "grid", "--rows", "2", "--cols", "2",
                "--wall", "0,1", "--wall", "1,0", "--strategy", "bfs", "--json"]
        assert main(argv) == 1
        out = capsys.readouterr().out
        assert "Infinity" not in out
        assert json.loads(out)["cost"] is None

    @pytest.mark.parametrize("argv", [
        ["solve", "--strategy", "hill", "--mode", "bidirectional"],
        ["solve", "--strategy", "beam"],
        ["solve", "--start", "Atlantis"],
        ["solve", "--problem", "grid", "--goal", "9,9"],
    ])
    def test_bad_input_exit_code(self, argv, capsys):
        assert main(argv) == 2
        assert "error:" in capsys.readouterr().err


class TestBenchmarks:
    """Test the benchmark runner and its report."""

    def test_run_all_romania(self):
        rows = run_all.run_all(run_all.load_problem("romania"), max_expansions=5000, verbose=False)
        assert len(rows) == 23
        by_pair = {(r["strategy"], r["mode"]): r for r in rows}
        assert by_pair[("astar", "graph")]["cost"] == 418.0
        assert by_pair[("bfs", "bidirectional")]["success"]
        assert all(r["peak_kb"] is None for r in rows)

    def test_unknown_problem(self):
        with pytest.raises(SystemExit):
            run_all.load_problem("maze")

    def test_bench_command_writes_reports(self, tmp_path):
        argv = ["bench", "--problem", "grid", "--max-expansions", "500", "--out", str(tmp_path), "--plot"]
        assert main(argv) == 0
        data = json.loads((tmp_path / "results.json").read_text())
        assert data["problem"] == "GridProblem"
        assert {r["mode"] for r in data["results"]} == {"tree", "graph", "bidirectional"}
        assert (tmp_path / "results.md").read_text().startswith("| Algorithm |")
        assert (tmp_path / "comparison.png").stat().st_size > 0

    def test_plot_needs_successful_rows(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text(json.dumps({"results": [{"algo": "X", "success": False}]}))
        with pytest.raises(SystemExit):
            plot_results.load_rows(path)

    def test_fmt_table(self):
        table = plot_results.fmt_table([{"algo": "A*", "success": True, "cost": 418.0, "nodes_expanded": 6,
                                         "max_frontier_size": 5, "time_s": 0.001, "peak_kb": None}])
        assert "| A* | 418.000000 | 6 | 5 | 0.001000 | n/a | ok |" in table

    def test_fmt_table_lists_failures(self):
        table = plot_results.fmt_table([{"algo": "DFS (Tree Search)", "success": False, "failure": "cancelled",
                                         "cost": None, "nodes_expanded": 500}])
        assert "| DFS (Tree Search) | n/a | 500 | n/a | n/a | n/a | cancelled |" in table
