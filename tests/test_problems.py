"""Tests for the sample problems and the problem sanity check."""

import pytest

from aima_search.problems.checks import sanity_check_problem
from aima_search.problems.grid import GridProblem, make_grid_problem, manhattan_to
from aima_search.problems.romania import ROMANIA, romania_problem

from conftest import GraphProblem, InvertibleGraphProblem


class TestRomania:
    """Test the Romania road map."""

    def test_unknown_city(self):
        with pytest.raises(KeyError):
            romania_problem(start="Atlantis")

    def test_roads_are_two_way(self):
        for city, roads in ROMANIA.graph.items():
            for other, km in roads.items():
                assert ROMANIA.graph[other][city] == km

    def test_predecessors_invert_result(self, romania):
        for city in ROMANIA.cities:
            for action, pred in romania.predecessors(city):
                assert action in list(romania.actions(pred))
                assert romania.result(pred, action) == city

    def test_heuristic_only_for_bucharest(self):
        assert romania_problem().heuristic("Arad") == 366.0
        assert romania_problem(goal="Sibiu").heuristic("Arad") == 0.0

    def test_sanity(self, romania):
        assert sanity_check_problem(romania).startswith("OK: visited 20 states")


class TestGrid:
    """Test grid moves, walls and reversibility."""

    def test_corner_actions(self, grid4):
        assert list(grid4.actions((0, 0))) == ["Down", "Right"]
        assert list(grid4.actions((3, 3))) == ["Up", "Left"]

    def test_walls_block_moves(self, walled_grid):
        assert "Right" not in list(walled_grid.actions((2, 2)))

    def test_predecessors_invert_result(self, walled_grid):
        for r in range(walled_grid.rows):
            for c in range(walled_grid.cols):
                if (r, c) in walled_grid.walls:
                    continue
                for action, pred in walled_grid.predecessors((r, c)):
                    assert action in list(walled_grid.actions(pred))
                    assert walled_grid.result(pred, action) == (r, c)

    def test_manhattan(self, grid4):
        assert grid4.heuristic((0, 0)) == 6.0
        assert manhattan_to((3, 3))((1, 1)) == 4.0

    def test_sample_grid(self):
        problem = make_grid_problem()
        assert isinstance(problem, GridProblem)
        assert sanity_check_problem(problem).startswith("OK")


class TestSanityCheck:
    """Test detection of costs that break cost-ordered strategies."""

    def test_negative_cost(self):
        with pytest.raises(AssertionError, match="non-negative"):
            sanity_check_problem(GraphProblem({"A": {"B": -1}}, start="A", goal="B"))

    def test_infinite_cost(self):
        with pytest.raises(AssertionError):
            sanity_check_problem(GraphProblem({"A": {"B": float("inf")}}, start="A", goal="B"))

    def test_none_cost(self):
        class NoCost(GraphProblem):
            def step_cost(self, s, a, s2):
                return None

        with pytest.raises(AssertionError, match="None"):
            sanity_check_problem(NoCost({"A": {"B": 1}}, start="A", goal="B"))


class TestGridValidation:
    """Start and goal must be open cells."""

    @pytest.mark.parametrize("start,goal,walls", [
        ((0, 0), (4, 4), None),
        ((-1, 0), (1, 1), None),
        ((0, 0), (1, 1), {(1, 1)}),
    ])
    def test_rejects_closed_cells(self, start, goal, walls):
        with pytest.raises(ValueError):
            GridProblem(rows=3, cols=3, start=start, goal=goal, walls=walls)


class TestPredecessorCheck:
    """Broken predecessor relations are reported for invertible problems."""

    def test_wrong_predecessor(self):
        class Broken(InvertibleGraphProblem):
            def predecessors(self, s):
                yield "elsewhere", s

        problem = Broken({"A": {"B": 1}, "B": {}}, start="A", goal="B")
        with pytest.raises(AssertionError, match="does not lead back"):
            sanity_check_problem(problem)

    def test_invertible_report(self, grid4):
        assert sanity_check_problem(grid4) == "OK: visited 16 states; costs and predecessors consistent."
