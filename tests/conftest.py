"""Shared problems and helpers for the search engine tests."""

from collections import Counter
from typing import Dict, Hashable, Iterable, Tuple

import pytest

from aima_search.problems.grid import GridProblem
from aima_search.problems.romania import romania_problem


class GraphProblem:
    """Directed weighted graph; actions are destination names.

    InvertibleGraphProblem adds goal_state()/predecessors() for bidirectional mode.
    """

    def __init__(self, edges: Dict[str, Dict[str, float]], start: str, goal: str,
                 h: Dict[str, float] = None):
        self.edges = edges
        self.start = start
        self.goal = goal
        self.h = h or {}

    def initial_state(self):
        return self.start

    def is_goal(self, s):
        return s == self.goal

    def actions(self, s):
        return list(self.edges.get(s, {}))

    def result(self, s, a):
        return a

    def step_cost(self, s, a, s2):
        return float(self.edges[s][s2])

    def heuristic(self, s):
        return float(self.h.get(s, 0.0))


class InvertibleGraphProblem(GraphProblem):
    def goal_state(self):
        return self.goal

    def predecessors(self, s):
        for p, outs in self.edges.items():
            if s in outs:
                yield s, p


class CountingProblem:
    """Wraps a problem and counts how often each state is expanded (actions() called)."""

    def __init__(self, inner):
        self.inner = inner
        self.expansions = Counter()

    def initial_state(self):
        return self.inner.initial_state()

    def is_goal(self, s):
        return self.inner.is_goal(s)

    def actions(self, s):
        self.expansions[s] += 1
        return self.inner.actions(s)

    def result(self, s, a):
        return self.inner.result(s, a)

    def step_cost(self, s, a, s2):
        return self.inner.step_cost(s, a, s2)

    def heuristic(self, s):
        return self.inner.heuristic(s)


def replay(problem, actions: Iterable[Hashable]) -> Tuple[Hashable, float]:
    """Apply actions from the initial state; return (final state, summed step cost)."""
    s = problem.initial_state()
    cost = 0.0
    for a in actions:
        assert a in list(problem.actions(s)), f"{a!r} not applicable in {s!r}"
        s2 = problem.result(s, a)
        cost += problem.step_cost(s, a, s2)
        s = s2
    return s, cost


@pytest.fixture
def grid4():
    """Open 4x4 unit-cost grid from (0,0) to (3,3)."""
    return GridProblem(rows=4, cols=4, start=(0, 0), goal=(3, 3))


@pytest.fixture
def walled_grid():
    """5x7 grid with a wall segment the path has to go around."""
    walls = {(1, 3), (2, 3), (3, 3), (3, 4)}
    return GridProblem(rows=5, cols=7, start=(2, 0), goal=(2, 6), walls=walls)


@pytest.fixture
def romania():
    return romania_problem()


@pytest.fixture
def cycle():
    """A <-> B with an unreachable goal."""
    return InvertibleGraphProblem({"A": {"B": 1}, "B": {"A": 1}, "Z": {}}, start="A", goal="Z")


@pytest.fixture
def inconsistent():
    """Admissible but inconsistent heuristic: A* must reopen C to find the cost-5 path."""
    edges = {
        "S": {"A": 1, "B": 1},
        "A": {"C": 1},
        "B": {"C": 3},
        "C": {"G": 3},
        "G": {},
    }
    h = {"S": 0, "A": 4, "B": 0, "C": 0, "G": 0}
    return GraphProblem(edges, start="S", goal="G", h=h)
