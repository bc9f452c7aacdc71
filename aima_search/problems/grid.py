# aima_search/problems/grid.py
from __future__ import annotations
from typing import FrozenSet, Iterable, Iterator, Optional, Set, Tuple
from ..core.problem import Problem

Coord = Tuple[int, int]

# action -> (d_row, d_col); dict order is the order actions are tried
_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


def _manhattan(a: Coord, b: Coord) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


class GridProblem(Problem):
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - Actions: the moves among Up/Down/Left/Right that stay in bounds and off walls
    - step_cost: 1.0 per move
    - heuristic: Manhattan distance to the goal (admissible and consistent here)
    - predecessors: every move is reversible, so bidirectional search applies
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Optional[Set[Coord]] = None):
        self.rows = rows
        self.cols = cols
        self.walls: FrozenSet[Coord] = frozenset(walls or ())
        for name, cell in (("start", start), ("goal", goal)):
            if not self.is_open(cell):
                raise ValueError(f"{name} cell {cell} is outside the {rows}x{cols} grid or on a wall")
        self.start = start
        self.goal = goal

    def is_open(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def _neighbours(self, cell: Coord, sign: int) -> Iterator[Tuple[str, Coord]]:
        r, c = cell
        for name, (dr, dc) in _MOVES.items():
            other = (r + sign * dr, c + sign * dc)
            if self.is_open(other):
                yield name, other

    def initial_state(self) -> Coord:
        return self.start

    def goal_state(self) -> Coord:
        return self.goal

    def is_goal(self, state: Coord) -> bool:
        return state == self.goal

    def actions(self, state: Coord) -> Iterable[str]:
        return [name for name, _ in self._neighbours(state, +1)]

    def result(self, state: Coord, action: str) -> Coord:
        dr, dc = _MOVES[action]
        return (state[0] + dr, state[1] + dc)

    def step_cost(self, state: Coord, action: str, next_state: Coord) -> float:
        return 1.0

    def predecessors(self, state: Coord) -> Iterator[Tuple[str, Coord]]:
        # the cell one step against `action` reaches `state` by taking `action`
        return self._neighbours(state, -1)

    def heuristic(self, state: Coord) -> float:
        return _manhattan(state, self.goal)


def manhattan_to(goal: Coord):
    """Heuristic callable for a fixed goal cell."""
    def h(state: Coord) -> float:
        return _manhattan(state, goal)
    return h


def make_grid_problem() -> GridProblem:
    # 5x7 grid with a wall the path has to get around
    walls = {(1, 3), (2, 3), (3, 3), (3, 4)}
    return GridProblem(rows=5, cols=7, start=(0, 0), goal=(4, 6), walls=walls)
