# aima_search/algorithms/astar.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search, priority_policy
from ..core.errors import InvalidConfiguration
from ..core.metrics import SearchResult
from ..core.problem import Heuristic, Problem, heuristic_from_problem
from ..modes.queue_search import FrontierPolicy, QueueSearch


def _f(n, h):
    hv = float(h(n.state))
    # f first, then prefer the node that looks closer to the goal
    return (n.path_cost + hv, hv)


def astar_policy(heuristic: Heuristic) -> FrontierPolicy:
    """Under GraphSearch a strictly cheaper path to an explored state reopens it,
    which keeps A* optimal for admissible but inconsistent heuristics."""
    return priority_policy("A*", _f, heuristic=heuristic, cost_sensitive=True)


def a_star_search(
    problem: Problem,
    heuristic: Optional[Heuristic] = None,
    mode: Optional[QueueSearch] = None,
    **run_kwargs,
) -> SearchResult:
    h = heuristic or heuristic_from_problem(problem)
    if h is None:
        raise InvalidConfiguration("A* search needs a heuristic")
    return best_first_search(problem, f=_f, name="A*", h=h, mode=mode, cost_sensitive=True, **run_kwargs)
