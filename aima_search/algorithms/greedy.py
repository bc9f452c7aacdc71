# aima_search/algorithms/greedy.py
# Greedy best-first: ordered by h alone. Neither complete nor optimal in general.
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search, priority_policy
from ..core.errors import InvalidConfiguration
from ..core.metrics import SearchResult
from ..core.problem import Heuristic, Problem, heuristic_from_problem
from ..modes.queue_search import FrontierPolicy, QueueSearch


def _h(n, h):
    return h(n.state)


def greedy_policy(heuristic: Heuristic) -> FrontierPolicy:
    # path cost plays no part in the ordering, so a duplicate is never worth keeping
    return priority_policy("Greedy Best First", _h, heuristic=heuristic, cost_sensitive=False)


def greedy_best_first_search(
    problem: Problem,
    heuristic: Optional[Heuristic] = None,
    mode: Optional[QueueSearch] = None,
    **run_kwargs,
) -> SearchResult:
    h = heuristic or heuristic_from_problem(problem)
    if h is None:
        raise InvalidConfiguration("greedy best-first search needs a heuristic")
    return best_first_search(problem, f=_h, name="Greedy", h=h, mode=mode,
                             cost_sensitive=False, **run_kwargs)
