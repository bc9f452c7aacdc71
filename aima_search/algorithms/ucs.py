# Uniform Cost Search (UCS): best-first by accumulated path cost.
# aima_search/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search, priority_policy
from ..core.metrics import SearchResult
from ..core.problem import Problem
from ..modes.queue_search import FrontierPolicy, QueueSearch


def _g(n, h):
    return n.path_cost


def uniform_cost_policy() -> FrontierPolicy:
    return priority_policy("Uniform Cost", _g, cost_sensitive=True)


def uniform_cost_search(problem: Problem, mode: Optional[QueueSearch] = None, **run_kwargs) -> SearchResult:
    return best_first_search(problem, f=_g, name="UCS", mode=mode, cost_sensitive=True, **run_kwargs)
