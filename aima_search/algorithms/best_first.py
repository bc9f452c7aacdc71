# aima_search/algorithms/best_first.py
# Priority-ordered frontier policies shared by uniform-cost, greedy and A*.
from __future__ import annotations
from typing import Any, Callable, Optional
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult
from ..core.node import Node
from ..core.problem import Heuristic, Problem
from ..modes.graph import GraphSearch
from ..modes.queue_search import FrontierPolicy, QueueSearch, bind
from ..search import Search

Priority = Callable[[Node, Heuristic], Any]


def priority_policy(
    name: str,
    f: Priority,
    heuristic: Optional[Heuristic] = None,
    cost_sensitive: bool = True,
) -> FrontierPolicy:
    """f(node, h) gives the priority; lower is expanded first, ties in insertion order."""
    def make_frontier(h: Heuristic) -> PriorityQueue:
        return PriorityQueue(key=lambda n: f(n, h))
    return FrontierPolicy(name, make_frontier, heuristic=heuristic, cost_sensitive=cost_sensitive)


def best_first_search(
    problem: Problem,
    f: Priority,
    name: str = "BestFirst",
    h: Optional[Heuristic] = None,
    mode: Optional[QueueSearch] = None,
    cost_sensitive: bool = True,
    **run_kwargs,
) -> SearchResult:
    mode = mode or GraphSearch()
    policy = priority_policy(name, f, heuristic=h, cost_sensitive=cost_sensitive)
    return Search(name, bind(mode, policy)).run(problem, **run_kwargs)
