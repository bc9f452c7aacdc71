# aima_search/algorithms/bfs.py
from __future__ import annotations
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Problem
from ..modes.graph import GraphSearch
from ..modes.queue_search import FrontierPolicy, QueueSearch, bind
from ..search import Search


def breadth_first_policy() -> FrontierPolicy:
    # goal test on generation: stops one layer earlier than testing at expansion
    return FrontierPolicy("Breadth First", lambda h: FIFOQueue(), goal_test_on_generation=True)


def breadth_first_search(problem: Problem, mode: Optional[QueueSearch] = None, **run_kwargs) -> SearchResult:
    mode = mode or GraphSearch()
    return Search("BFS", bind(mode, breadth_first_policy())).run(problem, **run_kwargs)
