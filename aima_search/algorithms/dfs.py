# aima_search/algorithms/dfs.py
# Depth-First Search: LIFO frontier, goal tested when a node is expanded.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Problem
from ..modes.graph import GraphSearch
from ..modes.queue_search import FrontierPolicy, QueueSearch, bind
from ..search import Search


def depth_first_policy() -> FrontierPolicy:
    return FrontierPolicy("Depth First", lambda h: LIFOStack())


def depth_first_search(problem: Problem, mode: Optional[QueueSearch] = None, **run_kwargs) -> SearchResult:
    """Not complete under TreeSearch on cyclic spaces; pass max_expansions or should_cancel there."""
    mode = mode or GraphSearch()
    return Search("DFS", bind(mode, depth_first_policy())).run(problem, **run_kwargs)
