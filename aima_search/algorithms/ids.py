# aima_search/algorithms/ids.py
# Iterative Deepening Search: depth-limited DFS with limits 0, 1, 2, ... Always a tree search.
from __future__ import annotations
import itertools
import logging
from typing import Optional, Union
from ..core.control import SearchControl
from ..core.metrics import FailureKind, Outcome, SearchResult
from ..core.node import Node
from ..core.problem import Problem
from ..search import Search

logger = logging.getLogger(__name__)


class _Cutoff:
    def __repr__(self) -> str:
        return "CUTOFF"


# depth bound too small; never leaves this module
CUTOFF = _Cutoff()


def depth_limited_search(problem: Problem, limit: int, control: SearchControl) -> Union[Node, _Cutoff, None]:
    """Depth-first to `limit`, goal tested at expansion.

    Returns the goal Node, CUTOFF if some node sat on the limit unexpanded,
    or None if everything within the limit was explored.
    Uses an explicit stack, so deep limits don't hit the recursion limit.
    """
    stack = [Node(problem.initial_state())]
    cutoff = False
    while stack:
        control.tick()
        node = stack.pop()
        if problem.is_goal(node.state):
            return node
        if node.depth >= limit:
            cutoff = True
            continue
        control.expanded(node)
        children = list(node.expand(problem))
        control.generated(len(children))
        # reversed so the first action is explored first
        stack.extend(reversed(children))
        control.frontier(len(stack))
    return CUTOFF if cutoff else None


def ids_runner(max_depth: Optional[int] = None):
    def runner(problem: Problem, control: SearchControl) -> Outcome:
        limits = itertools.count() if max_depth is None else range(max_depth + 1)
        for limit in limits:
            control.metrics.iterations += 1
            result = depth_limited_search(problem, limit, control)
            if result is not CUTOFF:
                logger.debug("IDS: finished at limit %d (%s)", limit, "solved" if result else "exhausted")
                return Outcome(result)
        # still cut off at max_depth: the space was not shown to be empty
        return Outcome(None, FailureKind.CANCELLED)
    return runner


def iterative_deepening_search(problem: Problem, max_depth: Optional[int] = None, **run_kwargs) -> SearchResult:
    """
    Iterative Deepening Search (tree-like). Repeats a depth-limited DFS with limits 0..max_depth
    (unbounded when max_depth is None). Expansion count = nodes expanded over all iterations.
    """
    return Search("IDS", ids_runner(max_depth)).run(problem, **run_kwargs)
