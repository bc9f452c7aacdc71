# aima_search/algorithms/hill_climbing.py
from __future__ import annotations
import logging
from typing import Optional
from ..core.control import SearchControl
from ..core.errors import InvalidConfiguration
from ..core.metrics import FailureKind, Outcome, SearchResult
from ..core.node import Node
from ..core.problem import Heuristic, Problem, heuristic_from_problem
from ..search import Search

logger = logging.getLogger(__name__)


def hill_climbing_runner(h: Heuristic):
    """Steepest *descent* on h(n): move to the successor with the lowest h, only if it
    is strictly lower than the current h; otherwise stop where we are.

    No frontier and no backtracking. Can stall on local minima and plateaus; a
    stall on a non-goal state is reported as LOCAL_OPTIMUM with the climb so far.
    """
    def runner(problem: Problem, control: SearchControl) -> Outcome:
        current = Node(problem.initial_state())
        current_h = float(h(current.state))
        while True:
            control.tick()
            if problem.is_goal(current.state):
                return Outcome(current)

            control.expanded(current)
            best: Optional[Node] = None
            best_h = current_h
            for child in current.expand(problem):
                control.generated()
                child_h = float(h(child.state))
                if child_h < best_h:
                    best, best_h = child, child_h

            if best is None:
                logger.debug("Hill climbing: stuck at %r (h=%g)", current.state, current_h)
                return Outcome(current, FailureKind.LOCAL_OPTIMUM)
            current, current_h = best, best_h
    return runner


def hill_climbing_search(problem: Problem, heuristic: Optional[Heuristic] = None, **run_kwargs) -> SearchResult:
    h = heuristic or heuristic_from_problem(problem)
    if h is None:
        raise InvalidConfiguration("hill climbing needs a heuristic")
    return Search("Hill-Climbing", hill_climbing_runner(h)).run(problem, **run_kwargs)
