# aima_search/modes/queue_search.py
# What a frontier-based strategy hands to a search mode, and the base the three modes share.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..core.control import SearchControl
from ..core.metrics import Outcome
from ..core.node import Node
from ..core.problem import Heuristic, Problem, zero_heuristic


@dataclass(frozen=True)
class FrontierPolicy:
    """Frontier ordering plus the two knobs a mode needs from a strategy.

    goal_test_on_generation: test successors as they are created (breadth-first).
    cost_sensitive: on a duplicate, keep the cheaper path (decrease-key / reopen)
    instead of simply discarding the newcomer.
    """
    name: str
    make_frontier: Callable[[Heuristic], Any]
    heuristic: Optional[Heuristic] = None
    goal_test_on_generation: bool = False
    cost_sensitive: bool = False

    def forward_heuristic(self, reverse: bool = False) -> Heuristic:
        # the heuristic estimates distance to the goal, which means nothing backwards
        return zero_heuristic if reverse or self.heuristic is None else self.heuristic

    def new_frontier(self, reverse: bool = False):
        return self.make_frontier(self.forward_heuristic(reverse))


class QueueSearch:
    """Base for tree, graph and bidirectional search.

    search() returns the goal Node (whose parent chain is the solution) or None
    when the reachable space was exhausted.
    """
    name = "Queue Search"

    def search(self, problem: Problem, policy: FrontierPolicy, control: SearchControl) -> Optional[Node]:
        raise NotImplementedError

    @staticmethod
    def add(frontier, node: Node, control: SearchControl) -> None:
        frontier.push(node)
        control.frontier(len(frontier))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def bind(mode: QueueSearch, policy: FrontierPolicy):
    """Runner for Search: drive `mode` with `policy` and wrap the goal node."""
    def runner(problem: Problem, control: SearchControl) -> Outcome:
        return Outcome(mode.search(problem, policy, control))
    return runner
