# aima_search/modes/graph.py
from __future__ import annotations
import logging
from typing import Dict, Optional

from ..core.control import SearchControl
from ..core.node import Node
from ..core.problem import Problem, State
from .queue_search import FrontierPolicy, QueueSearch

logger = logging.getLogger(__name__)


class GraphSearch(QueueSearch):
    """Tree search plus an explored set keyed by state.

    A successor whose state is explored or already queued is dropped, unless the
    policy is cost-sensitive and the successor is strictly cheaper: then a queued
    entry is replaced (decrease-key) and an explored state is reopened.
    """
    name = "Graph Search"

    def search(self, problem: Problem, policy: FrontierPolicy, control: SearchControl) -> Optional[Node]:
        early = policy.goal_test_on_generation
        root = Node(problem.initial_state())
        if early and problem.is_goal(root.state):
            return root

        frontier = policy.new_frontier()
        self.add(frontier, root, control)
        explored: Dict[State, float] = {}
        reopened = 0

        while frontier:
            control.tick()
            node = frontier.pop()
            if not early and problem.is_goal(node.state):
                if reopened:
                    logger.debug("%s/%s: %d state(s) reopened", self.name, policy.name, reopened)
                return node

            explored[node.state] = node.path_cost
            control.expanded(node)
            for child in node.expand(problem):
                control.generated()
                s = child.state
                if s in explored:
                    if policy.cost_sensitive and child.path_cost < explored[s]:
                        del explored[s]
                        reopened += 1
                        self.add(frontier, child, control)
                    continue
                queued = frontier.get(s)
                if queued is not None:
                    if policy.cost_sensitive and child.path_cost < queued.path_cost:
                        frontier.replace(child)
                    continue
                if early and problem.is_goal(s):
                    return child
                self.add(frontier, child, control)

        logger.debug("%s/%s: frontier exhausted after %d expansions",
                     self.name, policy.name, control.metrics.nodes_expanded)
        return None
