# aima_search/modes/tree.py
from __future__ import annotations
import logging
from typing import Optional

from ..core.control import SearchControl
from ..core.node import Node
from ..core.problem import Problem
from .queue_search import FrontierPolicy, QueueSearch

logger = logging.getLogger(__name__)


class TreeSearch(QueueSearch):
    """No explored set: every successor goes on the frontier.

    Revisits states freely; on cyclic spaces termination is up to the strategy
    (or the caller's cancellation check).
    """
    name = "Tree Search"

    def search(self, problem: Problem, policy: FrontierPolicy, control: SearchControl) -> Optional[Node]:
        early = policy.goal_test_on_generation
        root = Node(problem.initial_state())
        if early and problem.is_goal(root.state):
            return root

        frontier = policy.new_frontier()
        self.add(frontier, root, control)

        while frontier:
            control.tick()
            node = frontier.pop()
            if not early and problem.is_goal(node.state):
                return node

            control.expanded(node)
            for child in node.expand(problem):
                control.generated()
                if early and problem.is_goal(child.state):
                    return child
                self.add(frontier, child, control)

        logger.debug("%s/%s: frontier exhausted", self.name, policy.name)
        return None
