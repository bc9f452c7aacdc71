# aima_search/core/utils.py
# Utility functions for reconstructing the solution path from a goal node in a search tree.
from __future__ import annotations
from typing import List, Tuple
from .node import Node
from .problem import Problem


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def join_paths(problem: Problem, forward: Node, backward: Node) -> Node:
    """Stitch a forward node and a backward node that share a state.

    Backward nodes carry (forward_action, predecessor) actions, so walking the
    backward chain towards its root replays the forward edges from the meeting
    state to the goal. Returns one forward Node for the whole path.
    """
    node = forward
    cur = backward
    while cur.parent is not None:
        a = cur.action[0]
        s2 = cur.parent.state
        node = Node(
            state=s2,
            parent=node,
            action=a,
            path_cost=node.path_cost + float(problem.step_cost(node.state, a, s2)),
            depth=node.depth + 1,
        )
        cur = cur.parent
    return node
