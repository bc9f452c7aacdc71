# aima_search/algorithms/rbfs.py
# Recursive Best-First Search (RBFS): best-first with memory linear in the depth of the search.
# It descends into the best successor with an f-limit set by the best alternative, and on the
# way back replaces the abandoned successor's f with the best f found below it (its backed-up
# value), so the branch can be resumed later with a tighter estimate.
from __future__ import annotations
import math
from collections import Counter
from operator import itemgetter
from typing import List, Optional
from ..core.control import SearchControl
from ..core.errors import InvalidConfiguration
from ..core.metrics import Outcome, SearchResult
from ..core.node import Node
from ..core.problem import Heuristic, Problem, heuristic_from_problem
from ..search import Search

_first = itemgetter(0)


class _Frame:
    """One level of the simulated recursion: RBFS(node, f_limit)."""
    __slots__ = ("node", "f", "f_limit", "successors")

    def __init__(self, node: Node, f: float, f_limit: float):
        self.node = node
        self.f = f
        self.f_limit = f_limit
        self.successors: Optional[List[list]] = None  # [f, node] pairs, best first


def rbfs_runner(h: Heuristic, avoid_loops: bool = False):
    """The recursion is kept on an explicit stack of frames; `returned` carries a
    child's backed-up f to its parent frame the way a return value would."""
    def runner(problem: Problem, control: SearchControl) -> Outcome:
        root = Node(problem.initial_state())
        stack = [_Frame(root, float(h(root.state)), math.inf)]
        on_path = Counter([root.state])
        returned = math.inf

        def unwind(value: float) -> float:
            frame = stack.pop()
            on_path[frame.node.state] -= 1
            return value

        while stack:
            frame = stack[-1]
            if frame.successors is None:
                control.tick()
                node = frame.node
                if problem.is_goal(node.state):
                    return Outcome(node)
                control.expanded(node)
                successors = []
                for child in node.expand(problem):
                    control.generated()
                    if avoid_loops and on_path[child.state] > 0:
                        continue
                    # f never drops below the parent's backed-up f along a path
                    successors.append([max(child.path_cost + float(h(child.state)), frame.f), child])
                if not successors:
                    returned = unwind(math.inf)
                    continue
                frame.successors = successors
            else:
                # resumed: the best successor (index 0) just came back with a revised f
                frame.successors[0][0] = returned

            frame.successors.sort(key=_first)
            best_f, best = frame.successors[0]
            if best_f > frame.f_limit or best_f == math.inf:
                returned = unwind(best_f)
                continue
            alternative = frame.successors[1][0] if len(frame.successors) > 1 else math.inf
            stack.append(_Frame(best, best_f, min(frame.f_limit, alternative)))
            on_path[best.state] += 1
            control.frontier(sum(len(fr.successors or ()) for fr in stack))

        return Outcome(None)
    return runner


def recursive_best_first_search(
    problem: Problem,
    heuristic: Optional[Heuristic] = None,
    avoid_loops: bool = False,
    **run_kwargs,
) -> SearchResult:
    """
    RBFS: Recursive Best-First Search (linear memory).
    Same optimal cost as A* under an admissible heuristic, usually with more expansions.
    avoid_loops=True refuses to descend into a state already on the current path.
    """
    h = heuristic or heuristic_from_problem(problem)
    if h is None:
        raise InvalidConfiguration("recursive best-first search needs a heuristic")
    name = "RBFS-AL" if avoid_loops else "RBFS"
    return Search(name, rbfs_runner(h, avoid_loops)).run(problem, **run_kwargs)
