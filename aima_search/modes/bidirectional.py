# aima_search/modes/bidirectional.py
# Bidirectional search: a forward search from the initial state and a backward search
# from the goal state, each recording where it meets the other, until no better meeting can exist.
from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Tuple

from ..core.control import SearchControl
from ..core.errors import ProblemNotInvertible
from ..core.node import Node
from ..core.problem import Heuristic, Problem, ReverseProblem, State, is_invertible
from ..core.utils import join_paths
from .queue_search import FrontierPolicy, QueueSearch

logger = logging.getLogger(__name__)


class _Meeting:
    """Best (forward, backward) node pair seen so far, ranked by `measure`."""

    def __init__(self, measure: Callable[[Node, Node], float]):
        self.measure = measure
        self.pair: Optional[Tuple[Node, Node]] = None
        self.value = float("inf")

    def offer(self, f_node: Node, b_node: Node) -> None:
        value = self.measure(f_node, b_node)
        if value < self.value:
            self.pair, self.value = (f_node, b_node), value

    def __bool__(self) -> bool:
        return self.pair is not None


class _Direction:
    """Frontier plus reached map (frontier ∪ explored) for one half of the search."""

    def __init__(self, label: str, problem, frontier, h: Heuristic):
        self.label = label
        self.problem = problem
        self.frontier = frontier
        self.h = h
        self.forward = label == "forward"
        self.reached: Dict[State, Node] = {}
        self.explored = set()

    def seed(self, root: Node) -> None:
        self.frontier.push(root)
        self.reached[root.state] = root

    def lower_bound(self) -> float:
        """f of the best queued node: no undiscovered path through this side costs less."""
        top = self.frontier.peek()
        return top.path_cost + float(self.h(top.state))

    def step(self, policy: FrontierPolicy, control: SearchControl,
             other: "_Direction", meeting: _Meeting) -> None:
        """Expand one node, offering every new or improved child the other side has reached."""
        control.tick()
        node = self.frontier.pop()
        self.explored.add(node.state)
        control.expanded(node)

        for child in node.expand(self.problem):
            control.generated()
            s = child.state
            known = self.reached.get(s)
            if known is not None:
                if not (policy.cost_sensitive and child.path_cost < known.path_cost):
                    continue
                if s in self.explored:
                    self.explored.discard(s)
                    self.frontier.push(child)
                else:
                    self.frontier.replace(child)
            else:
                self.frontier.push(child)
            self.reached[s] = child

            match = other.reached.get(s)
            if match is not None:
                if self.forward:
                    meeting.offer(child, match)
                else:
                    meeting.offer(match, child)


class BidirectionalSearch(QueueSearch):
    """Needs a problem exposing goal_state() and predecessors(state).

    How long the two halves keep going after they first meet depends on the policy:
    breadth-first expands whole layers alternately and stops after the layer that met,
    which gives the fewest actions; cost-sensitive policies expand the side with the
    lower bound and stop once the best meeting costs no more than that bound, which
    gives the cheapest path; depth-first and greedy stop at the first meeting.
    """
    name = "Bidirectional Search"

    def search(self, problem: Problem, policy: FrontierPolicy, control: SearchControl) -> Optional[Node]:
        if not is_invertible(problem):
            raise ProblemNotInvertible(
                f"{type(problem).__name__} has no goal_state()/predecessors(); "
                "bidirectional search cannot derive the backward search"
            )
        backward_problem = ReverseProblem(problem)
        fwd = _Direction("forward", problem, policy.new_frontier(), policy.forward_heuristic())
        bwd = _Direction("backward", backward_problem, policy.new_frontier(reverse=True),
                         policy.forward_heuristic(reverse=True))
        fwd.seed(Node(problem.initial_state()))
        bwd.seed(Node(backward_problem.initial_state()))
        control.frontier(2)

        start = fwd.frontier.peek()
        if start.state in bwd.reached:
            return start

        if policy.goal_test_on_generation:
            meeting = _Meeting(lambda f, b: f.depth + b.depth)
            self._by_layers(policy, control, fwd, bwd, meeting)
        elif policy.cost_sensitive:
            meeting = _Meeting(lambda f, b: f.path_cost + b.path_cost)
            self._by_bound(policy, control, fwd, bwd, meeting)
        else:
            meeting = _Meeting(lambda f, b: 0.0)
            self._first_meeting(policy, control, fwd, bwd, meeting)

        if not meeting:
            return None
        f_node, b_node = meeting.pair
        logger.debug("%s/%s: met at %r", self.name, policy.name, f_node.state)
        return join_paths(problem, f_node, b_node)

    def _exhausted(self, policy: FrontierPolicy, direction: _Direction) -> bool:
        if direction.frontier:
            return False
        logger.debug("%s/%s: %s frontier exhausted", self.name, policy.name, direction.label)
        return True

    def _by_layers(self, policy, control, fwd, bwd, meeting) -> None:
        # before a layer, the reached sets are disjoint, so any meeting made while
        # expanding it is as short as a path between the two sides can be
        while True:
            for this, other in ((fwd, bwd), (bwd, fwd)):
                if self._exhausted(policy, this):
                    return
                for _ in range(len(this.frontier)):
                    this.step(policy, control, other, meeting)
                    control.frontier(len(fwd.frontier) + len(bwd.frontier))
                if meeting:
                    return

    def _by_bound(self, policy, control, fwd, bwd, meeting) -> None:
        # with no heuristic the two bounds are plain path costs and add up
        additive = policy.heuristic is None
        while not (self._exhausted(policy, fwd) or self._exhausted(policy, bwd)):
            lb_f, lb_b = fwd.lower_bound(), bwd.lower_bound()
            bound = lb_f + lb_b if additive else max(lb_f, lb_b)
            if meeting and meeting.value <= bound:
                return
            this, other = (fwd, bwd) if lb_f <= lb_b else (bwd, fwd)
            this.step(policy, control, other, meeting)
            control.frontier(len(fwd.frontier) + len(bwd.frontier))

    def _first_meeting(self, policy, control, fwd, bwd, meeting) -> None:
        while True:
            for this, other in ((fwd, bwd), (bwd, fwd)):
                if self._exhausted(policy, this):
                    return
                this.step(policy, control, other, meeting)
                control.frontier(len(fwd.frontier) + len(bwd.frontier))
                if meeting:
                    return
