# aima_search/core/node.py
# A Node wraps a state plus the path that generated it; nodes are never mutated after construction.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from .problem import Action, Problem, State


@dataclass(frozen=True, eq=False)
class Node:
    state: State
    parent: Optional["Node"] = None
    action: Optional[Action] = None
    path_cost: float = 0.0
    depth: int = 0

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        s = self.state
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(
                    f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Check your problem's ACTIONS/RESULT/cost mapping."
                )
            yield Node(
                state=s2,
                parent=self,
                action=a,
                path_cost=self.path_cost + float(cost),
                depth=self.depth + 1,
            )

    def path(self) -> List["Node"]:
        """Nodes from the root down to (and including) this one."""
        chain = []
        cur: Optional[Node] = self
        while cur is not None:
            chain.append(cur)
            cur = cur.parent
        chain.reverse()
        return chain

    def solution(self) -> List[Any]:
        return [n.action for n in self.path()[1:]]

    def __repr__(self) -> str:
        return f"<Node {self.state!r} g={self.path_cost:g} d={self.depth}>"
