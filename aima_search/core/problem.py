# Defines the standard interface for any search problem (states, actions, goals, costs) and its heuristic.
# aima_search/core/problem.py
from __future__ import annotations
from typing import Any, Callable, Hashable, Iterable, Optional, Protocol, Tuple, runtime_checkable

Action = Hashable
State = Hashable
Heuristic = Callable[[State], float]


@runtime_checkable
class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view)."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...


@runtime_checkable
class InvertibleProblem(Problem, Protocol):
    """A problem whose transitions can be walked backwards from a single goal.

    predecessors(s) yields (a, p) pairs with result(p, a) == s.
    """
    def goal_state(self) -> State: ...
    def predecessors(self, s: State) -> Iterable[Tuple[Action, State]]: ...


def is_invertible(problem: Any) -> bool:
    return callable(getattr(problem, "goal_state", None)) and callable(getattr(problem, "predecessors", None))


class ReverseProblem:
    """Wraps an invertible problem to run the search backward from its goal.

    Actions of the reverse problem are the (forward_action, predecessor) pairs
    yielded by `predecessors`, so the forward action survives in every backward Node.
    """
    def __init__(self, problem: InvertibleProblem):
        self.p = problem
        self._start = problem.initial_state()

    def initial_state(self) -> State:
        return self.p.goal_state()

    def is_goal(self, s: State) -> bool:
        return s == self._start

    def actions(self, s: State) -> Iterable[Tuple[Action, State]]:
        return list(self.p.predecessors(s))

    def result(self, s: State, a: Tuple[Action, State]) -> State:
        return a[1]

    def step_cost(self, s: State, a: Tuple[Action, State], s2: State) -> float:
        # same edge, walked the other way
        return self.p.step_cost(s2, a[0], s)


def as_heuristic(h: Any) -> Optional[Heuristic]:
    """Accept a plain callable or an object exposing estimate(state)."""
    if h is None:
        return None
    estimate = getattr(h, "estimate", None)
    if callable(estimate):
        return estimate
    if callable(h):
        return h
    raise TypeError(f"heuristic must be callable or expose estimate(state), got {type(h).__name__}")


def heuristic_from_problem(problem: Any) -> Optional[Heuristic]:
    if hasattr(problem, "heuristic"):
        def h(state: State) -> float:
            val = problem.heuristic(state)
            return 0.0 if val is None else float(val)
        return h
    return None


def zero_heuristic(state: State) -> float:
    return 0.0
