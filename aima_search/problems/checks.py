# aima_search/problems/checks.py
# Walks a problem's reachable states and checks the properties the strategies rely on.
import math
from collections import deque

from ..core.problem import is_invertible


def _reachable(problem, max_states):
    seen = set()
    q = deque([problem.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        yield s
        for a in problem.actions(s):
            q.append(problem.result(s, a))


def sanity_check_problem(problem, max_states: int = 10_000):
    """Checks every step cost is finite and non-negative, and, for problems
    with predecessors(), that each (action, predecessor) pair leads back.

    Cost-based strategies are only optimal under the first condition and
    bidirectional search is only correct under the second; the engine itself
    checks neither.
    """
    invertible = is_invertible(problem)
    visited = 0
    for s in _reachable(problem, max_states):
        visited += 1
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise AssertionError(f"step_cost is None for (s={s}, a={a}, s'={s2})")
            if not math.isfinite(cost) or cost < 0:
                raise AssertionError(f"step_cost {cost!r} is not finite and non-negative for (s={s}, a={a}, s'={s2})")
        if invertible:
            for a, p in problem.predecessors(s):
                if problem.result(p, a) != s:
                    raise AssertionError(f"predecessor ({a}, {p}) of {s} does not lead back to it")
    kind = "costs and predecessors" if invertible else "costs"
    return f"OK: visited {visited} states; {kind} consistent."
