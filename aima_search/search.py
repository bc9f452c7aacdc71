# aima_search/search.py
# The object callers run: a named strategy bound to a mode, producing a SearchResult per problem.
from __future__ import annotations
import logging
from typing import Callable, Optional

from .core.control import SearchControl
from .core.errors import SearchCancelled
from .core.metrics import FailureKind, MeasuredRun, Outcome, SearchResult
from .core.problem import Problem
from .core.utils import reconstruct_path

logger = logging.getLogger(__name__)

Runner = Callable[[Problem, SearchControl], Outcome]


class Search:
    """A ready-to-run search. Holds no per-run state, so one instance can be
    run many times, including from several threads at once."""

    def __init__(self, name: str, runner: Runner, strategy=None, mode=None):
        self.name = name
        self.runner = runner
        self.strategy = strategy
        self.mode = mode

    def run(
        self,
        problem: Problem,
        should_cancel: Optional[Callable[[], bool]] = None,
        max_expansions: Optional[int] = None,
        trace_memory: bool = False,
    ) -> SearchResult:
        control = SearchControl(should_cancel=should_cancel, max_expansions=max_expansions)
        metrics = control.metrics
        logger.debug("%s: starting on %s", self.name, type(problem).__name__)

        with MeasuredRun(trace_memory=trace_memory) as meter:
            try:
                outcome = self.runner(problem, control)
            except SearchCancelled as e:
                logger.debug("%s: %s after %d expansions", self.name, e.reason, metrics.nodes_expanded)
                outcome = Outcome(None, FailureKind.CANCELLED)
                reason = e.reason
            else:
                reason = None
        metrics.time_s = meter.elapsed
        metrics.peak_kb = meter.peak_kb

        node, failure = outcome
        if failure is None and node is not None:
            actions, cost = reconstruct_path(node)
            logger.debug("%s: solved, %d actions, cost %g, %d expansions",
                         self.name, len(actions), cost, metrics.nodes_expanded)
            return SearchResult.solved(self.name, actions, cost, metrics, final_state=node.state)

        if failure is None:
            failure = FailureKind.NO_SOLUTION
        if failure is FailureKind.LOCAL_OPTIMUM and node is not None:
            actions, cost = reconstruct_path(node)
            return SearchResult.failed(self.name, failure, metrics, actions=actions, cost=cost,
                                       final_state=node.state)
        logger.debug("%s: %s", self.name, failure.value)
        return SearchResult.failed(self.name, failure, metrics, error=reason)

    def __call__(self, problem: Problem, **kwargs) -> SearchResult:
        return self.run(problem, **kwargs)

    def __repr__(self) -> str:
        return f"Search({self.name!r})"
