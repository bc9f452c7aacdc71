# aima_search/core/control.py
from __future__ import annotations
from typing import Callable, Optional

from .errors import SearchCancelled
from .metrics import Metrics
from .node import Node


class SearchControl:
    """Per-run bookkeeping shared by a mode and its strategy.

    Holds the run's Metrics and the caller's cancellation hooks. tick() is
    called once per expansion step (and once per recursive-best-first call).
    """

    def __init__(self, should_cancel: Optional[Callable[[], bool]] = None,
                 max_expansions: Optional[int] = None):
        self.should_cancel = should_cancel
        self.max_expansions = max_expansions
        self.metrics = Metrics()

    def tick(self) -> None:
        if self.max_expansions is not None and self.metrics.nodes_expanded >= self.max_expansions:
            raise SearchCancelled(f"expansion cap of {self.max_expansions} reached")
        if self.should_cancel is not None and self.should_cancel():
            raise SearchCancelled("cancelled by caller")

    def expanded(self, node: Node) -> None:
        m = self.metrics
        m.nodes_expanded += 1
        if node.depth > m.max_depth:
            m.max_depth = node.depth

    def generated(self, count: int = 1) -> None:
        self.metrics.nodes_generated += count

    def frontier(self, size: int) -> None:
        m = self.metrics
        m.frontier_size = size
        if size > m.max_frontier_size:
            m.max_frontier_size = size
