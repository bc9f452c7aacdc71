# aima_search/core/metrics.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional
import math
import time, tracemalloc

from .problem import State


def _finite(x: float) -> Optional[float]:
    # JSON has no infinity; an unreachable cost is reported as null
    return x if math.isfinite(x) else None


@dataclass
class Metrics:
    """Counters for one search invocation. Owned by exactly one run."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    frontier_size: int = 0
    max_frontier_size: int = 0
    max_depth: int = 0
    iterations: int = 0
    path_cost: float = math.inf
    time_s: float = 0.0
    peak_kb: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["path_cost"] = _finite(self.path_cost)
        return d


class FailureKind(str, Enum):
    NO_SOLUTION = "no_solution"
    LOCAL_OPTIMUM = "local_optimum"
    CANCELLED = "cancelled"


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any]
    metrics: Metrics = field(default_factory=Metrics)
    failure: Optional[FailureKind] = None
    final_state: Optional[State] = None
    error: Optional[str] = None

    @classmethod
    def solved(cls, algo: str, actions: List[Any], cost: float, metrics: Metrics,
               final_state: Optional[State] = None) -> "SearchResult":
        metrics.path_cost = float(cost)
        return cls(algo, True, list(actions), metrics, None, final_state)

    @classmethod
    def failed(cls, algo: str, kind: FailureKind, metrics: Metrics,
               actions: Optional[List[Any]] = None, cost: float = math.inf,
               final_state: Optional[State] = None, error: Optional[str] = None) -> "SearchResult":
        metrics.path_cost = float(cost)
        return cls(algo, False, list(actions or []), metrics, kind, final_state, error)

    # flat accessors, as the benchmark rows expect them
    @property
    def cost(self) -> float:
        return self.metrics.path_cost

    @property
    def nodes_expanded(self) -> int:
        return self.metrics.nodes_expanded

    @property
    def time_s(self) -> float:
        return self.metrics.time_s

    @property
    def peak_kb(self) -> Optional[int]:
        return self.metrics.peak_kb

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algo": self.algo,
            "success": self.success,
            "actions": [repr(a) if not isinstance(a, (str, int, float)) else a for a in self.actions],
            "failure": self.failure.value if self.failure else None,
            "final_state": repr(self.final_state) if self.final_state is not None else None,
            "error": self.error,
            **self.metrics.to_dict(),
            "cost": _finite(self.cost),
        }


class MeasuredRun:
    """
    Context manager for timing and (optionally) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = False) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> Optional[int]:
        """Approx peak KB, or None when memory was not traced."""
        if not self.trace_memory:
            return None
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


class Outcome(NamedTuple):
    """What a strategy hands back to Search.run: the final node and, if it failed, why."""
    node: Optional[Any]
    failure: Optional[FailureKind] = None
