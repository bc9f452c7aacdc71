# aima_search/factory.py
# Selection boundary: maps a (strategy, mode) pair plus an optional heuristic onto a ready Search.
# Pure functions only; invalid pairings fail here, before anything runs.
from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from .algorithms.astar import astar_policy
from .algorithms.bfs import breadth_first_policy
from .algorithms.dfs import depth_first_policy
from .algorithms.greedy import greedy_policy
from .algorithms.hill_climbing import hill_climbing_runner
from .algorithms.ids import ids_runner
from .algorithms.rbfs import rbfs_runner
from .algorithms.ucs import uniform_cost_policy
from .core.errors import InvalidConfiguration
from .core.problem import Heuristic, as_heuristic
from .modes.bidirectional import BidirectionalSearch
from .modes.graph import GraphSearch
from .modes.queue_search import FrontierPolicy, QueueSearch, bind
from .modes.tree import TreeSearch
from .search import Search

logger = logging.getLogger(__name__)


class _Parseable(str, Enum):
    @property
    def label(self) -> str:
        return self._labels()[self]

    @classmethod
    def _labels(cls) -> Dict[Any, str]:
        raise NotImplementedError

    @classmethod
    def parse(cls, value: Union[str, "_Parseable"]):
        """Accept a member, its value ('astar'), its name ('A_STAR') or its label ('A*')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower(), member.label.lower()):
                    return member
        choices = ", ".join(m.value for m in cls)
        raise InvalidConfiguration(f"unknown {cls.__name__} {value!r}; expected one of: {choices}")


class StrategyId(_Parseable):
    DEPTH_FIRST = "dfs"
    BREADTH_FIRST = "bfs"
    ITERATIVE_DEEPENING = "ids"
    UNIFORM_COST = "ucs"
    GREEDY_BEST_FIRST = "greedy"
    A_STAR = "astar"
    RECURSIVE_BEST_FIRST = "rbfs"
    RECURSIVE_BEST_FIRST_AVOIDING_LOOPS = "rbfs-al"
    HILL_CLIMBING = "hill"

    @classmethod
    def _labels(cls):
        return _STRATEGY_LABELS


class ModeId(_Parseable):
    TREE = "tree"
    GRAPH = "graph"
    BIDIRECTIONAL = "bidirectional"

    @classmethod
    def _labels(cls):
        return _MODE_LABELS


_STRATEGY_LABELS = {
    StrategyId.DEPTH_FIRST: "Depth First",
    StrategyId.BREADTH_FIRST: "Breadth First",
    StrategyId.ITERATIVE_DEEPENING: "Iterative Deepening",
    StrategyId.UNIFORM_COST: "Uniform Cost",
    StrategyId.GREEDY_BEST_FIRST: "Greedy Best First",
    StrategyId.A_STAR: "A*",
    StrategyId.RECURSIVE_BEST_FIRST: "Recursive Best First",
    StrategyId.RECURSIVE_BEST_FIRST_AVOIDING_LOOPS: "Recursive Best First Avoiding Loops",
    StrategyId.HILL_CLIMBING: "Hill Climbing",
}

_MODE_LABELS = {
    ModeId.TREE: "Tree Search",
    ModeId.GRAPH: "Graph Search",
    ModeId.BIDIRECTIONAL: "Bidirectional Search",
}

INFORMED = frozenset({
    StrategyId.GREEDY_BEST_FIRST,
    StrategyId.A_STAR,
    StrategyId.RECURSIVE_BEST_FIRST,
    StrategyId.RECURSIVE_BEST_FIRST_AVOIDING_LOOPS,
    StrategyId.HILL_CLIMBING,
})

# strategies that run their own traversal instead of a frontier inside a mode
SELF_DRIVEN = frozenset({
    StrategyId.ITERATIVE_DEEPENING,
    StrategyId.RECURSIVE_BEST_FIRST,
    StrategyId.RECURSIVE_BEST_FIRST_AVOIDING_LOOPS,
    StrategyId.HILL_CLIMBING,
})

_POLICIES: Dict[StrategyId, Callable[[Optional[Heuristic]], FrontierPolicy]] = {
    StrategyId.DEPTH_FIRST: lambda h: depth_first_policy(),
    StrategyId.BREADTH_FIRST: lambda h: breadth_first_policy(),
    StrategyId.UNIFORM_COST: lambda h: uniform_cost_policy(),
    StrategyId.GREEDY_BEST_FIRST: greedy_policy,
    StrategyId.A_STAR: astar_policy,
}

_MODES: Dict[ModeId, Callable[[], QueueSearch]] = {
    ModeId.TREE: TreeSearch,
    ModeId.GRAPH: GraphSearch,
    ModeId.BIDIRECTIONAL: BidirectionalSearch,
}


def strategy_names() -> List[str]:
    return [s.label for s in StrategyId]


def mode_names() -> List[str]:
    return [m.label for m in ModeId]


def is_supported(strategy: StrategyId, mode: ModeId) -> bool:
    return not (mode is ModeId.BIDIRECTIONAL and strategy in SELF_DRIVEN)


def create_search(
    strategy: Union[str, StrategyId],
    mode: Union[str, ModeId] = ModeId.GRAPH,
    heuristic: Any = None,
) -> Search:
    """Build a Search for `strategy` run in `mode`.

    Raises InvalidConfiguration for unknown identifiers, a missing heuristic on
    an informed strategy, or bidirectional mode with a strategy that does not
    search through a frontier (iterative deepening, both RBFS variants, hill climbing).
    """
    strategy = StrategyId.parse(strategy)
    mode = ModeId.parse(mode)
    try:
        h = as_heuristic(heuristic)
    except TypeError as e:
        raise InvalidConfiguration(str(e)) from e

    if strategy in INFORMED and h is None:
        raise InvalidConfiguration(f"{strategy.label} needs a heuristic")
    if not is_supported(strategy, mode):
        raise InvalidConfiguration(f"{strategy.label} cannot run as {mode.label}")
    if h is not None and strategy not in INFORMED:
        logger.debug("%s is uninformed; ignoring the heuristic", strategy.label)

    if strategy in _POLICIES:
        policy = _POLICIES[strategy](h)
        runner = bind(_MODES[mode](), policy)
        name = f"{strategy.label} ({mode.label})"
    else:
        logger.debug("%s runs its own tree-like traversal; %s does not apply", strategy.label, mode.label)
        name = strategy.label
        if strategy is StrategyId.ITERATIVE_DEEPENING:
            runner = ids_runner()
        elif strategy is StrategyId.HILL_CLIMBING:
            runner = hill_climbing_runner(h)
        else:
            runner = rbfs_runner(h, avoid_loops=strategy is StrategyId.RECURSIVE_BEST_FIRST_AVOIDING_LOOPS)

    return Search(name, runner, strategy=strategy, mode=mode)
