# aima_search/core/frontiers.py
# Frontier containers. Every frontier also indexes the latest node pushed per state,
# which graph and bidirectional modes use for duplicate detection.
from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Any, Callable, Dict, Optional

from .node import Node
from .problem import State


class _Frontier:
    def __init__(self):
        self._by_state: Dict[State, Node] = {}

    def __contains__(self, state: State) -> bool:
        return state in self._by_state

    def get(self, state: State) -> Optional[Node]:
        return self._by_state.get(state)

    def __bool__(self) -> bool:
        return len(self) > 0

    def _index(self, node: Node) -> None:
        self._by_state[node.state] = node

    def _unindex(self, node: Node) -> None:
        if self._by_state.get(node.state) is node:
            del self._by_state[node.state]


class FIFOQueue(_Frontier):
    def __init__(self):
        super().__init__()
        self.q = deque()
    def push(self, x: Node) -> None:
        self.q.append(x)
        self._index(x)
    def pop(self) -> Node:
        x = self.q.popleft()
        self._unindex(x)
        return x
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]


class LIFOStack(_Frontier):
    def __init__(self):
        super().__init__()
        self.q = []
    def push(self, x: Node) -> None:
        self.q.append(x)
        self._index(x)
    def pop(self) -> Node:
        x = self.q.pop()
        self._unindex(x)
        return x
    def __len__(self): return len(self.q)
    def peek(self): return self.q[-1]


_REMOVED = object()


class PriorityQueue(_Frontier):
    """Min-heap by key(x), ties broken by insertion order.

    key may return a tuple to add secondary criteria ahead of insertion order.
    replace() and remove() invalidate heap entries in place; they are dropped lazily on pop.
    """
    def __init__(self, key: Callable[[Node], Any]):
        super().__init__()
        self.key = key
        self.h = []
        self._entries: Dict[State, list] = {}
        self._live = 0
        self.counter = itertools.count()  # tie-breaker for stability

    def push(self, x: Node) -> None:
        entry = [self.key(x), next(self.counter), x]
        heapq.heappush(self.h, entry)
        self._entries[x.state] = entry
        self._index(x)
        self._live += 1

    def replace(self, x: Node) -> None:
        """Decrease-key: drop the queued node for x.state (if any) and queue x instead."""
        self.remove(x.state)
        self.push(x)

    def remove(self, state: State) -> Optional[Node]:
        entry = self._entries.pop(state, None)
        if entry is None or entry[2] is _REMOVED:
            return None
        node = entry[2]
        entry[2] = _REMOVED
        self._unindex(node)
        self._live -= 1
        return node

    def pop(self) -> Node:
        while self.h:
            _, _, x = heapq.heappop(self.h)
            if x is _REMOVED:
                continue
            if self._entries.get(x.state, [None, None, None])[2] is x:
                del self._entries[x.state]
            self._unindex(x)
            self._live -= 1
            return x
        raise IndexError("pop from an empty priority queue")

    def peek(self) -> Node:
        while self.h and self.h[0][2] is _REMOVED:
            heapq.heappop(self.h)
        if not self.h:
            raise IndexError("peek at an empty priority queue")
        return self.h[0][2]

    def __len__(self): return self._live
