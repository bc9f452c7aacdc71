# aima_search/core/errors.py
from __future__ import annotations


class SearchError(Exception):
    """Base class for everything the engine raises on its own account."""


class InvalidConfiguration(SearchError, ValueError):
    """Unsupported strategy/mode pairing, unknown identifier or missing heuristic."""


class ProblemNotInvertible(SearchError, TypeError):
    """Bidirectional mode was asked to run on a problem without a predecessor relation."""


class SearchCancelled(SearchError):
    """Raised inside a run when the cancellation check or expansion cap fires.

    Never escapes `Search.run`; it is turned into a CANCELLED result there.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
