"""Tests for the strategy/mode selection boundary."""

import pytest

from aima_search.core.errors import InvalidConfiguration
from aima_search.factory import (
    INFORMED,
    SELF_DRIVEN,
    ModeId,
    StrategyId,
    create_search,
    is_supported,
    mode_names,
    strategy_names,
)
from aima_search.search import Search


class TestIdentifiers:
    """Test identifier parsing and display names."""

    def test_strategy_names_in_order(self):
        assert strategy_names() == [
            "Depth First", "Breadth First", "Iterative Deepening", "Uniform Cost",
            "Greedy Best First", "A*", "Recursive Best First",
            "Recursive Best First Avoiding Loops", "Hill Climbing",
        ]

    def test_mode_names_in_order(self):
        assert mode_names() == ["Tree Search", "Graph Search", "Bidirectional Search"]

    @pytest.mark.parametrize("text", ["astar", "A_STAR", "a*", " A* ", StrategyId.A_STAR])
    def test_parse_strategy(self, text):
        assert StrategyId.parse(text) is StrategyId.A_STAR

    @pytest.mark.parametrize("text", ["graph", "GRAPH", "Graph Search"])
    def test_parse_mode(self, text):
        assert ModeId.parse(text) is ModeId.GRAPH

    @pytest.mark.parametrize("text", ["beam", "", None, 3, ModeId.GRAPH])
    def test_unknown_strategy(self, text):
        with pytest.raises(InvalidConfiguration):
            StrategyId.parse(text)


class TestCreateSearch:
    """Test which combinations are accepted."""

    @pytest.mark.parametrize("strategy", sorted(SELF_DRIVEN, key=lambda s: s.value))
    def test_bidirectional_rejected_for_self_driven(self, strategy):
        with pytest.raises(InvalidConfiguration, match="Bidirectional"):
            create_search(strategy, ModeId.BIDIRECTIONAL, heuristic=lambda s: 0.0)
        assert not is_supported(strategy, ModeId.BIDIRECTIONAL)

    @pytest.mark.parametrize("strategy", sorted(INFORMED, key=lambda s: s.value))
    def test_informed_needs_heuristic(self, strategy):
        with pytest.raises(InvalidConfiguration, match="heuristic"):
            create_search(strategy, ModeId.GRAPH)

    def test_bad_heuristic_type(self):
        with pytest.raises(InvalidConfiguration):
            create_search("astar", "graph", heuristic=5)

    def test_invalid_configuration_is_a_value_error(self):
        with pytest.raises(ValueError):
            create_search("astar", "sideways", heuristic=lambda s: 0.0)

    def test_every_supported_pair_builds(self):
        built = 0
        for strategy in StrategyId:
            for mode in ModeId:
                if not is_supported(strategy, mode):
                    continue
                search = create_search(strategy, mode, heuristic=lambda s: 0.0)
                assert isinstance(search, Search)
                assert search.strategy is strategy
                assert search.mode is mode
                built += 1
        assert built == 9 * 3 - len(SELF_DRIVEN)

    def test_names(self):
        assert create_search("ucs", "tree").name == "Uniform Cost (Tree Search)"
        assert create_search("ids", "graph").name == "Iterative Deepening"

    def test_heuristic_object_with_estimate(self, romania):
        class SLD:
            def estimate(self, state):
                return romania.heuristic(state)

        result = create_search("astar", "graph", heuristic=SLD()).run(romania)
        assert result.cost == 418.0

    def test_uninformed_ignores_heuristic(self, romania):
        with_h = create_search("ucs", "graph", heuristic=lambda s: 1e9).run(romania)
        assert with_h.cost == 418.0


class TestSolvesThroughFactory:
    """Every pair that terminates on Romania gives a valid path; cost-optimal ones give 418."""

    @pytest.mark.parametrize("strategy,mode,cost", [
        ("bfs", "tree", 450.0),
        ("bfs", "graph", 450.0),
        ("ids", "tree", 450.0),
        ("ucs", "tree", 418.0),
        ("ucs", "graph", 418.0),
        ("greedy", "graph", 450.0),
        ("astar", "tree", 418.0),
        ("astar", "graph", 418.0),
        ("rbfs", "graph", 418.0),
        ("rbfs-al", "tree", 418.0),
        ("hill", "graph", 450.0),
    ])
    def test_romania(self, romania, strategy, mode, cost):
        result = create_search(strategy, mode, heuristic=romania.heuristic).run(romania)
        assert result.success
        assert result.cost == cost
        assert result.actions[-1] == "Bucharest"
