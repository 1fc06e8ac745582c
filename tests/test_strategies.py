"""Tests for the supplementary strategies and the strategy harness."""

from __future__ import annotations

import pytest

from fortraid.config import StrategyConfig
from fortraid.exceptions import GraphNotATreeError, StrategyError
from fortraid.graph.generator import generate_forest
from fortraid.graph.model import FortGraph
from fortraid.strategy.base import RaidPlan, RaidStrategy
from fortraid.strategy.brute_force import BruteForceStrategy
from fortraid.strategy.greedy import GreedyStrategy
from fortraid.strategy.harness import STRATEGIES, compare, evaluate, get_strategy, solve
from fortraid.strategy.random_order import RandomStrategy
from fortraid.strategy.tree_dp import TreeDPStrategy
from fortraid.strategy.verifier import score


class _LyingStrategy(RaidStrategy):
    name = "liar"

    def plan(self, graph: FortGraph) -> RaidPlan:
        return RaidPlan(strategy=self.name, ordering=tuple(graph.all_labels()), value=1e9)


class _VandalStrategy(RaidStrategy):
    name = "vandal"

    def plan(self, graph: FortGraph) -> RaidPlan:
        ordering = graph.all_labels()
        value = score(graph, ordering)
        for label in ordering:
            graph.remove_vertex(label)
        return RaidPlan(strategy=self.name, ordering=tuple(ordering), value=value)


class TestBruteForce:
    def test_finds_path_optimum(self, path_graph: FortGraph):
        plan = BruteForceStrategy().plan(path_graph)
        assert plan.value == 25
        assert plan.ordering == ("A", "C", "B")

    def test_refuses_large_graphs(self):
        graph = generate_forest(12, seed=0)
        with pytest.raises(StrategyError):
            BruteForceStrategy(max_forts=9).plan(graph)

    def test_handles_cycles(self, triangle_graph: FortGraph):
        # p:4 then q:2 then r:2; no ordering escapes both alerts
        assert BruteForceStrategy().plan(triangle_graph).value == 8


class TestGreedy:
    @pytest.mark.parametrize("seed", range(5))
    def test_valid_permutation(self, seed: int):
        graph = generate_forest(200, seed=seed)
        plan = GreedyStrategy().plan(graph)
        assert sorted(plan.ordering) == sorted(graph.all_labels())
        assert score(graph, plan.ordering) == plan.value

    @pytest.mark.parametrize("seed", range(5))
    def test_never_beats_dp(self, seed: int):
        graph = generate_forest(150, seed=seed)
        assert GreedyStrategy().plan(graph).value <= solve(graph).value

    def test_star(self, star_graph: FortGraph):
        plan = GreedyStrategy().plan(star_graph)
        assert plan.value == 35
        assert plan.ordering[-1] == "X"

    def test_works_on_cycles(self, triangle_graph: FortGraph):
        plan = GreedyStrategy().plan(triangle_graph)
        assert sorted(plan.ordering) == ["p", "q", "r"]


class TestRandom:
    def test_seeded(self):
        graph = generate_forest(30, seed=1)
        first = RandomStrategy(seed=4).plan(graph)
        second = RandomStrategy(seed=4).plan(graph)
        assert first == second
        assert sorted(first.ordering) == sorted(graph.all_labels())

    def test_value_is_verified(self, path_graph: FortGraph):
        plan = RandomStrategy(seed=0).plan(path_graph)
        assert plan.value == score(path_graph, plan.ordering)


class TestHarness:
    def test_get_strategy(self):
        assert isinstance(get_strategy("dp"), TreeDPStrategy)
        assert isinstance(get_strategy("Greedy"), GreedyStrategy)
        assert isinstance(get_strategy("random"), RandomStrategy)
        brute = get_strategy("brute-force", StrategyConfig(brute_force_limit=4))
        assert isinstance(brute, BruteForceStrategy)
        assert brute.max_forts == 4

    def test_unknown_strategy(self):
        with pytest.raises(StrategyError, match="Unknown strategy"):
            get_strategy("telepathy")

    def test_solve_forest(self, sherwood_text: str):
        from fortraid.graph.io import parse_graph

        graph = parse_graph(sherwood_text)
        plan = solve(graph)
        assert plan.strategy == "dp"
        assert len(plan.ordering) == len(graph)
        assert score(graph, plan.ordering) == plan.value

    def test_solve_rejects_cycles(self, triangle_graph: FortGraph):
        with pytest.raises(GraphNotATreeError):
            solve(triangle_graph)

    def test_evaluate_catches_false_claims(self, path_graph: FortGraph):
        with pytest.raises(StrategyError, match="liar"):
            evaluate(_LyingStrategy(), path_graph)

    def test_evaluate_protects_graph(self, path_graph: FortGraph):
        before = path_graph.copy()
        plan = evaluate(_VandalStrategy(), path_graph)
        assert path_graph == before
        assert plan.value == score(path_graph, plan.ordering)

    def test_compare_all(self, path_graph: FortGraph):
        plans = compare(path_graph)
        assert [p.strategy for p in plans] == list(STRATEGIES)
        best = max(p.value for p in plans)
        assert best == 25
        assert plans[0].value == 25
