"""Attack strategies and the ordering verifier."""

from fortraid.strategy.base import RaidPlan, RaidStep, RaidStrategy
from fortraid.strategy.brute_force import BruteForceStrategy
from fortraid.strategy.greedy import GreedyStrategy
from fortraid.strategy.harness import STRATEGIES, compare, evaluate, get_strategy, solve
from fortraid.strategy.random_order import RandomStrategy
from fortraid.strategy.tree_dp import TreeDPStrategy
from fortraid.strategy.verifier import replay, score

__all__ = [
    "BruteForceStrategy",
    "GreedyStrategy",
    "RaidPlan",
    "RaidStep",
    "RaidStrategy",
    "RandomStrategy",
    "STRATEGIES",
    "TreeDPStrategy",
    "compare",
    "evaluate",
    "get_strategy",
    "replay",
    "score",
    "solve",
]
