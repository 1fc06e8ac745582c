"""Top-level entry points: solve, evaluate and compare strategies."""

from __future__ import annotations

import logging

from fortraid.config import StrategyConfig
from fortraid.exceptions import StrategyError
from fortraid.graph.model import FortGraph
from fortraid.strategy.base import RaidPlan, RaidStrategy
from fortraid.strategy.brute_force import BruteForceStrategy
from fortraid.strategy.greedy import GreedyStrategy
from fortraid.strategy.random_order import RandomStrategy
from fortraid.strategy.tree_dp import TreeDPStrategy
from fortraid.strategy.verifier import score

logger = logging.getLogger("fortraid.strategy")

STRATEGIES = ("dp", "greedy", "brute-force", "random")


def get_strategy(name: str, config: StrategyConfig | None = None) -> RaidStrategy:
    """Create a strategy by name.

    Raises:
        StrategyError: If the name is unknown.
    """
    config = config or StrategyConfig()
    key = name.lower()
    if key == "dp":
        return TreeDPStrategy()
    elif key == "greedy":
        return GreedyStrategy()
    elif key == "brute-force":
        return BruteForceStrategy(max_forts=config.brute_force_limit)
    elif key == "random":
        return RandomStrategy(seed=config.random_seed)
    raise StrategyError(
        f"Unknown strategy: '{name}'. Supported strategies: {', '.join(STRATEGIES)}"
    )


def solve(graph: FortGraph) -> RaidPlan:
    """Optimal plan for a forest, one tree at a time.

    Raises:
        GraphNotATreeError: If any component contains a cycle.
    """
    return TreeDPStrategy().plan(graph)


def evaluate(strategy: RaidStrategy, graph: FortGraph) -> RaidPlan:
    """Run a strategy on a copy of ``graph`` and check its claim.

    The strategy gets a deep copy, so it cannot tamper with the graph used
    for scoring. The returned plan carries the verifier's value.

    Raises:
        InvalidOrderingError: If the ordering is not a permutation of the forts.
        StrategyError: If the strategy's own value disagrees with the verifier.
    """
    plan = strategy.plan(graph.copy())
    verified = score(graph, plan.ordering)
    if verified != plan.value:
        raise StrategyError(
            f"Strategy '{plan.strategy}' reported {plan.value}, "
            f"but its ordering scores {verified}"
        )
    logger.info(f"{verified} stolen by {plan.strategy}")
    return plan


def compare(
    graph: FortGraph,
    names: list[str] | tuple[str, ...] = STRATEGIES,
    config: StrategyConfig | None = None,
) -> list[RaidPlan]:
    """Evaluate several strategies on the same graph."""
    return [evaluate(get_strategy(name, config), graph) for name in names]
