"""Exhaustive search over every attack ordering."""

from __future__ import annotations

import itertools
import logging
import math

from fortraid.exceptions import StrategyError
from fortraid.graph.model import FortGraph
from fortraid.strategy.base import RaidPlan, RaidStrategy
from fortraid.strategy.verifier import score

logger = logging.getLogger("fortraid.strategy")


class BruteForceStrategy(RaidStrategy):
    """Scores all n! orderings and keeps the first best one.

    Only usable on small graphs; larger inputs are refused up front.
    """

    name = "brute-force"

    def __init__(self, max_forts: int = 9) -> None:
        self.max_forts = max_forts

    def plan(self, graph: FortGraph) -> RaidPlan:
        labels = graph.all_labels()
        if len(labels) > self.max_forts:
            raise StrategyError(
                f"Brute force is limited to {self.max_forts} forts, "
                f"graph has {len(labels)}"
            )
        logger.debug(f"Brute force over {math.factorial(len(labels))} orderings")

        best_value = -math.inf
        best_order: tuple[str, ...] = ()
        for ordering in itertools.permutations(labels):
            value = score(graph, ordering)
            if value > best_value:
                best_value = value
                best_order = ordering
        return RaidPlan(strategy=self.name, ordering=best_order, value=best_value)
