"""Random attack ordering, used as a baseline."""

from __future__ import annotations

import random

from fortraid.graph.model import FortGraph
from fortraid.strategy.base import RaidPlan, RaidStrategy
from fortraid.strategy.verifier import score


class RandomStrategy(RaidStrategy):
    name = "random"

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def plan(self, graph: FortGraph) -> RaidPlan:
        ordering = graph.all_labels()
        self._rng.shuffle(ordering)
        return RaidPlan(strategy=self.name, ordering=tuple(ordering), value=score(graph, ordering))
