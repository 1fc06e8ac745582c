"""Greedy heuristic: always attack the fort that looks best right now."""

from __future__ import annotations

import heapq
import itertools
import logging

from fortraid.graph.model import FortGraph
from fortraid.strategy.base import RaidPlan, RaidStrategy
from fortraid.strategy.verifier import score

logger = logging.getLogger("fortraid.strategy")

SHIELD_DEGREE_BONUS = 0.001


class GreedyStrategy(RaidStrategy):
    """Pick forts one at a time by an estimated net gain.

    A fort's score is what it would yield now minus half the value of every
    neighbor it would newly put on alert. Shields alert nobody, so they score
    their value plus a tiny per-neighbor bonus.

    Scores live in a heap with per-fort version numbers. When alerts change
    a fort's score its version is bumped and a fresh entry is pushed; stale
    entries are recognised on pop and re-scored instead of used.
    """

    name = "greedy"

    def plan(self, graph: FortGraph) -> RaidPlan:
        labels = graph.all_labels()
        flags = {label: graph.flags(label) for label in labels}
        values = {label: graph.value(label) for label in labels}
        neighbors = {label: graph.neighbors(label) for label in labels}

        attacked: set[str] = set()
        alerted: set[str] = set()
        version = {label: 0 for label in labels}
        counter = itertools.count()
        heap: list[tuple[float, int, str, int]] = []

        def estimate(label: str) -> float:
            f = flags[label]
            gold = float(values[label])
            if (label in alerted or f.self_alert) and not f.immune:
                gold /= 2
            if f.shield:
                return gold + len(neighbors[label]) * SHIELD_DEGREE_BONUS
            penalty = 0.0
            for neighbor in neighbors[label]:
                nf = flags[neighbor]
                if neighbor in alerted or nf.immune or nf.self_alert:
                    continue
                penalty += values[neighbor] / 2
            return gold - penalty

        def push(label: str) -> None:
            heapq.heappush(heap, (-estimate(label), next(counter), label, version[label]))

        def bump(label: str) -> None:
            version[label] += 1
            push(label)

        def on_alert(label: str) -> None:
            # Alerting a fort changes its own score and its neighbors' penalties.
            bump(label)
            for neighbor in neighbors[label]:
                bump(neighbor)

        for label in labels:
            push(label)

        ordering: list[str] = []
        while len(ordering) < len(labels):
            _, _, label, entry_version = heapq.heappop(heap)
            if label in attacked:
                continue
            if entry_version != version[label]:
                push(label)
                continue

            ordering.append(label)
            attacked.add(label)
            if flags[label].self_alert and label not in alerted:
                alerted.add(label)
                on_alert(label)
            if not flags[label].shield:
                for neighbor in neighbors[label]:
                    if neighbor not in alerted:
                        alerted.add(neighbor)
                        on_alert(neighbor)

        logger.debug(f"Greedy processed {next(counter)} heap entries for {len(labels)} forts")
        return RaidPlan(strategy=self.name, ordering=tuple(ordering), value=score(graph, ordering))
