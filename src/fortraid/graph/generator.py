"""Random forest generator for sample graphs."""

from __future__ import annotations

import logging
import random

from fortraid.config import GeneratorConfig
from fortraid.exceptions import ConfigError
from fortraid.graph.io import IMMUNE_MARKER, SELF_ALERT_MARKER, SHIELD_MARKER, flags_from_label
from fortraid.graph.model import FortGraph

logger = logging.getLogger("fortraid.graph")


def generate_forest(
    n: int,
    max_value: int = 10,
    edge_probability: float = 0.99,
    self_alert_probability: float = 0.2,
    shield_probability: float = 0.2,
    immune_probability: float = 0.2,
    seed: int | None = None,
) -> FortGraph:
    """Generate a random acyclic fort graph.

    Forts are labeled ``f0`` .. ``f{n-1}`` with their flag markers appended,
    so the result survives a round trip through the text format. Every fort
    after the first is attached to one uniformly chosen earlier fort with
    probability ``edge_probability``; otherwise it starts a new tree.

    Args:
        n: Number of forts.
        max_value: Values are drawn uniformly from ``1..max_value``.
        edge_probability: Chance that a fort joins an existing tree.
        self_alert_probability: Chance that a fort self-alerts.
        shield_probability: Chance that a fort is a shield.
        immune_probability: Chance that a fort is immune.
        seed: Seed for a private ``random.Random``.

    Returns:
        A forest with ``n`` forts.
    """
    if n < 0:
        raise ConfigError(f"Cannot generate a graph with {n} forts")
    if max_value < 1:
        raise ConfigError(f"max_value must be at least 1, got {max_value}")
    probabilities = {
        "edge_probability": edge_probability,
        "self_alert_probability": self_alert_probability,
        "shield_probability": shield_probability,
        "immune_probability": immune_probability,
    }
    for name, p in probabilities.items():
        if not 0.0 <= p <= 1.0:
            raise ConfigError(f"{name} must be within [0, 1], got {p}")

    rng = random.Random(seed)
    graph = FortGraph()
    labels: list[str] = []
    for i in range(n):
        label = f"f{i}"
        if rng.random() < self_alert_probability:
            label += SELF_ALERT_MARKER
        if rng.random() < shield_probability:
            label += SHIELD_MARKER
        if rng.random() < immune_probability:
            label += IMMUNE_MARKER
        graph.add_vertex(label, rng.randint(1, max_value), flags_from_label(label))
        if labels and rng.random() < edge_probability:
            graph.add_edge(label, rng.choice(labels))
        labels.append(label)

    logger.debug(
        f"Generated forest: {n} forts, {graph.number_of_edges()} edges, seed={seed}"
    )
    return graph


def generate_from_config(n: int, config: GeneratorConfig, seed: int | None = None) -> FortGraph:
    """Generate a forest using the generator section of a project config."""
    return generate_forest(n, seed=seed, **config.model_dump())
