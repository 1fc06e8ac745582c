"""Score attack orderings under the alert-propagation rules."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator, Sequence

from fortraid.exceptions import InvalidOrderingError
from fortraid.graph.model import FortGraph
from fortraid.strategy.base import RaidStep

logger = logging.getLogger("fortraid.verifier")


def check_ordering(graph: FortGraph, ordering: Sequence[str]) -> None:
    """Raise InvalidOrderingError unless ``ordering`` is a permutation of the forts."""
    counts = Counter(ordering)
    duplicates = sorted(label for label, n in counts.items() if n > 1)
    if duplicates:
        raise InvalidOrderingError(f"Attack ordering contains duplicates: {duplicates}")
    unknown = [label for label in ordering if label not in graph]
    if unknown:
        raise InvalidOrderingError(f"Attack ordering names unknown forts: {unknown}")
    missing = [label for label in graph.all_labels() if label not in counts]
    if missing:
        raise InvalidOrderingError(f"Attack ordering is missing forts: {missing}")


def _attacks(graph: FortGraph, ordering: Sequence[str]) -> Iterator[tuple[str, int, float, bool]]:
    check_ordering(graph, ordering)
    alerted: set[str] = set()
    for label in ordering:
        base = graph.value(label)
        flags = graph.flags(label)
        if flags.self_alert:
            alerted.add(label)
        on_alert = label in alerted
        collected = base / 2 if on_alert and not flags.immune else float(base)
        yield label, base, collected, on_alert
        if not flags.shield:
            alerted.update(graph.neighbors(label))


def replay(graph: FortGraph, ordering: Sequence[str]) -> list[RaidStep]:
    """Replay an ordering and report what each attack collects.

    Self-alerting forts are put on alert before their own value is taken.
    An alerted fort yields half its value unless it is immune. Attacking a
    fort that is not a shield alerts all of its neighbors.
    """
    steps = []
    for label, base, collected, on_alert in _attacks(graph, ordering):
        logger.debug(f"Stole {collected} from {label}")
        steps.append(
            RaidStep(label=label, base_value=base, collected=collected, alerted=on_alert)
        )
    return steps


def score(graph: FortGraph, ordering: Sequence[str]) -> float:
    """Total value collected by attacking forts in ``ordering``."""
    return sum((collected for _, _, collected, _ in _attacks(graph, ordering)), 0.0)
