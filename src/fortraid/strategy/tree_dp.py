"""Optimal attack orderings for forests by dynamic programming.

Every tree is rooted and solved bottom-up. For each fort ``n`` two results
are kept: the best ordering of ``n``'s subtree when ``n`` is entered calm,
and when ``n`` is already on high alert from its parent.

A child subtree is attacked either entirely before ``n`` or entirely after
it. Before ``n``, the child cannot have been alerted by ``n`` yet, so it
contributes its calm result; attacking it (unless the child is a shield)
puts ``n`` on alert. After ``n``, the child contributes its alerted result
unless ``n`` is a shield. The only thing the children decide together is
whether some non-shield child went first, so the 2^k before/after splits
collapse to two running partitions keyed by that boolean.

Tie-breaking is fixed: partitions are expanded in key order (False, then
True), the "before" candidate is built ahead of the "after" candidate, and a
later candidate only replaces a held one when it is strictly better. The
same first-wins rule picks between the two partitions at the end.

Orderings are built as nested pairs so that concatenation is O(1); they are
flattened once per tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from fortraid.exceptions import GraphNotATreeError
from fortraid.graph.model import FortGraph
from fortraid.graph.models import FortFlags
from fortraid.strategy.base import RaidPlan, RaidStrategy

logger = logging.getLogger("fortraid.dp")

# None (empty), a single label, or a (left, right) pair of sequences.
Seq = Union[None, str, tuple]


def _concat(a: Seq, b: Seq) -> Seq:
    if a is None:
        return b
    if b is None:
        return a
    return (a, b)


def flatten(seq: Seq) -> list[str]:
    """Expand a nested ordering into a flat list of labels."""
    out: list[str] = []
    stack = [seq]
    while stack:
        item = stack.pop()
        if item is None:
            continue
        if isinstance(item, tuple):
            stack.append(item[1])
            stack.append(item[0])
        else:
            out.append(item)
    return out


@dataclass(frozen=True)
class Context:
    """Best value and ordering of a subtree for one entry context."""

    value: float
    order: Seq


@dataclass(frozen=True)
class NodeSolution:
    calm: Context  # subtree root entered without being alerted
    alerted: Context  # subtree root already alerted by its parent


@dataclass(frozen=True)
class _Partition:
    before_value: float = 0.0
    before: Seq = None
    after_value: float = 0.0
    after: Seq = None

    @property
    def combined(self) -> float:
        return self.before_value + self.after_value


def _keep_better(states: dict[bool, _Partition], key: bool, candidate: _Partition) -> None:
    held = states.get(key)
    if held is None or candidate.combined > held.combined:
        states[key] = candidate


def fold_children(
    parent_flags: FortFlags,
    children: list[tuple[FortFlags, NodeSolution]],
) -> dict[bool, _Partition]:
    """Split children into before/after groups, keyed by "parent alerted"."""
    states: dict[bool, _Partition] = {False: _Partition()}
    for child_flags, child in children:
        after = child.calm if parent_flags.shield else child.alerted
        nxt: dict[bool, _Partition] = {}
        for key in (False, True):
            state = states.get(key)
            if state is None:
                continue
            _keep_better(
                nxt,
                key or not child_flags.shield,
                _Partition(
                    state.before_value + child.calm.value,
                    _concat(state.before, child.calm.order),
                    state.after_value,
                    state.after,
                ),
            )
            _keep_better(
                nxt,
                key,
                _Partition(
                    state.before_value,
                    state.before,
                    state.after_value + after.value,
                    _concat(state.after, after.order),
                ),
            )
        states = nxt
    return states


def _best_context(
    label: str,
    value: int,
    flags: FortFlags,
    states: dict[bool, _Partition],
    entered_alerted: bool,
) -> Context:
    best_total = 0.0
    best_state: _Partition | None = None
    for key in (False, True):
        state = states.get(key)
        if state is None:
            continue
        on_alert = entered_alerted or flags.self_alert or key
        own = value / 2 if on_alert and not flags.immune else float(value)
        total = state.before_value + own + state.after_value
        if best_state is None or total > best_total:
            best_total, best_state = total, state
    order = _concat(_concat(best_state.before, label), best_state.after)
    return Context(best_total, order)


def solve_node(
    graph: FortGraph,
    label: str,
    children: list[tuple[FortFlags, NodeSolution]],
) -> NodeSolution:
    """Combine solved children into both contexts of ``label``."""
    flags = graph.flags(label)
    value = graph.value(label)
    states = fold_children(flags, children)
    return NodeSolution(
        calm=_best_context(label, value, flags, states, entered_alerted=False),
        alerted=_best_context(label, value, flags, states, entered_alerted=True),
    )


def solve_tree(graph: FortGraph, root: str, visited: set[str] | None = None) -> NodeSolution:
    """Solve the tree containing ``root``, rooted at ``root``.

    The traversal uses an explicit stack, so long paths do not hit the
    recursion limit. Forts reached are added to ``visited``.

    Raises:
        GraphNotATreeError: If the component of ``root`` contains a cycle.
    """
    if visited is None:
        visited = set()
    parent: dict[str, str | None] = {root: None}
    children: dict[str, list[str]] = {}
    discovered: list[str] = []
    visited.add(root)
    stack = [root]
    while stack:
        node = stack.pop()
        discovered.append(node)
        kids: list[str] = []
        for neighbor in graph.neighbors(node):
            if neighbor == parent[node]:
                continue
            if neighbor in visited:
                raise GraphNotATreeError(node, neighbor)
            visited.add(neighbor)
            parent[neighbor] = node
            kids.append(neighbor)
        children[node] = kids
        stack.extend(reversed(kids))

    solved: dict[str, NodeSolution] = {}
    for node in reversed(discovered):
        parts = [(graph.flags(kid), solved.pop(kid)) for kid in children[node]]
        solved[node] = solve_node(graph, node, parts)
    return solved[root]


class TreeDPStrategy(RaidStrategy):
    """Exact strategy for graphs whose components are all trees."""

    name = "dp"

    def solve_component(
        self, graph: FortGraph, root: str, visited: set[str] | None = None
    ) -> tuple[float, list[str]]:
        """Best (value, ordering) for the component containing ``root``."""
        solution = solve_tree(graph, root, visited)
        ordering = flatten(solution.calm.order)
        logger.debug(
            f"Solved component rooted at {root}: {len(ordering)} forts, "
            f"value {solution.calm.value}"
        )
        return solution.calm.value, ordering

    def plan(self, graph: FortGraph) -> RaidPlan:
        visited: set[str] = set()
        ordering: list[str] = []
        total = 0.0
        for label in graph.all_labels():
            if label in visited:
                continue
            value, component_order = self.solve_component(graph, label, visited)
            ordering.extend(component_order)
            total += value
        return RaidPlan(strategy=self.name, ordering=tuple(ordering), value=total)
