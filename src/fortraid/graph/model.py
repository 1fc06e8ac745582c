"""Labeled fort graph backed by an undirected NetworkX graph."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import networkx as nx

from fortraid.exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    GraphError,
    SelfLoopError,
    UnknownVertexError,
)
from fortraid.graph.models import NO_FLAGS, Fort, FortFlags

logger = logging.getLogger("fortraid.graph")


class FortGraph:
    """A simple undirected graph whose vertices are forts.

    Each fort is identified by its label and carries an integer value and
    a set of alert flags. Labels are kept in insertion order, so iterating
    the graph is deterministic. Adjacency lives in a ``networkx.Graph``,
    which stores every edge symmetrically.

    All mutators validate before touching the graph: a rejected call leaves
    it exactly as it was.
    """

    def __init__(self) -> None:
        self._graph = nx.Graph()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def add_vertex(self, label: str, value: int, flags: FortFlags | None = None) -> None:
        """Add an isolated fort with the given value and flags."""
        if label in self._graph:
            raise DuplicateVertexError(label)
        if isinstance(value, bool) or not isinstance(value, int):
            raise GraphError(f"Fort '{label}' needs an integer value, got {value!r}")
        if value < 0:
            raise GraphError(f"Fort '{label}' has negative value {value}")
        self._graph.add_node(label, value=value, flags=flags or NO_FLAGS)

    def add_edge(self, a: str, b: str) -> None:
        """Connect forts ``a`` and ``b``."""
        self._require(a)
        self._require(b)
        if a == b:
            raise SelfLoopError(a)
        if self._graph.has_edge(a, b):
            raise DuplicateEdgeError(a, b)
        self._graph.add_edge(a, b)

    def remove_vertex(self, label: str) -> None:
        """Remove a fort together with all of its edges."""
        self._require(label)
        logger.debug(f"Removing fort {label} and {self.degree(label)} edge(s)")
        self._graph.remove_node(label)

    def remove_edge(self, a: str, b: str) -> None:
        self._require(a)
        self._require(b)
        if not self._graph.has_edge(a, b):
            raise GraphError(f"No edge between '{a}' and '{b}'")
        self._graph.remove_edge(a, b)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def has_edge(self, a: str, b: str) -> bool:
        self._require(a)
        self._require(b)
        return self._graph.has_edge(a, b)

    def neighbors(self, label: str) -> list[str]:
        """Labels adjacent to ``label``, in the order the edges were added."""
        self._require(label)
        return list(self._graph.adj[label])

    def degree(self, label: str) -> int:
        self._require(label)
        return len(self._graph.adj[label])

    def value(self, label: str) -> int:
        return self._node(label)["value"]

    def flags(self, label: str) -> FortFlags:
        return self._node(label)["flags"]

    def fort(self, label: str) -> Fort:
        data = self._node(label)
        return Fort(label=label, value=data["value"], flags=data["flags"])

    def all_labels(self) -> list[str]:
        """All fort labels in insertion order."""
        return list(self._graph.nodes)

    def forts(self) -> list[Fort]:
        return [self.fort(label) for label in self._graph.nodes]

    def edges(self) -> list[tuple[str, str]]:
        return list(self._graph.edges)

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def components(self) -> list[list[str]]:
        """Connected components, each listed in depth-first discovery order.

        Components are ordered by their earliest-inserted fort, which is
        also the first label of each component.
        """
        seen: set[str] = set()
        result: list[list[str]] = []
        for label in self._graph.nodes:
            if label in seen:
                continue
            component = list(nx.dfs_preorder_nodes(self._graph, label))
            seen.update(component)
            result.append(component)
        return result

    def is_forest(self) -> bool:
        """True when no component contains a cycle."""
        if not self._graph:
            return True
        return self.number_of_edges() == len(self) - len(self.components())

    def copy(self) -> FortGraph:
        """Deep copy: equal to this graph, sharing no mutable state with it."""
        clone = FortGraph()
        for label, data in self._graph.nodes(data=True):
            clone._graph.add_node(label, value=data["value"], flags=data["flags"].model_copy())
        clone._graph.add_edges_from(self._graph.edges)
        return clone

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, label: object) -> bool:
        return label in self._graph

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._graph.nodes))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FortGraph):
            return NotImplemented
        if self.forts() != other.forts():
            return False
        mine = {frozenset(edge) for edge in self._graph.edges}
        theirs = {frozenset(edge) for edge in other._graph.edges}
        return mine == theirs

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"FortGraph(forts={len(self)}, edges={self.number_of_edges()})"

    def _require(self, label: str) -> None:
        if label not in self._graph:
            raise UnknownVertexError(label)

    def _node(self, label: str) -> dict:
        try:
            return self._graph.nodes[label]
        except KeyError:
            raise UnknownVertexError(label) from None
