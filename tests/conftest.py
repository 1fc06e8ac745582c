"""Shared test fixtures for FortRaid."""

from __future__ import annotations

from pathlib import Path

import pytest

from fortraid.graph.model import FortGraph
from fortraid.graph.models import SELF_ALERT


SHERWOOD = """// A small forest of forts
// self-alert '!', shield '#', immune '*'
nottingham!:40
lincoln:12 nottingham!:40
derby#:20 nottingham!:40
leicester*:16 derby#:20
york:30 lincoln:12

// a separate component
hull:8 beverley:10
beverley:10 scarborough!*:14
"""


@pytest.fixture
def path_graph() -> FortGraph:
    """A:10 - B!:10 - C:10, with B self-alerting."""
    graph = FortGraph()
    graph.add_vertex("A", 10)
    graph.add_vertex("B", 10, SELF_ALERT)
    graph.add_vertex("C", 10)
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    return graph


@pytest.fixture
def star_graph() -> FortGraph:
    """A plain center X:10 with three plain leaves."""
    graph = FortGraph()
    graph.add_vertex("X", 10)
    for leaf in ("a", "b", "c"):
        graph.add_vertex(leaf, 10)
        graph.add_edge("X", leaf)
    return graph


@pytest.fixture
def triangle_graph() -> FortGraph:
    graph = FortGraph()
    for label in ("p", "q", "r"):
        graph.add_vertex(label, 4)
    graph.add_edge("p", "q")
    graph.add_edge("q", "r")
    graph.add_edge("r", "p")
    return graph


@pytest.fixture
def sherwood_text() -> str:
    return SHERWOOD


@pytest.fixture
def sherwood_file(tmp_path: Path) -> Path:
    path = tmp_path / "sherwood_forest.graph"
    path.write_text(SHERWOOD)
    return path
