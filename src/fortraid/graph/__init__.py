"""Fort graph model, text format and generator."""

from fortraid.graph.generator import generate_forest
from fortraid.graph.io import format_graph, load_graph, parse_graph, save_graph
from fortraid.graph.model import FortGraph
from fortraid.graph.models import Fort, FortFlags

__all__ = [
    "Fort",
    "FortFlags",
    "FortGraph",
    "format_graph",
    "generate_forest",
    "load_graph",
    "parse_graph",
    "save_graph",
]
