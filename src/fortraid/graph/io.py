"""Read and write fort graphs in the plain-text graph format.

The format has one declaration per line:

    label:value                  declares a fort
    label1:value1 label2:value2  declares an edge (and both forts)

Blank lines and lines starting with ``//`` are ignored. A fort may be
declared any number of times as long as its value never changes.

Fort flags travel inside the label: ``!`` marks a self-alerting fort,
``#`` a shield and ``*`` an immune fort.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fortraid.exceptions import GraphFormatError, ValueMismatchError
from fortraid.graph.model import FortGraph
from fortraid.graph.models import FortFlags

logger = logging.getLogger("fortraid.io")

SELF_ALERT_MARKER = "!"
SHIELD_MARKER = "#"
IMMUNE_MARKER = "*"
COMMENT_PREFIX = "//"

HEADER = "// Fort graph: one 'label:value' per line, edges as 'a:value b:value'"


def flags_from_label(label: str) -> FortFlags:
    """Decode the flag markers embedded in a label."""
    return FortFlags(
        self_alert=SELF_ALERT_MARKER in label,
        shield=SHIELD_MARKER in label,
        immune=IMMUNE_MARKER in label,
    )


def _parse_token(token: str, line_no: int) -> tuple[str, int]:
    parts = token.split(":")
    if len(parts) != 2 or not parts[0]:
        raise GraphFormatError(
            f"Line {line_no}: expected 'label:value', got '{token}'"
        )
    label, raw_value = parts
    try:
        value = int(raw_value)
    except ValueError:
        raise GraphFormatError(
            f"Line {line_no}: value of '{label}' is not an integer: '{raw_value}'"
        ) from None
    if value < 0:
        raise GraphFormatError(f"Line {line_no}: value of '{label}' is negative")
    return label, value


def _declare(graph: FortGraph, token: str, line_no: int) -> str:
    label, value = _parse_token(token, line_no)
    if label in graph:
        existing = graph.value(label)
        if existing != value:
            raise ValueMismatchError(label, existing, value)
    else:
        graph.add_vertex(label, value, flags_from_label(label))
    return label


def parse_graph(text: str) -> FortGraph:
    """Build a graph from its text form."""
    graph = FortGraph()
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        items = line.split()
        if len(items) == 1:
            _declare(graph, items[0], line_no)
        elif len(items) == 2:
            a = _declare(graph, items[0], line_no)
            b = _declare(graph, items[1], line_no)
            graph.add_edge(a, b)
        else:
            logger.warning(f"Line {line_no}: skipping line with {len(items)} tokens")
    logger.debug(f"Parsed graph with {len(graph)} forts and {graph.number_of_edges()} edges")
    return graph


def format_graph(graph: FortGraph) -> str:
    """Render a graph in the text format.

    Raises GraphFormatError if a fort's flags cannot be recovered from its
    label, since the text format has nowhere else to store them.
    """
    lines = [HEADER]
    for fort in graph.forts():
        if any(c.isspace() for c in fort.label) or ":" in fort.label:
            raise GraphFormatError(f"Label '{fort.label}' cannot be written as 'label:value'")
        if flags_from_label(fort.label) != fort.flags:
            raise GraphFormatError(
                f"Flags of fort '{fort.label}' are not encoded in its label"
            )
        lines.append(f"{fort.label}:{fort.value}")
    for a, b in graph.edges():
        lines.append(f"{a}:{graph.value(a)} {b}:{graph.value(b)}")
    return "\n".join(lines) + "\n"


def load_graph(path: str | Path) -> FortGraph:
    """Load a graph from a text file."""
    path = Path(path)
    logger.info(f"Loading graph from {path}")
    return parse_graph(path.read_text())


def save_graph(graph: FortGraph, path: str | Path) -> None:
    """Write a graph to a text file."""
    path = Path(path)
    path.write_text(format_graph(graph))
    logger.info(f"Saved {len(graph)} forts to {path}")
