"""Custom exceptions for FortRaid."""


class FortRaidError(Exception):
    """Base exception for all FortRaid errors."""


class ConfigError(FortRaidError):
    """Configuration-related errors."""


class GraphError(FortRaidError):
    """Fort graph errors."""


class DuplicateVertexError(GraphError):
    """Raised when a fort label is added twice."""

    def __init__(self, label: str):
        super().__init__(f"Fort '{label}' already exists in the graph")
        self.label = label


class DuplicateEdgeError(GraphError):
    """Raised when two forts are connected twice."""

    def __init__(self, a: str, b: str):
        super().__init__(f"Edge between '{a}' and '{b}' already exists in the graph")
        self.endpoints = (a, b)


class UnknownVertexError(GraphError):
    """Raised when a referenced fort label is not in the graph."""

    def __init__(self, label: str):
        super().__init__(f"Fort '{label}' does not exist in the graph")
        self.label = label


class SelfLoopError(GraphError):
    """Raised when an edge would connect a fort to itself."""

    def __init__(self, label: str):
        super().__init__(f"Cannot connect fort '{label}' to itself")
        self.label = label


class ValueMismatchError(GraphError):
    """Raised when a fort is redeclared with a different value."""

    def __init__(self, label: str, existing: int, found: int):
        super().__init__(
            f"Fort '{label}' was declared with value {existing}, "
            f"but is redeclared with value {found}"
        )
        self.label = label


class GraphFormatError(GraphError):
    """Graph text format errors."""


class GraphNotATreeError(GraphError):
    """Raised when a tree-only algorithm finds a cycle."""

    def __init__(self, a: str, b: str):
        super().__init__(f"Edge '{a}' - '{b}' closes a cycle; the graph is not a forest")
        self.edge = (a, b)


class InvalidOrderingError(FortRaidError):
    """Raised when an attack ordering is not a permutation of the forts."""


class StrategyError(FortRaidError):
    """Attack strategy errors."""
