"""FortRaid - plan attack orderings over fort graphs."""

__version__ = "0.1.0"

from fortraid.graph.model import FortGraph  # noqa: E402
from fortraid.graph.models import FortFlags  # noqa: E402
from fortraid.strategy.harness import solve  # noqa: E402
from fortraid.strategy.verifier import score  # noqa: E402

__all__ = ["FortFlags", "FortGraph", "__version__", "score", "solve"]
