"""Base attack strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from fortraid.graph.model import FortGraph


class RaidStep(BaseModel):
    """One attack while replaying an ordering."""

    model_config = ConfigDict(frozen=True)

    label: str
    base_value: int
    collected: float
    alerted: bool  # whether the fort was on high alert when attacked


class RaidPlan(BaseModel):
    """An attack ordering together with the value it collects."""

    model_config = ConfigDict(frozen=True)

    strategy: str
    ordering: tuple[str, ...]
    value: float


class RaidStrategy(ABC):
    """Abstract base for attack strategies."""

    name: str = ""

    @abstractmethod
    def plan(self, graph: FortGraph) -> RaidPlan:
        """Choose an attack ordering for every fort in ``graph``."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
