"""Data models for forts and their alert flags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FortFlags(BaseModel):
    """Alert-related flags declared for a fort."""

    model_config = ConfigDict(frozen=True)

    self_alert: bool = False  # alerted the moment it is attacked
    shield: bool = False  # never alerts its neighbors
    immune: bool = False  # alert status never halves its value


NO_FLAGS = FortFlags()
SELF_ALERT = FortFlags(self_alert=True)
SHIELD = FortFlags(shield=True)
IMMUNE = FortFlags(immune=True)


class Fort(BaseModel):
    """A fort (vertex) as seen from outside the graph."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: int = Field(ge=0)
    flags: FortFlags = NO_FLAGS
