"""Domain models for batters, pitchers and finished rosters."""

from .player import (
    PITCH_DIE_TIERS,
    BatterRecord,
    Handedness,
    PitchDieTier,
    PitcherRecord,
    PositionCode,
)
from .roster import Roster

__all__ = [
    "PITCH_DIE_TIERS",
    "BatterRecord",
    "Handedness",
    "PitchDieTier",
    "PitcherRecord",
    "PositionCode",
    "Roster",
]
