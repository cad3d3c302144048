"""Canonical batter and pitcher records shared by ingest, assembly and export."""

from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


PositionCode = Literal["C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "OF", "DH", "UT"]
Handedness = Literal["L", "R", "S"]
PitchDieTier = Literal["d20", "d12", "d8", "d4", "-d4", "-d8", "-d12", "-d20"]

# Best to worst.
PITCH_DIE_TIERS: Tuple[str, ...] = ("d20", "d12", "d8", "d4", "-d4", "-d8", "-d12", "-d20")


class _RosterEntry(BaseModel):
    name: str
    handedness: Handedness = "R"
    batting_target: int
    on_base_target: int
    traits: Tuple[str, ...] = ()
    row_number: Optional[int] = Field(default=None, ge=1)
    placeholder: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def traits_text(self) -> str:
        return " ".join(self.traits)


class BatterRecord(_RosterEntry):
    """Normalized position player."""

    position: PositionCode
    games_played: int = 0
    war: float = 0.0

    def at_position(self, position: str) -> "BatterRecord":
        """Return a copy of this batter reassigned to ``position``."""

        if position == self.position:
            return self
        return self.model_copy(update={"position": position})


class PitcherRecord(_RosterEntry):
    """Normalized pitcher; hitting ratings come from a rating source, not stats."""

    pitch_die: PitchDieTier
    games_played: int = 0
    games_started: int = 0
    innings_pitched: float = 0.0
