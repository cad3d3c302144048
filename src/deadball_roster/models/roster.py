"""Finished roster object handed to the export adapters."""

from __future__ import annotations

from collections import Counter
from typing import Tuple

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from deadball_roster.config import DEADBALL_RULES, RosterRules
from deadball_roster.models.player import BatterRecord, PitcherRecord


class Roster(BaseModel):
    """Lineup plus bench, starting rotation and bullpen.

    Group sizes and field positions come from ``rules`` (default
    :data:`DEADBALL_RULES`); the assembler pads short groups with placeholders
    so a constructed roster always has every slot.
    """

    position_players: Tuple[BatterRecord, ...]
    starting_pitchers: Tuple[PitcherRecord, ...]
    relief_pitchers: Tuple[PitcherRecord, ...]
    rules: RosterRules = Field(default=DEADBALL_RULES, exclude=True)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_shape(self) -> "Roster":
        rules = self.rules
        expected = {
            "position_players": rules.position_player_count,
            "starting_pitchers": rules.starter_count,
            "relief_pitchers": rules.reliever_count,
        }
        for field_name, size in expected.items():
            actual = len(getattr(self, field_name))
            if actual != size:
                raise ValueError(f"{field_name} must hold {size} players, got {actual}")

        lineup_positions = [player.position for player in self.lineup]
        if sorted(lineup_positions) != sorted(rules.field_positions):
            raise ValueError(
                f"lineup positions {lineup_positions} do not cover {list(rules.field_positions)}"
            )

        batter_rows = Counter(
            player.row_number for player in self.position_players if not player.placeholder
        )
        pitcher_rows = Counter(
            player.row_number
            for player in (*self.starting_pitchers, *self.relief_pitchers)
            if not player.placeholder
        )
        for label, counts in (("batting", batter_rows), ("pitching", pitcher_rows)):
            duplicates = [row for row, count in counts.items() if row is not None and count > 1]
            if duplicates:
                raise ValueError(f"{label} rows {duplicates} appear more than once on the roster")
        return self

    @property
    def lineup(self) -> Tuple[BatterRecord, ...]:
        return self.position_players[: self.rules.lineup_size]

    @property
    def bench(self) -> Tuple[BatterRecord, ...]:
        return self.position_players[self.rules.lineup_size :]
