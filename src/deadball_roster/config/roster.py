"""Roster shape and placeholder defaults for the Deadball ruleset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class PlaceholderDefaults:
    name_pattern: str
    batting_target: int
    on_base_target: int
    position: str | None = None
    pitch_die: str | None = None
    handedness: str = "R"

    def name(self, index: int) -> str:
        return self.name_pattern.format(index=index)


@dataclass(frozen=True)
class RosterRules:
    ruleset: str
    field_positions: Tuple[str, ...]
    flex_positions: Tuple[str, ...]
    bench_size: int
    starter_count: int
    reliever_count: int
    starter_min_starts: int
    starter_start_ratio: float
    lineup_placeholder: PlaceholderDefaults
    bench_placeholder: PlaceholderDefaults
    starter_placeholder: PlaceholderDefaults
    reliever_placeholder: PlaceholderDefaults

    @property
    def lineup_size(self) -> int:
        return len(self.field_positions)

    @property
    def position_player_count(self) -> int:
        return self.lineup_size + self.bench_size


DEADBALL_RULES = RosterRules(
    ruleset="DEADBALL",
    field_positions=("C", "1B", "2B", "3B", "SS", "LF", "CF", "RF"),
    flex_positions=("UT", "OF", "DH"),
    bench_size=4,
    starter_count=5,
    reliever_count=7,
    starter_min_starts=5,
    starter_start_ratio=0.5,
    lineup_placeholder=PlaceholderDefaults(
        name_pattern="Lineup Player {index}",
        batting_target=20,
        on_base_target=25,
    ),
    bench_placeholder=PlaceholderDefaults(
        name_pattern="Bench Player {index}",
        batting_target=20,
        on_base_target=25,
        position="UT",
    ),
    starter_placeholder=PlaceholderDefaults(
        name_pattern="Starting Pitcher {index}",
        batting_target=15,
        on_base_target=20,
        pitch_die="d4",
    ),
    reliever_placeholder=PlaceholderDefaults(
        name_pattern="Relief Pitcher {index}",
        batting_target=12,
        on_base_target=18,
        pitch_die="d4",
    ),
)


_ROSTER_RULES: Dict[str, RosterRules] = {
    DEADBALL_RULES.ruleset: DEADBALL_RULES,
}


def get_rules(ruleset: str = "DEADBALL") -> RosterRules:
    """Fetch rules for a ruleset name, raising KeyError if missing."""

    key = ruleset.upper()
    if key not in _ROSTER_RULES:
        raise KeyError(f"No roster rules configured for ruleset={ruleset!r}")
    return _ROSTER_RULES[key]
