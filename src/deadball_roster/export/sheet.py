"""Roster sheet renderings: CSV, fixed-width text and display sections."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from io import StringIO
from typing import List, Optional, Sequence, Tuple, Union

from deadball_roster.models import BatterRecord, PitcherRecord, Roster


DEFAULT_TEAM_NAME = "Team"

BATTER_HEADERS: Tuple[str, ...] = ("Player Name", "POS", "L/R", "BT", "OBT", "Traits")
PITCHER_HEADERS: Tuple[str, ...] = ("Player Name", "P.D.", "L/R", "BT", "OBT", "Traits")

_TEXT_BATTER_HEADER = (
    "Player Name                POS  L/R  BT  OBT  Traits\n"
    "------------------------   ---  ---  --  ---  -------------\n"
)
_TEXT_PITCHER_HEADER = (
    "Player Name                P.D.    L/R  BT  OBT  Traits\n"
    "------------------------   -----   ---  --  ---  -------------\n"
)

NAME_WIDTH = 25
POSITION_WIDTH = 5
PITCH_DIE_WIDTH = 8
HANDEDNESS_WIDTH = 4
BATTING_TARGET_WIDTH = 4
ON_BASE_TARGET_WIDTH = 5

Player = Union[BatterRecord, PitcherRecord]


@dataclass(frozen=True)
class RosterRow:
    name: str
    role: str
    handedness: str
    batting_target: int
    on_base_target: int
    traits: str
    placeholder: bool = False

    def cells(self) -> List[str]:
        return [
            self.name,
            self.role,
            self.handedness,
            str(self.batting_target),
            str(self.on_base_target),
            self.traits,
        ]


@dataclass(frozen=True)
class RosterSection:
    key: str
    title: str
    headers: Tuple[str, ...]
    rows: Tuple[RosterRow, ...]

    @property
    def is_pitching(self) -> bool:
        return self.headers == PITCHER_HEADERS


def team_label(team_name: Optional[str]) -> str:
    return (team_name or "").strip() or DEFAULT_TEAM_NAME


def export_filename(team_name: Optional[str], extension: str) -> str:
    return f"{team_label(team_name)}_roster.{extension}"


def _row(player: Player) -> RosterRow:
    role = player.pitch_die if isinstance(player, PitcherRecord) else player.position
    return RosterRow(
        name=player.name,
        role=role,
        handedness=player.handedness,
        batting_target=player.batting_target,
        on_base_target=player.on_base_target,
        traits=player.traits_text,
        placeholder=player.placeholder,
    )


def _section(key: str, title: str, headers: Tuple[str, ...], players: Sequence[Player]) -> RosterSection:
    return RosterSection(key=key, title=title, headers=headers, rows=tuple(_row(p) for p in players))


def roster_sections(roster: Roster) -> List[RosterSection]:
    """The four roster groups as display rows, in sheet order."""

    return [
        _section("lineup", "LINEUP", BATTER_HEADERS, roster.lineup),
        _section("bench", "BENCH", BATTER_HEADERS, roster.bench),
        _section("starting_pitchers", "STARTING PITCHERS", PITCHER_HEADERS, roster.starting_pitchers),
        _section("relief_pitchers", "RELIEF PITCHERS", PITCHER_HEADERS, roster.relief_pitchers),
    ]


def roster_to_csv(roster: Roster, team_name: Optional[str] = None) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([f"{team_label(team_name)} Roster"])
    for section in roster_sections(roster):
        writer.writerow([])
        writer.writerow([section.title])
        writer.writerow(section.headers)
        for row in section.rows:
            writer.writerow(row.cells())
    return buffer.getvalue()


def _text_line(row: RosterRow, role_width: int) -> str:
    return " ".join(
        [
            row.name.ljust(NAME_WIDTH),
            row.role.ljust(role_width),
            row.handedness.ljust(HANDEDNESS_WIDTH),
            str(row.batting_target).ljust(BATTING_TARGET_WIDTH),
            str(row.on_base_target).ljust(ON_BASE_TARGET_WIDTH),
            row.traits,
        ]
    )


def roster_to_text(roster: Roster, team_name: Optional[str] = None) -> str:
    parts = [f"{team_label(team_name)} ROSTER\n"]
    for section in roster_sections(roster):
        if section.is_pitching:
            header, role_width = _TEXT_PITCHER_HEADER, PITCH_DIE_WIDTH
        else:
            header, role_width = _TEXT_BATTER_HEADER, POSITION_WIDTH
        parts.append(f"\n{section.title}\n")
        parts.append(header)
        parts.extend(f"{_text_line(row, role_width)}\n" for row in section.rows)
    return "".join(parts)


__all__ = [
    "BATTER_HEADERS",
    "PITCHER_HEADERS",
    "RosterRow",
    "RosterSection",
    "export_filename",
    "roster_sections",
    "roster_to_csv",
    "roster_to_text",
    "team_label",
]
