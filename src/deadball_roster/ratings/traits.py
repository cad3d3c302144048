"""Trait tags inferred from a player's season line.

Every category is an ordered list of rules. The first rule that matches
contributes its tag; categories never see each other's results, so a player
carries at most one tag per category. Missing or unreadable stats count as 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Mapping, Optional, Sequence, Tuple, TypeVar

from deadball_roster.ratings.converters import float_or_zero, int_or_zero


@dataclass(frozen=True)
class BattingLine:
    position: str
    home_runs: int
    slugging: float
    doubles: int
    plate_appearances: int
    strikeouts: int
    stolen_bases: int
    war: float

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]]) -> "BattingLine":
        return cls(
            position=(row.get("Pos") or "").strip(),
            home_runs=int_or_zero(row.get("HR")),
            slugging=float_or_zero(row.get("SLG")),
            doubles=int_or_zero(row.get("2B")),
            plate_appearances=int_or_zero(row.get("PA")),
            strikeouts=int_or_zero(row.get("SO")),
            stolen_bases=int_or_zero(row.get("SB")),
            war=float_or_zero(row.get("WAR")),
        )

    @property
    def strikeout_rate(self) -> float:
        if self.plate_appearances <= 0:
            return 0.0
        return self.strikeouts / self.plate_appearances


@dataclass(frozen=True)
class PitchingLine:
    innings_pitched: float
    strikeouts: int
    home_runs: int
    walks: int
    era: float

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]]) -> "PitchingLine":
        return cls(
            innings_pitched=float_or_zero(row.get("IP")),
            strikeouts=int_or_zero(row.get("SO")),
            home_runs=int_or_zero(row.get("HR")),
            walks=int_or_zero(row.get("BB")),
            era=float_or_zero(row.get("ERA")),
        )

    def per_nine(self, count: int) -> float:
        if self.innings_pitched <= 0:
            return 0.0
        return count * 9 / self.innings_pitched

    @property
    def strikeouts_per_nine(self) -> float:
        return self.per_nine(self.strikeouts)

    @property
    def home_runs_per_nine(self) -> float:
        return self.per_nine(self.home_runs)

    @property
    def walks_per_nine(self) -> float:
        return self.per_nine(self.walks)


LineT = TypeVar("LineT")


@dataclass(frozen=True)
class TraitRule(Generic[LineT]):
    tag: str
    applies: Callable[[LineT], bool]


@dataclass(frozen=True)
class TraitCategory(Generic[LineT]):
    name: str
    rules: Tuple[TraitRule[LineT], ...]

    def evaluate(self, line: LineT) -> Optional[str]:
        for rule in self.rules:
            if rule.applies(line):
                return rule.tag
        return None


_DEFENSIVE_POSITIONS = ("C", "SS", "CF")


BATTING_TRAIT_CATEGORIES: Tuple[TraitCategory[BattingLine], ...] = (
    TraitCategory(
        "power",
        (
            TraitRule("P++", lambda b: b.home_runs >= 35 or b.slugging >= 0.560),
            TraitRule("P+", lambda b: b.home_runs >= 25 or b.slugging >= 0.475),
            TraitRule("P-", lambda b: b.home_runs <= 5),
        ),
    ),
    TraitCategory(
        "contact",
        (
            TraitRule("C+", lambda b: b.doubles >= 35 or b.strikeout_rate < 0.12),
            TraitRule("C-", lambda b: b.strikeout_rate > 0.25),
        ),
    ),
    TraitCategory(
        "speed",
        (
            TraitRule("S+", lambda b: b.stolen_bases >= 20),
            TraitRule("S-", lambda b: b.stolen_bases == 0),
        ),
    ),
    TraitCategory(
        "defense",
        (
            TraitRule(
                "D+",
                lambda b: any(pos in b.position for pos in _DEFENSIVE_POSITIONS) and b.war > 1.5,
            ),
        ),
    ),
)


PITCHING_TRAIT_CATEGORIES: Tuple[TraitCategory[PitchingLine], ...] = (
    TraitCategory(
        "strikeouts",
        (TraitRule("K+", lambda p: p.strikeouts_per_nine >= 8),),
    ),
    TraitCategory(
        "ground_ball",
        (TraitRule("GB+", lambda p: p.home_runs_per_nine < 0.7 and p.era < 3.5),),
    ),
    TraitCategory(
        "control",
        (
            TraitRule("CN+", lambda p: p.walks_per_nine < 2),
            TraitRule("CN-", lambda p: p.walks_per_nine > 4),
        ),
    ),
    TraitCategory(
        "stamina",
        (TraitRule("ST+", lambda p: p.innings_pitched > 170),),
    ),
)


def _collect(categories: Sequence[TraitCategory[LineT]], line: LineT) -> Tuple[str, ...]:
    tags = (category.evaluate(line) for category in categories)
    return tuple(tag for tag in tags if tag is not None)


def batting_traits(row: Mapping[str, Optional[str]]) -> Tuple[str, ...]:
    """Trait tags for a raw batting row, in power/contact/speed/defense order."""

    return _collect(BATTING_TRAIT_CATEGORIES, BattingLine.from_row(row))


def pitching_traits(row: Mapping[str, Optional[str]]) -> Tuple[str, ...]:
    """Trait tags for a raw pitching row, in K/GB/control/stamina order."""

    return _collect(PITCHING_TRAIT_CATEGORIES, PitchingLine.from_row(row))
