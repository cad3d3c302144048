"""Roster assembly: lineup, bench, rotation and bullpen from player pools."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from deadball_roster.config import DEADBALL_RULES, PlaceholderDefaults, RosterRules
from deadball_roster.models import BatterRecord, PitcherRecord, Roster


logger = logging.getLogger(__name__)


class UnassignedPool:
    """Batters not yet placed, in priority order.

    Every successful take removes the batter from the pool, so a batter can
    fill at most one lineup or bench spot.
    """

    def __init__(self, batters: Iterable[BatterRecord]):
        self._remaining: List[BatterRecord] = list(batters)

    def __len__(self) -> int:
        return len(self._remaining)

    @property
    def remaining(self) -> Tuple[BatterRecord, ...]:
        return tuple(self._remaining)

    def take_first(
        self, predicate: Optional[Callable[[BatterRecord], bool]] = None
    ) -> Optional[BatterRecord]:
        for idx, batter in enumerate(self._remaining):
            if predicate is None or predicate(batter):
                return self._remaining.pop(idx)
        return None

    def take(self, count: int) -> List[BatterRecord]:
        taken = self._remaining[:count]
        del self._remaining[:count]
        return taken


def sort_by_war(batters: Iterable[BatterRecord]) -> List[BatterRecord]:
    # sorted() is stable with reverse=True, so WAR ties keep input order.
    return sorted(batters, key=lambda batter: batter.war, reverse=True)


def is_starter(pitcher: PitcherRecord, rules: RosterRules = DEADBALL_RULES) -> bool:
    if pitcher.games_started > rules.starter_min_starts:
        return True
    return (
        pitcher.games_played > 0
        and pitcher.games_started / pitcher.games_played > rules.starter_start_ratio
    )


def split_pitching_staff(
    pitchers: Iterable[PitcherRecord],
    rules: RosterRules = DEADBALL_RULES,
) -> Tuple[List[PitcherRecord], List[PitcherRecord]]:
    """Return (starters, relievers), each sorted by innings and cut to size."""

    starters: List[PitcherRecord] = []
    relievers: List[PitcherRecord] = []
    for pitcher in pitchers:
        (starters if is_starter(pitcher, rules) else relievers).append(pitcher)

    starters.sort(key=lambda p: p.innings_pitched, reverse=True)
    relievers.sort(key=lambda p: p.innings_pitched, reverse=True)

    dropped = starters[rules.starter_count :] + relievers[rules.reliever_count :]
    if dropped:
        logger.info(
            "Dropping %s pitchers beyond the %s-man rotation and %s-man bullpen: %s",
            len(dropped),
            rules.starter_count,
            rules.reliever_count,
            ", ".join(p.name for p in dropped),
        )
    return starters[: rules.starter_count], relievers[: rules.reliever_count]


def _placeholder_batter(defaults: PlaceholderDefaults, index: int, position: str) -> BatterRecord:
    return BatterRecord(
        name=defaults.name(index),
        position=position,
        handedness=defaults.handedness,
        batting_target=defaults.batting_target,
        on_base_target=defaults.on_base_target,
        placeholder=True,
    )


def _placeholder_pitcher(defaults: PlaceholderDefaults, index: int) -> PitcherRecord:
    return PitcherRecord(
        name=defaults.name(index),
        handedness=defaults.handedness,
        pitch_die=defaults.pitch_die or "d4",
        batting_target=defaults.batting_target,
        on_base_target=defaults.on_base_target,
        placeholder=True,
    )


def fill_lineup(pool: UnassignedPool, rules: RosterRules = DEADBALL_RULES) -> List[BatterRecord]:
    """Fill each field slot in order from ``pool``.

    Per slot: the best batter already at that position, else the best
    UT/OF/DH batter, else the best batter left at all. Empty pools leave a
    placeholder in the slot.
    """

    flex = set(rules.flex_positions)
    lineup: List[BatterRecord] = []
    for index, slot in enumerate(rules.field_positions, start=1):
        chosen = pool.take_first(lambda b: b.position == slot)
        if chosen is None:
            chosen = pool.take_first(lambda b: b.position in flex)
        if chosen is None:
            chosen = pool.take_first()
        if chosen is None:
            lineup.append(_placeholder_batter(rules.lineup_placeholder, index, slot))
            continue
        lineup.append(chosen.at_position(slot))
    return lineup


def select_bench(pool: UnassignedPool, rules: RosterRules = DEADBALL_RULES) -> List[BatterRecord]:
    return pool.take(rules.bench_size)


def pad_bench(bench: Sequence[BatterRecord], rules: RosterRules = DEADBALL_RULES) -> List[BatterRecord]:
    padded = list(bench)
    defaults = rules.bench_placeholder
    while len(padded) < rules.bench_size:
        padded.append(_placeholder_batter(defaults, len(padded) + 1, defaults.position or "UT"))
    return padded


def pad_pitchers(
    pitchers: Sequence[PitcherRecord],
    size: int,
    defaults: PlaceholderDefaults,
) -> List[PitcherRecord]:
    padded = list(pitchers)
    while len(padded) < size:
        padded.append(_placeholder_pitcher(defaults, len(padded) + 1))
    return padded


def assemble_roster(
    batters: Iterable[BatterRecord],
    pitchers: Iterable[PitcherRecord],
    *,
    rules: RosterRules = DEADBALL_RULES,
) -> Roster:
    """Build a full roster from normalized batters and pitchers."""

    pool = UnassignedPool(sort_by_war(batters))
    starters, relievers = split_pitching_staff(pitchers, rules)

    lineup = fill_lineup(pool, rules)
    bench = pad_bench(select_bench(pool, rules), rules)
    if len(pool):
        logger.debug("%s batters left off the roster", len(pool))

    roster = Roster(
        position_players=(*lineup, *bench),
        starting_pitchers=tuple(pad_pitchers(starters, rules.starter_count, rules.starter_placeholder)),
        relief_pitchers=tuple(pad_pitchers(relievers, rules.reliever_count, rules.reliever_placeholder)),
        rules=rules,
    )
    logger.debug(
        "Lineup: %s", ", ".join(f"{player.position} {player.name}" for player in roster.lineup)
    )
    return roster
