"""Load batting/pitching exports and emit canonical player records."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, TextIO, Tuple

from deadball_roster.models import BatterRecord, PitcherRecord
from deadball_roster.ratings import (
    RandomRatingSource,
    RatingSource,
    batting_target,
    batting_traits,
    on_base_target,
    parse_float,
    parse_int,
    pitch_die,
    pitching_traits,
)
from deadball_roster.ratings.converters import float_or_zero, int_or_zero


logger = logging.getLogger(__name__)

RawStatRow = Mapping[str, Optional[str]]

BATTING_COLUMNS: Tuple[str, ...] = ("Player", "Pos", "BA", "OBP", "HR", "SLG", "2B", "PA", "SO", "SB", "WAR", "G")
PITCHING_COLUMNS: Tuple[str, ...] = ("Player", "ERA", "IP", "SO", "HR", "BB", "G", "GS")

# Substring scan order; the first hit wins, so "CF" resolves to "C".
POSITION_SCAN_ORDER: Tuple[str, ...] = ("C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "OF", "DH")
DEFAULT_POSITION = "UT"

_HANDEDNESS_MARKS = {"*": "L", "#": "S"}


@dataclass(frozen=True)
class IngestReport:
    total_rows: int
    accepted_rows: int

    @property
    def skipped_rows(self) -> int:
        return self.total_rows - self.accepted_rows


def load_stat_rows(handle: TextIO) -> List[Dict[str, str]]:
    reader = csv.DictReader(handle)
    rows: List[Dict[str, str]] = []
    for raw in reader:
        row = {
            key.strip(): value.strip() if isinstance(value, str) else value
            for key, value in raw.items()
            if key is not None
        }
        if not any(row.values()):
            continue
        rows.append(row)
    return rows


def load_stat_csv(path: Path) -> List[Dict[str, str]]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        return load_stat_rows(f)


def parse_stat_text(text: str) -> List[Dict[str, str]]:
    return load_stat_rows(StringIO(text.lstrip("\ufeff"), newline=""))


def apply_column_mapping(
    rows: Iterable[RawStatRow],
    mapping: Mapping[str, str] | None,
) -> List[Dict[str, Optional[str]]]:
    """Copy source columns onto canonical names; ``A|B`` joins columns with a space."""

    if not mapping:
        return [dict(row) for row in rows]

    mapped: List[Dict[str, Optional[str]]] = []
    for row in rows:
        updated = dict(row)
        for canonical, source in mapping.items():
            columns = [part.strip() for part in source.split("|")] if "|" in source else [source]
            parts = [(row.get(col) or "").strip() for col in columns if row.get(col)]
            if parts:
                updated[canonical] = " ".join(parts)
        mapped.append(updated)
    return mapped


def _present(row: RawStatRow, column: str) -> bool:
    value = row.get(column)
    return value is not None and bool(str(value).strip())


def clean_name(raw_name: Optional[str]) -> str:
    """Strip surrounding whitespace and a single trailing handedness mark."""

    name = (raw_name or "").strip()
    if name and name[-1] in _HANDEDNESS_MARKS:
        return name[:-1]
    return name


def handedness_from_name(raw_name: Optional[str]) -> str:
    name = (raw_name or "").strip()
    if not name:
        return "R"
    return _HANDEDNESS_MARKS.get(name[-1], "R")


def resolve_position(raw_position: Optional[str]) -> str:
    text = (raw_position or "").strip()
    if not text:
        return DEFAULT_POSITION
    for code in POSITION_SCAN_ORDER:
        if code in text:
            return code
    return DEFAULT_POSITION


def is_eligible_batting_row(row: RawStatRow) -> bool:
    if not _present(row, "Player") or not _present(row, "BA"):
        return False
    plate_appearances = parse_int(row.get("PA")) or 0
    games = parse_int(row.get("G")) or 0
    return plate_appearances > 0 or games > 0


def is_eligible_pitching_row(row: RawStatRow) -> bool:
    if not _present(row, "Player") or not _present(row, "ERA"):
        return False
    innings = parse_float(row.get("IP"))
    return innings is not None and innings > 0


def batting_row_to_record(row: RawStatRow, *, row_number: Optional[int] = None) -> BatterRecord:
    raw_name = row.get("Player")
    return BatterRecord(
        name=clean_name(raw_name),
        position=resolve_position(row.get("Pos")),
        handedness=handedness_from_name(raw_name),
        batting_target=batting_target(row.get("BA")),
        on_base_target=on_base_target(row.get("OBP")),
        traits=batting_traits(row),
        games_played=int_or_zero(row.get("G")),
        war=float_or_zero(row.get("WAR")),
        row_number=row_number,
    )


def pitching_row_to_record(
    row: RawStatRow,
    *,
    rating_source: RatingSource,
    row_number: Optional[int] = None,
) -> PitcherRecord:
    raw_name = row.get("Player")
    return PitcherRecord(
        name=clean_name(raw_name),
        handedness=handedness_from_name(raw_name),
        pitch_die=pitch_die(row.get("ERA")),
        batting_target=rating_source.pitcher_batting_target(),
        on_base_target=rating_source.pitcher_on_base_target(),
        traits=pitching_traits(row),
        games_played=int_or_zero(row.get("G")),
        games_started=int_or_zero(row.get("GS")),
        innings_pitched=float_or_zero(row.get("IP")),
        row_number=row_number,
    )


def batting_rows_to_records(rows: Sequence[RawStatRow]) -> Tuple[List[BatterRecord], IngestReport]:
    records: List[BatterRecord] = []
    for row_number, row in enumerate(rows, start=1):
        if not is_eligible_batting_row(row):
            continue
        records.append(batting_row_to_record(row, row_number=row_number))
    report = IngestReport(total_rows=len(rows), accepted_rows=len(records))
    logger.debug(
        "Batting rows: %s accepted, %s skipped", report.accepted_rows, report.skipped_rows
    )
    return records, report


def pitching_rows_to_records(
    rows: Sequence[RawStatRow],
    *,
    rating_source: RatingSource | None = None,
) -> Tuple[List[PitcherRecord], IngestReport]:
    source = rating_source or RandomRatingSource()
    records: List[PitcherRecord] = []
    for row_number, row in enumerate(rows, start=1):
        if not is_eligible_pitching_row(row):
            continue
        records.append(pitching_row_to_record(row, rating_source=source, row_number=row_number))
    report = IngestReport(total_rows=len(rows), accepted_rows=len(records))
    logger.debug(
        "Pitching rows: %s accepted, %s skipped", report.accepted_rows, report.skipped_rows
    )
    return records, report
