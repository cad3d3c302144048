"""Roster generation entry points and the current-roster session."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from deadball_roster.assembler.lineup import assemble_roster
from deadball_roster.config import DEADBALL_RULES, RosterRules
from deadball_roster.config_loader import ColumnProfile
from deadball_roster.export import team_label
from deadball_roster.ingest import (
    IngestReport,
    RawStatRow,
    apply_column_mapping,
    batting_rows_to_records,
    pitching_rows_to_records,
)
from deadball_roster.models import Roster
from deadball_roster.ratings import RandomRatingSource, RatingSource


logger = logging.getLogger(__name__)

MISSING_STATS_MESSAGE = "Please upload both batting and pitching stats files with valid data."
_RATING_SEED_ENV = "DEADBALL_RATING_SEED"


class MissingStatsError(ValueError):
    """Raised when a stat source is absent or empty at generation time."""

    def __init__(self, message: str = MISSING_STATS_MESSAGE):
        super().__init__(message)
        self.message = message


class RosterGenerationError(RuntimeError):
    """Raised when roster assembly fails for a reason other than missing input."""

    def __init__(self, cause: BaseException):
        message = f"Error generating roster: {cause}"
        super().__init__(message)
        self.message = message
        self.cause = cause


@dataclass
class RosterBuildOutput:
    roster: Roster
    batting_report: IngestReport
    pitching_report: IngestReport


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; ignoring", name, raw)
        return None


def rating_source_from_env() -> RatingSource:
    """Seeded source when ``DEADBALL_RATING_SEED`` is set, otherwise unseeded."""

    return RandomRatingSource(_env_int(_RATING_SEED_ENV))


def generate_roster(
    batting_rows: Optional[Sequence[RawStatRow]],
    pitching_rows: Optional[Sequence[RawStatRow]],
    *,
    rating_source: RatingSource | None = None,
    profile: ColumnProfile | None = None,
    rules: RosterRules = DEADBALL_RULES,
) -> RosterBuildOutput:
    if not batting_rows or not pitching_rows:
        raise MissingStatsError()

    profile = profile or ColumnProfile()
    batting = apply_column_mapping(batting_rows, profile.batting_columns)
    pitching = apply_column_mapping(pitching_rows, profile.pitching_columns)

    batters, batting_report = batting_rows_to_records(batting)
    pitchers, pitching_report = pitching_rows_to_records(
        pitching, rating_source=rating_source or RandomRatingSource()
    )
    roster = assemble_roster(batters, pitchers, rules=rules)
    logger.info(
        "Generated roster from %s/%s batting rows and %s/%s pitching rows",
        batting_report.accepted_rows,
        batting_report.total_rows,
        pitching_report.accepted_rows,
        pitching_report.total_rows,
    )
    return RosterBuildOutput(
        roster=roster,
        batting_report=batting_report,
        pitching_report=pitching_report,
    )


class RosterSession:
    """Uploaded stat rows plus the most recently generated roster.

    ``generate`` only replaces the current roster when a new one is fully
    built; on any failure the previous roster stays in place.
    """

    def __init__(self) -> None:
        self.batting_rows: list[dict] = []
        self.pitching_rows: list[dict] = []
        self.team_name: str = ""
        self.roster: Optional[Roster] = None
        self.last_output: Optional[RosterBuildOutput] = None

    @property
    def display_team_name(self) -> str:
        return team_label(self.team_name)

    def generate(
        self,
        *,
        team_name: Optional[str] = None,
        rating_source: RatingSource | None = None,
        profile: ColumnProfile | None = None,
        rules: RosterRules = DEADBALL_RULES,
    ) -> RosterBuildOutput:
        try:
            output = generate_roster(
                self.batting_rows,
                self.pitching_rows,
                rating_source=rating_source,
                profile=profile,
                rules=rules,
            )
        except MissingStatsError:
            raise
        except Exception as exc:
            logger.exception("Roster generation failed")
            raise RosterGenerationError(exc) from exc

        self.roster = output.roster
        self.last_output = output
        if team_name is not None:
            self.team_name = team_name.strip()
        return output
