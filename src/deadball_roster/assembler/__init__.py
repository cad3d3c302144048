"""Roster assembly built on normalized batter and pitcher pools."""

from .lineup import UnassignedPool, assemble_roster, fill_lineup, split_pitching_staff
from .service import (
    MISSING_STATS_MESSAGE,
    MissingStatsError,
    RosterBuildOutput,
    RosterGenerationError,
    RosterSession,
    generate_roster,
    rating_source_from_env,
)

__all__ = [
    "MISSING_STATS_MESSAGE",
    "MissingStatsError",
    "RosterBuildOutput",
    "RosterGenerationError",
    "RosterSession",
    "UnassignedPool",
    "assemble_roster",
    "fill_lineup",
    "generate_roster",
    "rating_source_from_env",
    "split_pitching_staff",
]
