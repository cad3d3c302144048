"""Roster export helpers (CSV, text sheet, display rows)."""

from .sheet import (
    BATTER_HEADERS,
    PITCHER_HEADERS,
    RosterRow,
    RosterSection,
    export_filename,
    roster_sections,
    roster_to_csv,
    roster_to_text,
    team_label,
)

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
