"""Configuration helpers for roster rules."""

from .roster import DEADBALL_RULES, PlaceholderDefaults, RosterRules, get_rules

__all__ = [
    "DEADBALL_RULES",
    "PlaceholderDefaults",
    "RosterRules",
    "get_rules",
]
