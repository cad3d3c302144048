"""Stat-to-rating conversions, trait inference and pitcher rating sources."""

from .converters import batting_target, on_base_target, parse_float, parse_int, pitch_die
from .source import FixedRatingSource, RandomRatingSource, RatingSource
from .traits import (
    BATTING_TRAIT_CATEGORIES,
    PITCHING_TRAIT_CATEGORIES,
    BattingLine,
    PitchingLine,
    TraitCategory,
    TraitRule,
    batting_traits,
    pitching_traits,
)

__all__ = [
    "BATTING_TRAIT_CATEGORIES",
    "PITCHING_TRAIT_CATEGORIES",
    "BattingLine",
    "FixedRatingSource",
    "PitchingLine",
    "RandomRatingSource",
    "RatingSource",
    "TraitCategory",
    "TraitRule",
    "batting_target",
    "batting_traits",
    "on_base_target",
    "parse_float",
    "parse_int",
    "pitch_die",
    "pitching_traits",
]
