"""Providers for pitcher hitting ratings.

Pitcher batting is not modelled from season stats; each pitcher gets a Batter
Target and On-Base Target drawn from a fixed band. The provider is injected so
tests and reproducible runs can swap in a seeded or fixed source.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Tuple


PITCHER_BATTING_TARGET_RANGE: Tuple[int, int] = (10, 19)
PITCHER_ON_BASE_TARGET_RANGE: Tuple[int, int] = (15, 24)


class RatingSource(Protocol):
    def pitcher_batting_target(self) -> int: ...

    def pitcher_on_base_target(self) -> int: ...


class RandomRatingSource:
    """Uniform draws within the pitcher bands; pass ``seed`` for repeatable output."""

    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None):
        self.seed = seed
        self._rng = rng or random.Random(seed)

    def pitcher_batting_target(self) -> int:
        low, high = PITCHER_BATTING_TARGET_RANGE
        return self._rng.randint(low, high)

    def pitcher_on_base_target(self) -> int:
        low, high = PITCHER_ON_BASE_TARGET_RANGE
        return self._rng.randint(low, high)


class FixedRatingSource:
    def __init__(self, batting_target: int = 15, on_base_target: int = 20):
        self.batting_target = batting_target
        self.on_base_target = on_base_target

    def pitcher_batting_target(self) -> int:
        return self.batting_target

    def pitcher_on_base_target(self) -> int:
        return self.on_base_target
