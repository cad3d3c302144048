"""Single-stat conversions from season numbers to Deadball ratings."""

from __future__ import annotations

import math
from typing import Optional, Tuple


# (exclusive upper bound, tier); an ERA lands in the first tier whose bound it
# is strictly below.
PITCH_DIE_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (2.00, "d20"),
    (3.00, "d12"),
    (4.00, "d8"),
    (5.00, "d4"),
    (6.00, "-d4"),
    (7.00, "-d8"),
    (8.00, "-d12"),
)
PITCH_DIE_FLOOR = "-d20"
PITCH_DIE_UNKNOWN = "d4"


def parse_float(raw: object) -> Optional[float]:
    """Return ``raw`` as a finite float, or ``None`` when it cannot be read."""

    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        # float() also takes "1_000"; stat exports never use digit separators.
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def parse_int(raw: object) -> Optional[int]:
    """Return ``raw`` as an int, truncating decimal text such as ``"12.0"``."""

    if isinstance(raw, str):
        text = raw.strip()
        if "_" in text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
    value = parse_float(raw)
    if value is None:
        return None
    return int(value)


def float_or_zero(raw: object) -> float:
    value = parse_float(raw)
    return 0.0 if value is None else value


def int_or_zero(raw: object) -> int:
    value = parse_int(raw)
    return 0 if value is None else value


def _hundredths(raw: object) -> int:
    value = parse_float(raw)
    if value is None:
        return 0
    # Half-up rounding; round() would send .125 to 12.
    return int(math.floor(value * 100 + 0.5))


def batting_target(avg: object) -> int:
    """Batter Target from a batting average string (``".300"`` -> 30)."""

    return _hundredths(avg)


def on_base_target(obp: object) -> int:
    """On-Base Target from an on-base percentage string."""

    return _hundredths(obp)


def pitch_die(era: object) -> str:
    """Pitch Die tier for an ERA.

    Bounds are exclusive: an ERA of exactly 3.00 is not below 3.00, so it falls
    to ``d8`` rather than ``d12``. Unreadable input maps to ``d4``.
    """

    value = parse_float(era)
    if value is None:
        return PITCH_DIE_UNKNOWN
    for upper_bound, tier in PITCH_DIE_THRESHOLDS:
        if value < upper_bound:
            return tier
    return PITCH_DIE_FLOOR
