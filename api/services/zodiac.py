import math

from .constants import ZODIAC_SIGNS
from .models import ZodiacPlacement


def normalize(lon: float) -> float:
    """Wrap an ecliptic longitude into [0, 360)."""

    r = float(lon) % 360.0
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if r >= 360.0 else r


def sign_index_from_lon(lon: float) -> int:
    return min(max(int(normalize(lon) // 30), 0), 11)


def zodiac_placement(lon: float) -> ZodiacPlacement:
    normalized = normalize(lon)
    label, key = ZODIAC_SIGNS[sign_index_from_lon(normalized)]
    return ZodiacPlacement(sign=label, sign_key=key, degree_in_sign=normalized % 30.0)


def format_degree(degree_in_sign: float) -> str:
    """Render a degree-within-sign as ``D° M' S"``.

    Each component is truncated, not rounded: 29.999 gives ``29° 59' 56"``.
    """

    deg = math.floor(degree_in_sign)
    minutes_float = (degree_in_sign - deg) * 60
    mins = math.floor(minutes_float)
    secs = math.floor((minutes_float - mins) * 60)
    return f"{deg}° {mins}' {secs}\""
