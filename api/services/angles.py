from .models import ChartAngle, ChartAngles
from .zodiac import normalize, zodiac_placement


def opposite(lon: float) -> float:
    return normalize(lon + 180.0)


def _angle(kind: str, lon: float) -> ChartAngle:
    return ChartAngle(kind=kind, longitude=lon, placement=zodiac_placement(lon))


def chart_angles(ascendant: float, midheaven: float) -> ChartAngles:
    """Derive the four chart angles from the ascendant and midheaven.

    The descendant and imum coeli are always the 180° complements of the
    ascendant and midheaven; they are never read from the ephemeris.
    """

    return ChartAngles(
        ascendant=_angle("ascendant", normalize(ascendant)),
        descendant=_angle("descendant", opposite(ascendant)),
        midheaven=_angle("midheaven", normalize(midheaven)),
        imum_coeli=_angle("imum_coeli", opposite(midheaven)),
    )
